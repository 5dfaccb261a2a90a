"""CLI application entry point and command routing for zenode-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~zenode_cli.exceptions.ZenodeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — normalization and routing are
  delegated to :class:`~zenode_cli.core.dispatch_service.DispatchService`.
* Parsing is pure: :func:`parse_command` turns argv into one typed
  command record and never touches the network.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable

from zenode_cli.cli import exit_codes
from zenode_cli.cli.console import console, escape_markup
from zenode_cli.cli.logging_setup import configure_logging
from zenode_cli.config import Settings, load_settings
from zenode_cli.core.fields import split_field_string
from zenode_cli.core.models import (
    Command,
    CreateInstance,
    CreateSchema,
    DeleteInstance,
    UpdateInstance,
)
from zenode_cli.core.protocols import Operator
from zenode_cli.exceptions import UsageError, ZenodeError
from zenode_cli.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _log_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-l",
        "--log",
        action="store_true",
        help="Print the request (with parsed fields) before sending it.",
    )
    parent.add_argument(
        "--confirm",
        action="store_true",
        help="Show the request and ask for confirmation before sending it.",
    )
    return parent


def _field_options() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    group = parent.add_mutually_exclusive_group()
    group.add_argument(
        "-f",
        "--field",
        dest="field",
        action="append",
        default=None,
        metavar="KEY:VALUE",
        help="One field per flag, e.g. `-f name:str -f age:int`. Repeatable.",
    )
    group.add_argument(
        "-F",
        "--fields",
        dest="fields_string",
        default=None,
        metavar="KEY:VALUE,...",
        help="All fields in one string, e.g. `-F name:bob,age:42`. Whitespace is removed.",
    )
    return parent


def _add_schema_id(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--schema-id",
        required=True,
        help="Schema id in the shape `<schema-name>_0203a905630971fa...`.",
    )


def _add_view_id(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--view-id",
        required=True,
        help="Id of the latest view in the shape `00202aaa1ef8ef9d...`.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands (short aliases in brackets):

    * ``create-schema`` (``cs``)   — name, description and fields
    * ``create-instance`` (``ci``) — schema id and fields
    * ``update-instance`` (``ui``) — schema id, view id and changed fields
    * ``delete-instance`` (``di``) — schema id and latest view id
    * ``doctor``                   — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="zenode",
        description="Create schemas and manage their instances on a node.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Emit debug logging on stderr.",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        metavar="PATH",
        help="Read settings from PATH instead of ./.env.",
    )
    parser.set_defaults(command_name=None)

    log_options = _log_options()
    field_options = _field_options()
    subparsers = parser.add_subparsers(title="commands", metavar="COMMAND")

    create_schema = subparsers.add_parser(
        "create-schema",
        aliases=["cs"],
        parents=[field_options, log_options],
        help="Create schema, requires name, description and fields.",
    )
    create_schema.add_argument("-n", "--name", required=True, help="Name of the schema.")
    create_schema.add_argument(
        "-d", "--description", required=True, help="Description of the schema.",
    )
    create_schema.set_defaults(command_name="create-schema")

    create_instance = subparsers.add_parser(
        "create-instance",
        aliases=["ci"],
        parents=[field_options, log_options],
        help="Create instance, requires schema id and fields.",
    )
    _add_schema_id(create_instance)
    create_instance.set_defaults(command_name="create-instance")

    update_instance = subparsers.add_parser(
        "update-instance",
        aliases=["ui"],
        parents=[field_options, log_options],
        help="Update instance, requires schema id, view id and fields to update.",
    )
    _add_schema_id(update_instance)
    _add_view_id(update_instance)
    update_instance.set_defaults(command_name="update-instance")

    delete_instance = subparsers.add_parser(
        "delete-instance",
        aliases=["di"],
        parents=[log_options],
        help="Delete instance, requires schema id and latest view id.",
    )
    _add_schema_id(delete_instance)
    _add_view_id(delete_instance)
    delete_instance.set_defaults(command_name="delete-instance")

    doctor = subparsers.add_parser("doctor", help="Check configuration and node connectivity.")
    doctor.set_defaults(command_name="doctor")
    return parser


# ---------------------------------------------------------------------------
# Namespace -> typed command (pure)
# ---------------------------------------------------------------------------

def _require(value: str, flag: str) -> str:
    """Reject blank values argparse accepted as present."""
    if not value.strip():
        raise UsageError(f"{flag} must not be empty.", hint=f"Pass a value to {flag}.")
    return value


def _field_specs(args: argparse.Namespace) -> tuple[str, ...]:
    if args.fields_string is not None:
        return split_field_string(args.fields_string)
    return tuple(args.field or ())


def _create_schema(args: argparse.Namespace) -> Command:
    return CreateSchema(
        name=_require(args.name, "--name"),
        description=args.description,
        fields=_field_specs(args),
        log=args.log,
    )


def _create_instance(args: argparse.Namespace) -> Command:
    return CreateInstance(
        schema_id=_require(args.schema_id, "--schema-id"),
        fields=_field_specs(args),
        log=args.log,
    )


def _update_instance(args: argparse.Namespace) -> Command:
    return UpdateInstance(
        schema_id=_require(args.schema_id, "--schema-id"),
        view_id=_require(args.view_id, "--view-id"),
        fields=_field_specs(args),
        log=args.log,
    )


def _delete_instance(args: argparse.Namespace) -> Command:
    return DeleteInstance(
        schema_id=_require(args.schema_id, "--schema-id"),
        view_id=_require(args.view_id, "--view-id"),
        log=args.log,
    )


_COMMAND_BUILDERS: dict[str, Callable[[argparse.Namespace], Command]] = {
    "create-schema": _create_schema,
    "create-instance": _create_instance,
    "update-instance": _update_instance,
    "delete-instance": _delete_instance,
}


def command_from_args(args: argparse.Namespace) -> Command | None:
    """Materialize the typed command for parsed *args*, or ``None``.

    Raises
    ------
    UsageError
        When a required value is blank.
    FieldShapeError
        When the single-string field input has empty segments.
    """
    builder = _COMMAND_BUILDERS.get(args.command_name)
    if builder is None:
        return None
    return builder(args)


def parse_command(argv: list[str] | None = None) -> Command | None:
    """Parse *argv* straight into a command (``None`` without a sub-command)."""
    return command_from_args(build_parser().parse_args(argv))


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_operator(settings: Settings) -> Operator:
    """Instantiate the Operator used for real invocations."""
    from zenode_cli.infra.http_operator import HttpOperator

    return HttpOperator(settings)


def _handle_command(command: Command, settings: Settings, *, confirm: bool) -> int:
    """Normalize, optionally preview and confirm, then call the Operator once.

    Flow:
    1. Normalize the raw fields (aborts before any call on bad input).
    2. Render the preview when ``--log`` or ``--confirm`` is set.
    3. Ask for confirmation when ``--confirm`` is set.
    4. Await the single Operator call and print the identifier.
    """
    from zenode_cli.cli.presenter import print_identifier, print_preview
    from zenode_cli.core.dispatch_service import DispatchService
    from zenode_cli.core.preview import build_preview

    fields = DispatchService.prepare(command)

    if command.log or confirm:
        preview = build_preview(command, fields)
        print_preview(preview)
        if confirm:
            from zenode_cli.cli.confirm import confirm_dispatch

            confirm_dispatch(preview.heading)

    service = DispatchService(_build_operator(settings))
    identifier = asyncio.run(service.execute(command, fields))
    print_identifier(identifier)
    return exit_codes.SUCCESS


def _handle_doctor(env_file: str | None) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from zenode_cli.cli.doctor import run_doctor

    return run_doctor(env_file)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the zenode CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command_name is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command_name == "doctor":
        configure_logging(args.debug)
        return _handle_doctor(args.env_file)

    command = command_from_args(args)
    if command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    settings = load_settings(args.env_file)
    configure_logging(args.debug or settings.debug)
    return _handle_command(command, settings, confirm=args.confirm)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ZenodeError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
