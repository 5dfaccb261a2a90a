"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) remain functional even when
it is not installed.  Diagnostics go to stderr through :data:`console`;
results meant for pipes (identifiers) go to stdout through :data:`output`.
"""

from __future__ import annotations

import re
import sys
from typing import Any, TextIO

from zenode_cli.exceptions import EnvironmentError

# Only the styles this package writes into its own markup.
_STYLE_NAMES = "bold red|bold green|bold cyan|bold|dim|red|green|yellow|cyan|magenta|bright_green|default"
_MARKUP_TAG = re.compile(rf"\[/?(?:{_STYLE_NAMES})\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, highlight=False, emoji=False)


def strip_markup(text: str) -> str:
	"""Remove this package's own style tags for plain-text fallback output.

	Bracketed user text such as ``[draft]`` is left alone.
	"""
	return _MARKUP_TAG.sub("", text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def _stream(self) -> TextIO:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			plain = [strip_markup(obj) if isinstance(obj, str) else obj for obj in objects]
			print(*plain, file=self._stream())
			return
		rich_console.print(*objects)

	def print_row(self, label: str, value: str, style: str = "default") -> None:
		"""Print ``label: value`` on one line with *value* taken literally.

		*value* is never parsed for markup or emoji codes and is not
		wrapped, so the line shows exactly the text that was sent.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(f"{label}: {value}", file=self._stream())
			return
		from rich.text import Text

		rich_console.print(Text.assemble(f"{label}: ", (value, style)), soft_wrap=True)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)


def escape_markup(text: str) -> str:
	"""Escape user-supplied *text* so Rich does not read it as markup."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)
