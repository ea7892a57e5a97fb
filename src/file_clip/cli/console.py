"""CLI console helpers built on Rich.

All diagnostics go to standard error so that standard output carries
nothing but ``list`` output, which scripts may pipe.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def get_rich_console() -> Console:
	"""Create a Rich console instance targeting stderr.

	Soft wrapping keeps long paths on one line regardless of terminal
	width.
	"""
	return Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy resolving the console per call."""

	def print(self, *objects: object) -> None:
		get_rich_console().print(*objects)


def quote(text: str) -> str:
	"""Escape *text* (typically a path) for safe use inside Rich markup."""
	return escape(text)


console = _ConsoleProxy()
