"""Allow ``python -m file_clip`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m file_clip`` behaves identically to the ``file-clip``
console script.
"""

from __future__ import annotations

from file_clip.cli.app import cli

if __name__ == "__main__":
    cli()
