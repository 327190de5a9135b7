"""Entry point for the task tracker command."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .commands import CommandHandler
from .interactive import InteractiveMode
from .manager import TaskManager

_INTERACTIVE_WORDS = frozenset({"interactive", "-i", "--interactive"})


def is_interactive_mode(args: Sequence[str]) -> bool:
    """Return True when the first word asks for the interactive session."""
    return bool(args) and args[0] in _INTERACTIVE_WORDS


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command, or the interactive session, against tasks.json."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        manager = TaskManager()
        if is_interactive_mode(args):
            InteractiveMode(manager).start()
            return 0
        handler = CommandHandler(manager)
        if not args:
            handler.display_help()
            return 0
        handler.process(args)
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())