"""A read-eval loop that runs task commands typed at a prompt."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from .commands import CommandHandler
from .manager import TaskManager

_EXIT_COMMANDS = frozenset({"exit", "quit", "q"})
_RULE = "-" * 50
_WIDE_RULE = "-" * 60

_HELP_LINES = (
    "\n\033[1;36m Interactive Commands\033[0m \033[2mv3.0.0\033[0m",
    f"\033[2m{_WIDE_RULE}\033[0m",
    "\n\033[3m\033[1;37mTask Management\033[0m",
    '\033[1;32madd\033[0m \033[2m"description"\033[0m [\033[2m--priority\033[0m] '
    "[\033[2m--due\033[0m]   \033[2mCreate new task\033[0m",
    "\033[1;32mlist\033[0m [\033[2m--priority\033[0m] [\033[2m--status\033[0m] "
    "[\033[2m--sort\033[0m]        \033[2mShow tasks\033[0m",
    "\033[1;32mupdate\033[0m \033[2m<id>\033[0m [\033[2moptions\033[0m]"
    "                      \033[2mModify task\033[0m",
    "\033[1;32mdelete\033[0m \033[2m<id>\033[0m  |  \033[1;32mdone\033[0m \033[2m<id>\033[0m"
    "  |  \033[1;32mprogress\033[0m \033[2m<id>\033[0m   \033[2mQuick actions\033[0m",
    "\n\033[3m\033[1;37mAdvanced Features\033[0m",
    '\033[1;34msearch\033[0m \033[2m"keyword"\033[0m [\033[2mfilters\033[0m]'
    "                \033[2mFind tasks\033[0m",
    "\033[1;34mfilter\033[0m \033[2mpriority|status\033[0m \033[2m<value>\033[0m"
    "           \033[2mFilter by criteria\033[0m",
    "\033[1;34msort\033[0m \033[2mpriority|due_date|status\033[0m [\033[2masc|desc\033[0m]"
    "   \033[2mSort tasks\033[0m",
    "\033[1;34mdue\033[0m \033[2mtoday|<date>\033[0m  |  \033[1;34moverdue\033[0m  |  "
    "\033[1;34mtoday\033[0m      \033[2mDate views\033[0m",
    "\n\033[3m\033[1;37mSession Controls\033[0m",
    "\033[1;35mhelp\033[0m, \033[1;35mh\033[0m        \033[2mShow this help\033[0m",
    "\033[1;35mstats\033[0m           \033[2mTask statistics\033[0m",
    "\033[1;35mclear\033[0m, \033[1;35mcls\033[0m     \033[2mClear screen\033[0m",
    "\033[1;35mexit\033[0m, \033[1;35mquit\033[0m, \033[1;35mq\033[0m  \033[2mEnd session\033[0m",
    "\n\033[3m\033[2mExamples:\033[0m",
    '\033[2m  add "Review code" -p high -d 2025-06-15\033[0m',
    "\033[2m  list --sort priority --status pending\033[0m",
    '\033[2m  search "meeting" --priority high\033[0m',
    "\033[2m  sort due_date desc\033[0m",
    f"\033[2m{_WIDE_RULE}\033[0m",
)


def tokenize(text: str) -> list[str]:
    """Split a line on spaces, keeping double-quoted runs together.

    A quote preceded by a backslash is kept as an ordinary character.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    previous = ""
    for char in text:
        if char == '"' and previous != "\\":
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
        previous = char
    if current:
        tokens.append("".join(current))
    return tokens


def is_exit_command(command: str) -> bool:
    """Return True for exit, quit or q."""
    return command in _EXIT_COMMANDS


class InteractiveMode:
    """Prompts for commands until the user exits or input ends."""

    def __init__(
        self,
        manager: TaskManager,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.manager = manager
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self.commands = CommandHandler(manager, stdout, stderr)
        self.running = False
        self.session_commands = 0

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def start(self) -> None:
        """Run the session until exit or end of input."""
        self.running = True
        self.session_commands = 0

        self.clear_screen()
        self.display_welcome()

        while self.running:
            self.display_prompt()
            line = self.stdin.readline()
            if not line:
                self._say("")
                break
            line = line.rstrip("\n").strip(" ")
            if not line:
                continue
            args = self.parse_input(line)
            if args:
                if is_exit_command(args[0]):
                    break
                self.process_command(args)
                self.session_commands += 1

        self.display_goodbye()
        self.stop()

    def stop(self) -> None:
        """End the session; every change is already saved by the manager."""
        self.running = False

    def display_welcome(self) -> None:
        self._say(
            "\n\033[1;36m Task Tracker Interactive\033[0m \033[2mv3.0.0\033[0m\n",
            f"\033[2m{_RULE}\033[0m",
            "\033[3mWelcome to the future of task management\033[0m ",
            "\033[2mType \033[0m\033[1mhelp\033[0m\033[2m for commands | \033[0m"
            "\033[1mexit\033[0m\033[2m to quit\033[0m",
            f"\033[2m{_RULE}\033[0m",
        )
        self.display_stats()
        self._say("")

    def display_prompt(self) -> None:
        self.stdout.write("\n\033[1;35mtask\033[0m\033[1;34m-tracker\033[0m \033[2m >\033[0m ")
        self.stdout.flush()

    def display_goodbye(self) -> None:
        self._say(
            f"\n\033[2m{_RULE}\033[0m",
            "\033[3m\033[1;36mSession Complete\033[0m",
            f"\033[2m{_RULE}\033[0m",
            f"\033[2mCommands executed:\033[0m \033[1m{self.session_commands}\033[0m",
            "\033[2mAuto-save:\033[0m \033[1;32m\033[0m \033[2mEnabled\033[0m",
            "\n\033[3mThanks for using Task Tracker!\033[0m \033[2mAll changes saved.\033[0m",
            "\033[1;33m Stay productive! \033[0m\n",
        )

    def display_stats(self) -> None:
        """Print task counts by status and any overdue or due-today alerts."""
        total = len(self.manager.all_tasks())
        pending = len(self.manager.tasks_by_status("pending"))
        active = len(self.manager.tasks_by_status("in_progress"))
        done = len(self.manager.tasks_by_status("done"))
        overdue = len(self.manager.overdue_tasks())
        due_today = len(self.manager.tasks_due_today())

        self._say(
            "\n\033[3m\033[1;37mTask Overview\033[0m",
            f"\033[2mTotal:\033[0m \033[1m{total}\033[0m"
            f"\033[2m  |  Pending:\033[0m \033[1;33m{pending}\033[0m"
            f"\033[2m  |  Active:\033[0m \033[1;34m{active}\033[0m"
            f"\033[2m  |  Done:\033[0m \033[1;32m{done}\033[0m",
        )

        if overdue or due_today:
            alerts = "\033[2mAlerts:\033[0m"
            if overdue:
                alerts += (
                    f" \033[1;31m⚠\033[0m \033[2mOverdue:\033[0m \033[1;31m{overdue}\033[0m"
                )
            if due_today:
                alerts += (
                    f" \033[1;33m⏰\033[0m \033[2mDue today:\033[0m \033[1;33m{due_today}\033[0m"
                )
            self._say(alerts)

    def parse_input(self, text: str) -> list[str]:
        return tokenize(text)

    def process_command(self, args: Sequence[str]) -> None:
        """Handle session commands, then pass the words to the command handler."""
        if not args:
            return
        try:
            self._handle_special(args[0])
            if self.running:
                self.commands.process(args)
        except Exception as exc:  # noqa: BLE001 - a bad command must not end the session
            print(f"Error: {exc}", file=self.stderr)

    def _handle_special(self, command: str) -> None:
        if command in ("help", "h"):
            self.show_help()
        elif command == "stats":
            self.display_stats()
        elif command in ("clear", "cls"):
            self.clear_screen()
            self.display_welcome()
        elif is_exit_command(command):
            self.running = False

    def clear_screen(self) -> None:
        """Clear the terminal with escape codes, and the system command on a real terminal."""
        self.stdout.write("\033[2J\033[H")
        self.stdout.flush()

        isatty = getattr(self.stdout, "isatty", None)
        if not (callable(isatty) and isatty()):
            return
        command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
        try:
            failed = subprocess.run(command, check=False).returncode != 0
        except OSError:
            failed = True
        if failed:
            self.stdout.write("\n" * 50)
            self.stdout.flush()

    def show_help(self) -> None:
        self._say(*_HELP_LINES)