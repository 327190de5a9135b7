import io

import pytest

from tasktrack.commands import HELP_TEXT
from tasktrack.interactive import InteractiveMode, is_exit_command, tokenize
from tasktrack.manager import TaskManager


@pytest.fixture
def manager(tmp_path):
    return TaskManager(tmp_path / "tasks.json")


def make_session(manager, text=""):
    out, err = io.StringIO(), io.StringIO()
    session = InteractiveMode(manager, io.StringIO(text), out, err)
    return session, out, err


def test_tokenize_keeps_quoted_words_together():
    assert tokenize('add "Review code" -p high') == ["add", "Review code", "-p", "high"]


def test_tokenize_collapses_repeated_spaces():
    assert tokenize("list   --sort  priority ") == ["list", "--sort", "priority"]


def test_tokenize_keeps_escaped_quote():
    assert tokenize('add a\\"b') == ["add", 'a\\"b']


def test_tokenize_empty_text():
    assert tokenize("") == []


@pytest.mark.parametrize("word", ["exit", "quit", "q"])
def test_exit_commands(word):
    assert is_exit_command(word) is True


@pytest.mark.parametrize("word", ["list", "Exit", "", "quitting"])
def test_non_exit_commands(word):
    assert is_exit_command(word) is False


def test_parse_input_matches_tokenize(manager):
    session, _, _ = make_session(manager)
    line = 'search "meeting" --priority high'
    assert session.parse_input(line) == tokenize(line)


def test_session_adds_task_and_ends_on_exit(manager):
    session, out, _ = make_session(manager, 'add "Buy milk"\nexit\nadd "Never"\n')
    session.start()
    assert [task.description for task in manager.all_tasks()] == ["Buy milk"]
    assert "Session Complete" in out.getvalue()
    assert session.session_commands == 1
    assert session.running is False


def test_session_ends_at_end_of_input(manager):
    session, out, _ = make_session(manager, 'add "First"\n\n   \nadd "Second"\n')
    session.start()
    assert len(manager) == 2
    assert session.session_commands == 2
    assert "Thanks for using Task Tracker!" in out.getvalue()


def test_session_output_starts_with_clear_codes(manager):
    session, out, _ = make_session(manager, "q\n")
    session.start()
    assert out.getvalue().startswith("\033[2J\033[H")
    assert session.session_commands == 0


def test_help_shows_session_and_command_help(manager):
    session, out, _ = make_session(manager)
    session.running = True
    session.process_command(["help"])
    text = out.getvalue()
    assert "Session Controls" in text
    assert HELP_TEXT in text


def test_stats_counts_tasks_by_status(manager):
    manager.add_task("One")
    manager.add_task("Two")
    manager.update_task(2, status="done")
    session, out, _ = make_session(manager)
    session.display_stats()
    text = out.getvalue()
    assert f"Total:\033[0m \033[1m{len(manager)}" in text
    assert f"Done:\033[0m \033[1;32m{len(manager.tasks_by_status('done'))}" in text
    assert "Alerts" not in text


def test_stats_reports_overdue_alert(manager):
    manager.add_task("Old", "low", "2000-01-01")
    session, out, _ = make_session(manager)
    session.display_stats()
    assert "Overdue:" in out.getvalue()


def test_command_errors_go_to_stderr(manager):
    session, _, err = make_session(manager)
    session.running = True
    session.process_command(["delete", "99"])
    assert "Task with ID 99 not found." in err.getvalue()


def test_exit_word_stops_running_without_dispatch(manager):
    session, _, err = make_session(manager)
    session.running = True
    session.process_command(["quit"])
    assert session.running is False
    assert err.getvalue() == ""


def test_empty_args_do_nothing(manager):
    session, out, err = make_session(manager)
    session.process_command([])
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_prompt_text(manager):
    session, out, _ = make_session(manager)
    session.display_prompt()
    assert "task" in out.getvalue()
    assert out.getvalue().endswith(" ")