"""
Tests for the command line entry point.
"""

import pytest

import main
from logic.ai_player import Difficulty


@pytest.fixture
def fake_run(monkeypatch):
    """Replace the interactive loop, recording the app it was given."""
    apps = []

    def _install(behaviour=None):
        def run(ui):
            apps.append(ui.app)
            if behaviour is not None:
                raise behaviour
        monkeypatch.setattr(main.TicTacToeUI, "run", run)
        return apps
    return _install


def test_defaults():
    args = main.build_parser().parse_args([])
    assert args.size == 3
    assert args.difficulty == "hard"
    assert args.log_file == ".log"
    assert not args.debug


@pytest.mark.parametrize("size", ["0", "-2", "three"])
def test_rejects_bad_size(size):
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["--size", size])


def test_runs_app_with_options(fake_run, tmp_path):
    apps = fake_run()
    log_file = tmp_path / "game.log"
    code = main.main(["--size", "5", "--difficulty", "easy", "--log-file", str(log_file), "--debug"])

    assert code == 0
    assert apps[0].size == 5
    assert apps[0].ai.difficulty == Difficulty.EASY
    content = log_file.read_text(encoding="utf-8")
    assert "Starting 5x5 TicTacToe" in content
    assert "Goodbye!" in content


def test_keyboard_interrupt_exits_cleanly(fake_run, tmp_path):
    fake_run(KeyboardInterrupt())
    log_file = tmp_path / "game.log"
    assert main.main(["--log-file", str(log_file)]) == 0
    assert "Interrupted by user" in log_file.read_text(encoding="utf-8")


def test_crash_is_logged_and_reraised(fake_run, tmp_path):
    fake_run(RuntimeError("boom"))
    log_file = tmp_path / "game.log"
    with pytest.raises(RuntimeError):
        main.main(["--log-file", str(log_file)])
    content = log_file.read_text(encoding="utf-8")
    assert "[FATAL]" in content
    assert "RuntimeError: boom" in content
