import sys

import pytest

from submission_validator import main


@pytest.fixture
def fake_exit(monkeypatch):
    called = {}

    def _exit(code):
        called["exit"] = code
        raise SystemExit(code)

    monkeypatch.setattr(sys, "exit", _exit)
    return called


def test_main_exits_with_outcome_code(monkeypatch, fake_exit):
    """main() passes the runner's exit code to sys.exit."""

    def fake_run(coro):
        coro.close()
        return 5

    monkeypatch.setattr("submission_validator.main.uvloop.run", fake_run)

    with pytest.raises(SystemExit):
        main.main()

    assert fake_exit["exit"] == 5


def test_main_keyboard_interrupt(monkeypatch, fake_exit, capsys):
    """main() handles KeyboardInterrupt and prints cancel message."""

    def fake_run(coro):
        coro.close()
        raise KeyboardInterrupt

    monkeypatch.setattr("submission_validator.main.uvloop.run", fake_run)

    with pytest.raises(SystemExit):
        main.main()

    assert "Operation cancelled by user" in capsys.readouterr().out
    assert fake_exit["exit"] == 1


def test_main_exception(monkeypatch, fake_exit, capsys):
    """Errors escaping the runner map to the unexpected-error code."""

    def fake_run(coro):
        coro.close()
        raise RuntimeError("fail")

    monkeypatch.setattr("submission_validator.main.uvloop.run", fake_run)

    with pytest.raises(SystemExit):
        main.main()

    assert "Unexpected Application Error" in capsys.readouterr().err
    assert fake_exit["exit"] == 6


@pytest.mark.asyncio
async def test_async_main_returns_runner_code(monkeypatch):
    class FakeRunner:
        async def run(self):
            return 3

    monkeypatch.setattr("submission_validator.main.CLIRunner", FakeRunner)

    assert await main.async_main() == 3
