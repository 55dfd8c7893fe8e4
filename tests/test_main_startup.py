from __future__ import annotations

import sys
from types import SimpleNamespace

import pytest

import main
from config import PHASE_ORDER_ACTIVE
from game import BakerySim


class _DisplayNotReady:
    @staticmethod
    def init() -> None:
        return None

    @staticmethod
    def get_init() -> bool:
        return False


class _FakePygameDisplayDown:
    error = RuntimeError
    display = _DisplayNotReady()

    @staticmethod
    def init() -> None:
        return None


class _FakePygameKeys:
    K_RETURN = 13
    K_SPACE = 32
    K_BACKSPACE = 8
    K_c = 99
    K_n = 110
    K_r = 114


def test_gameui_reports_display_startup_failure(monkeypatch):
    monkeypatch.setattr(main, "pygame", _FakePygameDisplayDown)

    with pytest.raises(RuntimeError, match="--headless"):
        main.GameUI(BakerySim())


def test_gameui_requires_pygame(monkeypatch):
    monkeypatch.setattr(main, "pygame", None)

    with pytest.raises(RuntimeError, match="--headless"):
        main.GameUI(BakerySim())


def _ui_with_open_shop(monkeypatch) -> main.GameUI:
    monkeypatch.setattr(main, "pygame", _FakePygameKeys)
    ui = main.GameUI.__new__(main.GameUI)
    ui.sim = BakerySim(seed=3)
    ui.sim.start_day()
    assert ui.sim.phase == PHASE_ORDER_ACTIVE
    return ui


def test_digit_keys_add_candies(monkeypatch):
    ui = _ui_with_open_shop(monkeypatch)

    ui._handle_key(SimpleNamespace(key=49, unicode="1"))
    ui._handle_key(SimpleNamespace(key=48, unicode="0"))

    keys = ui.sim.candy_keys
    assert ui.sim.tray_contents == (keys[0], keys[9])


@pytest.mark.parametrize("char", ["²", "½", "٣", "", "12"])
def test_non_ascii_digit_keys_are_ignored(monkeypatch, char):
    ui = _ui_with_open_shop(monkeypatch)

    ui._handle_key(SimpleNamespace(key=178, unicode=char))

    assert ui.sim.tray_contents == ()


def test_enter_serves_the_tray(monkeypatch):
    ui = _ui_with_open_shop(monkeypatch)

    ui._handle_key(SimpleNamespace(key=_FakePygameKeys.K_RETURN, unicode="\r"))

    assert ui.sim.state.served == 1


class _BrokenGameUI:
    def __init__(self, sim):
        raise RuntimeError("Display subsystem is unavailable. Relaunch with --headless.")


def test_main_handles_gameui_startup_error(monkeypatch, capsys):
    monkeypatch.setattr(main, "GameUI", _BrokenGameUI)
    monkeypatch.setattr(sys, "argv", ["candy-bakery"])

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "Startup error:" in captured.err
    assert "--headless" in captured.err


def test_headless_run_prints_one_line_per_day(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["candy-bakery", "--headless", "--days", "2", "--day-length", "40", "--skill", "1.0"])

    main.main()

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("day_done day=1 ")
    assert lines[1].startswith("day_done day=2 ")


@pytest.mark.parametrize(
    "argv, flag",
    [
        (["--headless", "--day-length", "0"], "--day-length"),
        (["--day-length", "-5"], "--day-length"),
        (["--headless", "--days", "-1"], "--days"),
        (["--headless", "--dt", "0"], "--dt"),
    ],
)
def test_bad_cli_values_are_usage_errors(monkeypatch, capsys, argv, flag):
    monkeypatch.setattr(sys, "argv", ["candy-bakery", *argv])

    with pytest.raises(SystemExit) as exc:
        main.main()

    assert exc.value.code == 2
    assert flag in capsys.readouterr().err


def test_headless_rejects_non_positive_dt():
    with pytest.raises(ValueError):
        main.run_headless(days=1, seed=1, skill=1.0, day_length=10, dt=0)
