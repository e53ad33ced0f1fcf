"""Tests for the program entry point."""

from unittest.mock import patch

from emissioncheck.main import main


def test_runs_tests_then_menu(monkeypatch, capsys):
    """main tests the fleet, then serves the menu until exit"""
    answers = iter(["1", "2", "Vehicle_2", "3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    
    assert main([]) == 0
    
    out = capsys.readouterr().out
    assert "Vehicle_1: Fail" in out
    assert "Vehicle_2: Pass" in out
    assert "Vehicle_3: Pass" in out
    assert "Battery Capacity: 50 kWh" in out


def test_debug_flag_enables_debug_logging(monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "3")
    
    with patch("emissioncheck.main.bt") as mock_bt:
        assert main(["--debug"]) == 0
    
    mock_bt.logging.set_debug.assert_called_once_with(True)
    mock_bt.logging.set_trace.assert_not_called()


def test_keyboard_interrupt_exits_cleanly(monkeypatch):
    def interrupt(prompt=""):
        raise KeyboardInterrupt
    
    monkeypatch.setattr("builtins.input", interrupt)
    
    assert main([]) == 0
