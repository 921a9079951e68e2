import sys

import pytest

from contrastlab import __version__
from contrastlab.main import main


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["contrastlab", *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code


def test_version(monkeypatch, capsys):
    assert _run(monkeypatch, "-V") == 0
    assert f"contrastlab {__version__}" in capsys.readouterr().out


def test_no_command_prints_help(monkeypatch, capsys):
    assert _run(monkeypatch) == 0
    assert "usage: contrastlab" in capsys.readouterr().out


def test_unknown_command(monkeypatch, capsys):
    assert _run(monkeypatch, "paint") == 2
    assert "unrecognized command" in capsys.readouterr().err


def test_list_color_names(monkeypatch, capsys):
    assert _run(monkeypatch, "--list-color-names") == 0
    assert "rebeccapurple" in capsys.readouterr().out.split()


def test_convert(monkeypatch, capsys):
    assert _run(monkeypatch, "convert", "-v", "#ff0000", "-t", "hsl") == 0
    assert "hsla(0.00deg, 100.00%, 50.00%, 1.00)" in capsys.readouterr().out


def test_convert_named_and_bare_hex(monkeypatch, capsys):
    assert _run(monkeypatch, "convert", "-v", "red", "00ff00", "-t", "hex") == 0
    out = capsys.readouterr().out
    assert "#ff0000" in out
    assert "#00ff00" in out


def test_convert_unknown_color(monkeypatch, capsys):
    assert _run(monkeypatch, "convert", "-v", "nocolor", "-t", "hex") == 2
    assert "unknown color" in capsys.readouterr().err


def test_convert_bad_format(monkeypatch, capsys):
    assert _run(monkeypatch, "convert", "-v", "red", "-t", "cmyk") == 2
    assert "invalid format" in capsys.readouterr().err


def test_adjust_quiet(monkeypatch, capsys):
    assert _run(monkeypatch, "adjust", "-v", "#000000", "#ffffff", "-m", "hsl-luma", "-q") == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 2
    assert lines[0].startswith("#") and lines[0] != "#000000"
    assert lines[1] == "#ffffff"


def test_adjust_verbose(monkeypatch, capsys):
    code = _run(monkeypatch, "adjust", "-v", "navy", "-b", "black", "-m", "2", "-l")
    assert code == 0
    out = capsys.readouterr().out
    assert "adjusted" in out
    assert "contrast" in out


def test_adjust_invalid_mode(monkeypatch, capsys):
    assert _run(monkeypatch, "adjust", "-v", "red", "-m", "9") == 2
    assert "invalid mode" in capsys.readouterr().err


def test_vision(monkeypatch, capsys):
    assert _run(monkeypatch, "vision", "-v", "red", "--all") == 0
    out = capsys.readouterr().out
    for name in ("protanope", "deuteranope", "tritanope"):
        assert name in out


def test_vision_single_type(monkeypatch, capsys):
    assert _run(monkeypatch, "vision", "-v", "red", "-t", "tritanope") == 0
    out = capsys.readouterr().out
    assert "tritanope" in out
    assert "protanope" not in out


def test_adjust_translucent_input(monkeypatch, capsys):
    assert _run(monkeypatch, "adjust", "-v", "#00000080", "-m", "1", "-q") == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("rgba(")
    assert out != "None"

    assert _run(monkeypatch, "adjust", "-v", "#00000080", "rgba(0,0,0,0.5)", "-m", "1") == 0
    captured = capsys.readouterr()
    assert "adjusted" in captured.out
    assert "None" not in captured.out


def test_adjust_unknown_color_fails(monkeypatch, capsys):
    assert _run(monkeypatch, "adjust", "-v", "notacolor", "-m", "1", "-q") == 2
    assert "unable to adjust color 'notacolor'" in capsys.readouterr().err

    assert _run(monkeypatch, "adjust", "-v", "rgb(1, 2)", "-m", "1") == 2
    assert "invalid css color" in capsys.readouterr().err


def test_adjust_disabled_logs_empty_result(monkeypatch, capsys):
    assert _run(monkeypatch, "adjust", "-v", "red", "-m", "disabled") == 0
    assert "[info] red -> ''" in capsys.readouterr().out
