import pytest

from postlisp import config


def test_defaults(monkeypatch):
    for var in ("POSTLISP_PROMPT", "POSTLISP_REPL_HOST", "POSTLISP_REPL_PORT", "POSTLISP_CANVAS_SIZE"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "postlisp> "
    assert config.get_repl_address() == ("127.0.0.1", 8765)
    assert config.get_canvas_size() == (500, 500)


def test_overrides(monkeypatch):
    monkeypatch.setenv("POSTLISP_PROMPT", "> ")
    monkeypatch.setenv("POSTLISP_REPL_HOST", "0.0.0.0")
    monkeypatch.setenv("POSTLISP_REPL_PORT", "9000")
    monkeypatch.setenv("POSTLISP_CANVAS_SIZE", "640x480")
    assert config.get_prompt() == "> "
    assert config.get_repl_address() == ("0.0.0.0", 9000)
    assert config.get_canvas_size() == (640, 480)


@pytest.mark.parametrize("raw", ["640", "axb", "0x10", "-5x5", "1x2x3"])
def test_bad_canvas_size_falls_back(monkeypatch, raw):
    monkeypatch.setenv("POSTLISP_CANVAS_SIZE", raw)
    assert config.get_canvas_size() == (500, 500)


def test_bad_port_falls_back(monkeypatch):
    monkeypatch.setenv("POSTLISP_REPL_PORT", "http")
    assert config.get_repl_address()[1] == 8765
