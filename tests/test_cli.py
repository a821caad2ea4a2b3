import io

import pytest

from postlisp.__main__ import main


@pytest.fixture(autouse=True)
def _default_prompt(monkeypatch):
    monkeypatch.delenv("POSTLISP_PROMPT", raising=False)
    monkeypatch.delenv("POSTLISP_CANVAS_SIZE", raising=False)


def run(argv, stdin=""):
    out, err = io.StringIO(), io.StringIO()
    code = main(argv, inp=io.StringIO(stdin), out=out, err=err)
    return code, out.getvalue(), err.getvalue()


@pytest.mark.parametrize(
    "program,printed",
    [
        ("(1 2 +)", "(3)\n"),
        ("((1 2 point) (3 4 point) line)", "((1,2),(3,4))\n"),
        ("(True False and)", "(False)\n"),
        ("((1 1 point) draw)", "()\n"),
    ]
)
def test_single_expression_mode(program, printed):
    code, out, err = run(["-e", program])
    assert code == 0
    assert out == printed
    assert err == ""


@pytest.mark.parametrize(
    "program,message",
    [
        ("(1 2)", "Error: parse error\n"),
        ("", "Error: parse error\n"),
        ("(1 0 /)", "Error: /: division by zero\n"),
        ("(-5 sqrt)", "Error: sqrt: domain error\n"),
        ("(undefined_name)", "Error: Undefined symbol: undefined_name\n"),
    ]
)
def test_single_expression_errors(program, message):
    code, out, err = run(["-e", program])
    assert code == 1
    assert out == ""
    assert err == message


def test_file_mode(tmp_path):
    prog = tmp_path / "prog.slp"
    prog.write_text("; multiply a sum\n((1 2 +)\n 3 *)\n")
    code, out, err = run([str(prog)])
    assert code == 0
    assert out == "(9)\n"


def test_file_mode_missing_file(tmp_path):
    code, out, err = run([str(tmp_path / "missing.slp")])
    assert code == 1
    assert err == "Error: could not open file\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["a.slp", "b.slp"],
        ["-e"],
        ["-e", "(1 2 +)", "prog.slp"],
        ["--svg", "out.svg"],
        ["--bogus"],
    ]
)
def test_invalid_arguments(argv):
    code, out, err = run(argv)
    assert code == 1
    assert err == "Error: invalid arguments\n"


def test_svg_export(tmp_path):
    target = tmp_path / "out.svg"
    code, out, err = run(["-e", "((1 2 point) (((0 0 point) (10 5 point) rect) 255 0 0 fill_rect) draw)",
                          "--svg", str(target)])
    assert code == 0
    svg = target.read_text()
    assert svg.startswith("<svg")
    assert "<circle" in svg
    assert 'fill="rgb(255,0,0)"' in svg


def test_repl_session_resets_after_semantic_error():
    code, out, err = run([], "(x 5 define)\n(x 3 +)\n(x 10 define)\n(x 1 +)\n")
    assert code == 0
    assert out.startswith("postlisp> ")
    assert "(5)\n" in out
    assert "(8)\n" in out
    assert err.splitlines() == [
        "Error: define: cannot redefine built-in symbol: x",
        "Error: Undefined symbol: x",
    ]


def test_repl_parse_error_keeps_session():
    code, out, err = run([], "(x 5 define)\n(1 2)\n(x 1 +)\n")
    assert err == "Error: parse error\n"
    assert "(6)\n" in out


def test_repl_ignores_blank_lines_and_joins_multiline_entries():
    code, out, err = run([], "\n   \n(1\n 2 +)\n; just a comment\n")
    assert err == ""
    assert out.count("(3)\n") == 1


def test_repl_custom_prompt(monkeypatch):
    monkeypatch.setenv("POSTLISP_PROMPT", ">> ")
    code, out, err = run([], "(1 2 +)\n")
    assert out.startswith(">> (3)\n")


def test_repl_unfinished_entry_at_eof_is_a_parse_error():
    code, out, err = run([], "(1 2 +\n")
    assert code == 0
    assert err == "Error: parse error\n"


def test_svg_export_with_non_finite_colour(tmp_path):
    target = tmp_path / "out.svg"
    code, out, err = run(["-e", "((((0 0 point) (5 5 point) rect) 1e400 0 0 fill_rect) draw)",
                          "--svg", str(target)])
    assert (code, out, err) == (0, "()\n", "")
    assert 'fill="rgb(0,0,0)"' in target.read_text()


def test_svg_export_to_unwritable_path(tmp_path):
    target = tmp_path / "missing" / "out.svg"
    code, out, err = run(["-e", "((1 1 point) draw)", "--svg", str(target)])
    assert code == 1
    assert out == ""
    assert err == "Error: could not write file\n"


@pytest.mark.parametrize("program", ["(1e400 sin)", "((1e400 1e400 *) cos)"])
def test_trig_of_infinity_prints_nan(program):
    code, out, err = run(["-e", program])
    assert (code, out, err) == (0, "(nan)\n", "")
