import sys

from lamcalc import main

LIMIT = ["--recursion-limit", str(sys.getrecursionlimit())]


def test_run_file(tmp_path, capsys):
    path = tmp_path / "prog.lc"
    path.write_text("let three = (succ) (2);\n(lambda x: (x)) (three)\n")

    assert main.main([str(path), *LIMIT]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "let three = (succ) (2)",
        "(succ) (2)",
        "(lambda x: (x)) (three)",
        "3",
    ]


def test_run_file_with_type_error(tmp_path, capsys):
    path = tmp_path / "bad.lc"
    path.write_text("(lambda x: o. (x)) (1)")

    assert main.main([str(path), "--typed", *LIMIT]) == 1
    assert "expected argument of type o" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.lc"), *LIMIT]) == 1
    assert "could not be opened" in capsys.readouterr().out


def test_repl(monkeypatch, capsys):
    lines = iter(["let a = 5", "", "(lambda x: (x)) (a", "(succ) (a)"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)

    assert main.main([*LIMIT, "--numerals"]) == 0

    out = capsys.readouterr().out
    assert "syntax error" in out
    assert out.rstrip("\n").splitlines()[-2:] == ["(succ) (a)", "6"]


def test_render_typed_success():
    session = main.Session(main.Options(typed=True))
    outcome = session.execute("lambda x: o. (x)")
    assert main.render(outcome, session.options) == "\n".join(
        ["lambda x: o. (x)", "  : (o -> o)", "lambda x: o. (x)"]
    )
