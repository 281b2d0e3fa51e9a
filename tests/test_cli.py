from zlisp.cli import main


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "USAGE: zlisp [FILENAME]\n"


def test_missing_file_reports_error(tmp_path, capsys):
    missing = str(tmp_path / "nope.zl")
    assert main([missing]) == 1
    err = capsys.readouterr().err
    assert f"ERR: Failed to open file: {missing}" in err
    assert "ERR: Failed to initialize lexer!" in err


def test_prints_name_contents_and_tokens(tmp_path, capsys):
    path = tmp_path / "prog.zl"
    path.write_text("(foo)", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"File Name: {path}\nContents: (foo)")
    lines = out[len(f"File Name: {path}\nContents: (foo)"):].splitlines()
    assert lines == [
        "TOKEN TYPE: LPAREN\t\tTOKEN: ",
        "TOKEN TYPE: IDENT\t\tTOKEN: foo",
        "TOKEN TYPE: RPAREN\t\tTOKEN: ",
    ]


def test_trailing_newline_yields_uninitialized_token(tmp_path, capsys):
    path = tmp_path / "prog.zl"
    path.write_text("x\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == "TOKEN TYPE: UNINITIALIZED\t\tTOKEN: "


def test_unknown_character_stops_listing(tmp_path, capsys):
    path = tmp_path / "prog.zl"
    path.write_text("@ (a)", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "IDENT" not in out
    assert out.count("TOKEN TYPE:") == 1


def test_unterminated_string_fails(tmp_path, capsys):
    path = tmp_path / "prog.zl"
    path.write_text('"abc', encoding="utf-8")
    assert main([str(path)]) == 1
    assert "ERR:" in capsys.readouterr().err