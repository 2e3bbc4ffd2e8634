import re

import pytest

from mostools.bintoc import HELP, convert, main, render_c, symbol_stem


def test_symbol_stem_cuts_at_first_dot():
    assert symbol_stem("hello.b") == "hello"
    assert symbol_stem("a.b.c") == "a"
    assert symbol_stem("noext") == "noext"


def test_render_small_example():
    text = render_c(b"\x01\xab", "hello", "user")
    assert text == (
        "unsigned int binary_user_hello_size = 2;\n"
        "unsigned char binary_user_hello_start[] = {0x1,0xab};\n"
    )


def test_render_round_trip():
    data = bytes(range(256))
    text = render_c(data, "blob", "")
    body = re.search(r"\{(.*)\}", text).group(1)
    assert bytes(int(tok, 16) for tok in body.split(",")) == data
    assert f"binary__blob_size = {len(data)};" in text


def test_convert_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "prog.b").write_bytes(b"\x00\x10\xff")
    convert("prog.b", "prog.c", "fs")
    text = (tmp_path / "prog.c").read_text()
    assert text == (
        "unsigned int binary_fs_prog_size = 3;\n"
        "unsigned char binary_fs_prog_start[] = {0x0,0x10,0xff};\n"
    )
    assert text == render_c(b"\x00\x10\xff", "prog", "fs")


def test_main_converts(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "x.b").write_bytes(b"\x07")
    assert main(["-f", "x.b", "-o", "x.c"]) == 0
    assert (tmp_path / "x.c").read_text() == render_c(b"\x07", "x", "")


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == HELP


def test_main_unknown_option_prints_help(capsys):
    assert main(["-z"]) == 0
    assert capsys.readouterr().out == HELP


def test_main_missing_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "x.b").write_bytes(b"\x07")
    assert main(["-f", "x.b"]) == 1
    assert not (tmp_path / "x.c").exists()


def test_main_duplicate_option():
    assert main(["-f", "a.b", "-f", "b.b", "-o", "c.c"]) == 1


def test_main_option_without_value():
    assert main(["-o", "out.c", "-f"]) == 1


def test_main_missing_input_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-f", "absent.b", "-o", "absent.c"]) == 1
    assert not (tmp_path / "absent.c").exists()


def test_convert_missing_file_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        convert("absent.b", "out.c")