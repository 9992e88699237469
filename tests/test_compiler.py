import pytest

from clover.compiler import CompileError, compile_program, compile_unit, write_exec


def test_compile_unit_fails_and_logs(capsys):
    with pytest.raises(CompileError, match="compile_unit: stub"):
        compile_unit("main.clv")
    assert "compile_unit: stub" in capsys.readouterr().err


def test_write_exec_fails_and_logs(capsys):
    with pytest.raises(CompileError, match="write_exec: stub"):
        write_exec(None, "a.out")
    assert "write_exec: stub" in capsys.readouterr().err


def test_compile_program_stops_at_first_unit(capsys):
    with pytest.raises(CompileError):
        compile_program(None, ["one.clv", "two.clv"], None, False)
    err = capsys.readouterr().err
    assert err.count("compile_unit: stub") == 1
    assert "write_exec" not in err


def test_compile_program_without_files_reaches_writer(capsys):
    with pytest.raises(CompileError, match="write_exec"):
        compile_program("manifest.toml", [], "out", True)
    err = capsys.readouterr().err
    assert "compile_unit" not in err
    assert "write_exec: stub" in err