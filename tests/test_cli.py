"""CLI — exit statuses and output of list / run / calc."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from pureops.cli import main


# --- list / run ---------------------------------------------------------------

def test_list_prints_program_names(capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out.split() == [
        "test_math_add",
        "test_math_multiply",
        "test_string_concat",
        "test_string_reverse",
        "test_integration",
    ]


def test_run_single_program(capsys):
    assert main(["run", "test_math_multiply"]) == 0
    out = capsys.readouterr().out
    assert out == "Running test_math_multiply...\ntest_math_multiply: PASSED\n"


def test_run_all_programs(capsys):
    assert main(["run", "--all"]) == 0
    out = capsys.readouterr().out
    assert out.count(": PASSED") == 5


def test_run_unknown_program_exits_2_without_running_others(capsys):
    assert main(["run", "test_math_add", "test_nope"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "test_nope" in captured.err


def test_run_without_names_exits_2(capsys):
    assert main(["run"]) == 2


def test_failed_check_exits_1(monkeypatch, capsys):
    import pureops.services.check_programs as programs

    broken = programs.CheckProgram(
        "test_math_add",
        (programs.Check("add(2, 3)", lambda: 4, 5),),
    )
    monkeypatch.setitem(programs._PROGRAMS, "test_math_add", broken)

    assert main(["run", "test_math_add"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "Running test_math_add...\n"
    assert "PASSED" not in captured.out
    assert "check failed" in captured.err
    assert captured.err.count("check failed") == 1


# --- calc ---------------------------------------------------------------------

@pytest.mark.parametrize("argv, expected", [
    (["calc", "add", "2", "3"], "5"),
    (["calc", "add", "-5", "-10"], "-15"),
    (["calc", "multiply", "-3", "-4"], "12"),
    (["calc", "reverse", "hello"], "olleh"),
    (["calc", "concat", "hello", " world"], "hello world"),
])
def test_calc_prints_result(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == expected + "\n"


def test_calc_wrap_flag(capsys):
    assert main(["calc", "add", "2147483647", "1", "--policy", "wrap"]) == 0
    assert capsys.readouterr().out == "-2147483648\n"


def test_calc_bits_flag(capsys):
    assert main(["calc", "add", "127", "1", "--policy", "wrap", "--bits", "8"]) == 0
    assert capsys.readouterr().out == "-128\n"


def test_calc_trap_exits_1(capsys):
    assert main(["calc", "multiply", "2147483647", "2", "--policy", "trap"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "overflows" in captured.err


def test_calc_uses_policy_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("PUREOPS_OVERFLOW_POLICY", "wrap")
    monkeypatch.setenv("PUREOPS_INT_BITS", "8")
    assert main(["calc", "add", "127", "1"]) == 0
    assert capsys.readouterr().out == "-128\n"


def test_calc_flag_overrides_settings(monkeypatch, capsys):
    monkeypatch.setenv("PUREOPS_OVERFLOW_POLICY", "trap")
    assert main(["calc", "add", "2147483647", "1", "--policy", "unbounded"]) == 0
    assert capsys.readouterr().out == "2147483648\n"


def test_calc_invalid_bits_exits_2(capsys):
    assert main(["calc", "add", "1", "1", "--policy", "wrap", "--bits", "0"]) == 2


def test_calc_invalid_bits_with_default_policy_exits_2(capsys):
    assert main(["calc", "add", "1", "1", "--bits", "0"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "at least 1 bit" in captured.err


def test_calc_text_starting_with_dash_after_double_dash(capsys):
    assert main(["calc", "reverse", "--", "-abc"]) == 0
    assert capsys.readouterr().out == "cba-\n"
    assert main(["calc", "concat", "--", "-a", "-b"]) == 0
    assert capsys.readouterr().out == "-a-b\n"


# --- settings errors ----------------------------------------------------------

@pytest.mark.parametrize("var, value, field", [
    ("PUREOPS_INT_BITS", "0", "int_bits"),
    ("PUREOPS_LOG_FORMAT", "xml", "log_format"),
    ("PUREOPS_OVERFLOW_POLICY", "saturate", "overflow_policy"),
])
def test_invalid_settings_exit_2_with_one_line_message(monkeypatch, capsys, var, value, field):
    monkeypatch.setenv(var, value)
    assert main(["list"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip().splitlines() == [f"pureops: invalid settings: {field}"]


def test_invalid_policy_is_a_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["calc", "add", "1", "1", "--policy", "saturate"])
    assert exc_info.value.code == 2


# --- module entry point -------------------------------------------------------

def test_python_dash_m_runs_programs():
    proc = subprocess.run(
        [sys.executable, "-m", "pureops", "run", "test_integration"],
        capture_output=True, text=True,
        env={**os.environ, "PYTHONPATH": str(Path(__file__).resolve().parent.parent)},
    )
    assert proc.returncode == 0
    assert proc.stdout.strip().endswith("test_integration: PASSED")
