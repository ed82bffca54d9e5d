import io
import sys

import pytest

from consoletasks.calculator import CalculatorError, calculate, main


@pytest.mark.parametrize("first,second", [(12, 5), (-4, 9), (0, 0), (100, -100)])
def test_add_subtract_multiply(first, second):
    assert calculate(first, second, "+") == first + second
    assert calculate(first, second, "-") == first - second
    assert calculate(first, second, "*") == first * second


@pytest.mark.parametrize("first", range(-20, 21))
@pytest.mark.parametrize("second", [-7, -3, -1, 1, 2, 5])
def test_division_truncates_toward_zero(first, second):
    quotient = calculate(first, second, "/")
    remainder = first - quotient * second
    assert abs(remainder) < abs(second)
    assert remainder == 0 or (remainder < 0) == (first < 0)


def test_division_of_negative_pinned():
    assert calculate(-7, 2, "/") == -3


def test_division_by_zero():
    with pytest.raises(CalculatorError, match="Divison by zero is not allowed"):
        calculate(5, 0, "/")


@pytest.mark.parametrize("operation", ["%", "", "x", "^"])
def test_invalid_operator(operation):
    with pytest.raises(ValueError, match="Invalid operator entered!"):
        calculate(1, 2, operation)


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n3\n*\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Welcome to Calculator!Enter the First number: \n")
    assert "Result : 18\n" in out


def test_main_division_by_zero(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n0\n/\n"))
    assert main([]) == 1
    assert "Error! Divison by zero is not allowed." in capsys.readouterr().out


def test_main_invalid_operator(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n2\n?\n"))
    assert main([]) == 1
    assert "Invalid operator entered!" in capsys.readouterr().out


def test_main_bad_number(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("six\n2\n+\n"))
    assert main([]) == 1
    assert "Result :" not in capsys.readouterr().out