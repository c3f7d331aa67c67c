import pytest

from logicreduce.cli import main, simplify
from logicreduce.expr_parser import ParseError


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("p & q", "( p & q )"),
        ("! ! p", "p"),
        ("! ! ! p", "! p"),
        ("p > ( p > p )", "T"),
        ("( p & q | r ) | p", "p"),
    ],
)
def test_simplify(expression, expected):
    assert simplify(expression) == expected


def test_simplify_is_stable_on_its_output():
    once = simplify("p & q")
    assert simplify(once) == once


def test_simplify_rejects_bad_syntax():
    with pytest.raises(ParseError):
        simplify("p &")


def test_simplify_rejects_lone_variable():
    with pytest.raises(ValueError):
        simplify("p")


def test_main_single_expression(capsys):
    assert main(["! ! ! p"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("---- START OF MAIN ----\n")
    assert "The tree has SUCCESSFULLY been reduced." in out
    assert out.endswith("\n\n≡ ! p\n")


def test_main_irreducible_expression(capsys):
    assert main(["p & q"]) == 0
    out = capsys.readouterr().out
    assert "The tree has FAILED to be reduced." in out
    assert out.endswith("≡ ( p & q )\n")


def test_main_reports_errors(capsys):
    assert main(["( p & q"]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: ")