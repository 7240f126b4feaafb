import pytest

from logic import ReadError
from reader import read


class TestRead:

    @pytest.mark.parametrize("text,expected", [
        ("p", "p"),
        ("(- p)", ["-", "p"]),
        ("(p * q)", ["p", "*", "q"]),
        ("((p => q) <=> (- r))", [["p", "=>", "q"], "<=>", ["-", "r"]]),
        ("  ( p   + q )  ", ["p", "+", "q"]),
        ("(p +q)", ["p", "+q"]),
        ("()", []),
        ("(p *)", ["p", "*"]),
        ("(p * q) ; trailing comment", ["p", "*", "q"]),
    ])
    def test_tree(self, text, expected):
        assert read(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        "(p * q",
        "p * q)",
        "(p) (q)",
        ")",
    ])
    def test_malformed(self, text):
        with pytest.raises(ReadError):
            read(text)

    def test_deep_nesting(self):
        text = "(- " * 2000 + "p" + ")" * 2000
        with pytest.raises(ReadError, match="nested too deeply"):
            read(text)
