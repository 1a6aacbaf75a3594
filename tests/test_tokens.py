import pytest

from optscan import tokens
from optscan.tokens import BareToken, OptionKind, OptionToken

# --- Bare ------------------------------------------------------------------- #


def test_classify_bare():
    assert tokens.classify("make") == BareToken("make")
    assert tokens.classify("./src/*") == BareToken("./src/*")
    assert tokens.classify("a=b") == BareToken("a=b")
    assert tokens.classify("x-y") == BareToken("x-y")


# --- Options ---------------------------------------------------------------- #


def test_classify_short():
    tok = tokens.classify("-o")
    assert isinstance(tok, OptionToken)
    assert tok.kind == OptionKind.SHORT
    assert tok.key == "o"
    assert tok.value == ""


def test_classify_long():
    tok = tokens.classify("--input")
    assert isinstance(tok, OptionToken)
    assert tok.kind == OptionKind.LONG
    assert tok.key == "input"
    assert tok.value == ""


def test_classify_short_cluster_is_one_key():
    assert tokens.classify("-abc") == OptionToken(OptionKind.SHORT, "abc", "")


def test_classify_inline_value():
    assert tokens.classify("--name=John") == OptionToken(OptionKind.LONG, "name", "John")
    assert tokens.classify("-n=John") == OptionToken(OptionKind.SHORT, "n", "John")


def test_classify_inline_value_keeps_later_equals():
    assert tokens.classify("--def=a=b") == OptionToken(OptionKind.LONG, "def", "a=b")


def test_classify_empty_inline_value():
    assert tokens.classify("--name=") == OptionToken(OptionKind.LONG, "name", "")


def test_classify_negative_number_is_option():
    assert tokens.classify("-1") == OptionToken(OptionKind.SHORT, "1", "")


# --- Edge cases ------------------------------------------------------------- #


def test_classify_lone_dashes():
    assert tokens.classify("-") == OptionToken(OptionKind.SHORT, "", "")
    assert tokens.classify("--") == OptionToken(OptionKind.LONG, "", "")


def test_classify_three_dashes():
    assert tokens.classify("---x") == OptionToken(OptionKind.LONG, "-x", "")


def test_classify_empty_key_with_value():
    assert tokens.classify("--=v") == OptionToken(OptionKind.LONG, "", "v")


def test_classify_empty_is_malformed():
    with pytest.raises(tokens.MalformedToken):
        tokens.classify("")


def test_option_kind_dashes():
    assert OptionKind.SHORT.dashes() == "-"
    assert OptionKind.LONG.dashes() == "--"
