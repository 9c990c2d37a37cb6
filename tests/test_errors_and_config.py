import pytest

from toylang.config import DEFAULT_MAX_DEPTH, Config, get_config
from toylang.errors import (
    EvalError,
    LexError,
    ParseError,
    SourceError,
    ToylangError,
    UnbalancedError,
    UnboundSymbolError,
)


def test_error_hierarchy():
    assert issubclass(LexError, SourceError)
    assert issubclass(ParseError, SourceError)
    assert issubclass(UnbalancedError, ParseError)
    assert issubclass(SourceError, ToylangError)
    assert issubclass(UnboundSymbolError, EvalError)
    assert issubclass(EvalError, ToylangError)


def test_source_error_fields_and_format():
    err = LexError("Unexpected character in numeric literal", "(a\n(12x b)", 1, 3)
    assert err.message == "Unexpected character in numeric literal"
    assert (err.line, err.column, err.length) == (1, 3, 1)
    assert err.source_line == "(12x b)"
    assert err.pointer == "---^"
    assert err.format() == (
        "Unexpected character in numeric literal\n"
        "Line 1 character 3\n"
        "(12x b)\n"
        "---^\n"
    )
    assert str(err) == err.format()


def test_source_error_past_last_line():
    err = ParseError("unbalanced parenthesis", "", 0, 0)
    assert err.source_line == ""
    assert err.pointer == "^"


def test_config_defaults():
    config = get_config()
    assert config == Config()
    assert config.max_depth == DEFAULT_MAX_DEPTH
    assert config.strict_unbound is False


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("TOYLANG_MAX_DEPTH", "32")
    monkeypatch.setenv("TOYLANG_STRICT_UNBOUND", "yes")
    assert Config.from_env() == Config(max_depth=32, strict_unbound=True)


@pytest.mark.parametrize(
    "var,value",
    [
        ("TOYLANG_MAX_DEPTH", "deep"),
        ("TOYLANG_MAX_DEPTH", "0"),
        ("TOYLANG_STRICT_UNBOUND", "maybe"),
    ],
)
def test_config_rejects_bad_values(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    with pytest.raises(ValueError, match=var):
        Config.from_env()


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        Config().max_depth = 3
