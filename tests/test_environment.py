import pytest

from toylang.errors import InvalidSymbolError
from toylang.types.environment import Environment
from toylang.types.nil import Nil, Unbound
from toylang.types.symbol import Symbol


def test_define_and_lookup():
    env = Environment()
    env.define(Symbol("x"), 1.0)
    assert env.lookup(Symbol("x")) == 1.0
    assert env.lookup("x") == 1.0


def test_define_overwrites_local_binding():
    env = Environment()
    env.define("x", 1.0)
    env.define("x", 2.0)
    assert env.lookup("x") == 2.0


def test_lookup_unbound_is_distinguishable():
    env = Environment()
    result = env.lookup(Symbol("missing"))
    assert result is Unbound
    assert result is not Nil
    assert not result


def test_child_sees_parent_and_shadows():
    parent = Environment()
    parent.define("x", 1.0)
    parent.define("y", 2.0)
    child = Environment.with_parent(parent)
    child.define("x", 10.0)

    assert child.outer is parent
    assert child.lookup("x") == 10.0
    assert child.lookup("y") == 2.0
    # parent is never touched by the child
    assert parent.lookup("x") == 1.0
    assert parent.vars == {Symbol("x"): 1.0, Symbol("y"): 2.0}


def test_parent_bindings_added_later_are_visible():
    parent = Environment()
    child = Environment.with_parent(parent)
    assert child.lookup("late") is Unbound
    parent.define("late", "now")
    assert child.lookup("late") == "now"


def test_find_returns_nearest_binding_frame():
    root = Environment()
    root.define("a", 1.0)
    mid = Environment.with_parent(root)
    mid.define("a", 2.0)
    leaf = Environment.with_parent(mid)
    assert leaf.find("a") is mid
    assert root.find("a") is root
    assert leaf.find("b") is None


def test_contains_and_update():
    env = Environment()
    env.update({Symbol("a"): 1.0, "b": 2.0})
    child = Environment.with_parent(env)
    assert "a" in child
    assert Symbol("b") in child
    assert "c" not in child
    assert 3 not in child


@pytest.mark.parametrize("bad_name", [1, 2.5, None, ["x"]])
def test_define_rejects_non_symbols(bad_name):
    with pytest.raises(InvalidSymbolError):
        Environment().define(bad_name, 1.0)


def test_symbols_are_interned():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc").id is Symbol("ab" + "c").id
    assert Symbol("abc") != "abc"


def test_str_and_repr():
    env = Environment()
    env.define("x", 1.0)
    child = Environment.with_parent(env)
    child.define("y", 2.0)
    assert str(env) == "{x: 1.0}"
    assert str(child) == "{y: 2.0} -> ..."
    assert repr(child) == "<Environment chain: {y: 2.0} -> {x: 1.0}>"
