import pytest

from mlisp.errors import MLispInvalidSymbol
from mlisp.types import Symbol, Number, EvalError, Native
from mlisp.types.environment import Environment


def test_lookup_and_contains():
    env = Environment()
    env.insert_local("a", Number(1))
    assert env.contains("a")
    assert env.contains(Symbol("a"))
    assert env.lookup(Symbol("a")) == Number(1)
    assert not env.contains("b")
    assert env.lookup("b") == EvalError("Not in scope")


def test_top_level_local_insert_writes_the_root():
    env = Environment()
    env.insert_local("a", Number(1))
    assert env.globals == {"a": Number(1)}


def test_environments_built_on_one_root_share_it():
    root = {"a": Number(1)}
    first = Environment(root=root)
    second = Environment(root=root, frames=({"b": Number(2)},))
    second.insert_global("c", Number(3))
    assert first.lookup("c") == Number(3)
    assert second.lookup("b") == Number(2)
    assert not first.contains("b")


def test_push_creates_a_fresh_innermost_frame():
    root = Environment()
    root.insert_global("a", Number(1))
    child = root.push()
    assert child.depth == 1
    assert root.depth == 0
    child.insert_local("b", Number(2))
    assert child.lookup("b") == Number(2)
    assert not root.contains("b")
    # outer bindings stay visible from the child
    assert child.lookup("a") == Number(1)


def test_innermost_binding_wins():
    env = Environment()
    env.insert_global("x", Number(1))
    inner = env.push()
    inner.insert_local("x", Number(2))
    innermost = inner.push()
    assert innermost.lookup("x") == Number(2)
    innermost.insert_local("x", Number(3))
    assert innermost.lookup("x") == Number(3)
    assert inner.lookup("x") == Number(2)
    assert env.lookup("x") == Number(1)


def test_global_insert_is_visible_from_every_depth():
    root = Environment()
    deep = root.push().push().push()
    deep.insert_global("g", Number(7))
    assert root.lookup("g") == Number(7)
    assert deep.lookup("g") == Number(7)
    # siblings derived from the same root see it too
    assert root.push().lookup("g") == Number(7)


def test_global_insert_does_not_override_a_visible_local():
    root = Environment()
    child = root.push()
    child.insert_local("v", Number(1))
    child.insert_global("v", Number(2))
    assert child.lookup("v") == Number(1)
    assert root.lookup("v") == Number(2)


def test_update_seeds_the_root():
    env = Environment().push()
    plus = Native("+", lambda env, args: Number(0))
    env.update({Symbol("+"): plus, "zero": Number(0)})
    assert env.globals["+"] is plus
    assert env.frames[0] == {}


def test_names_must_be_symbols_or_strings():
    with pytest.raises(MLispInvalidSymbol):
        Environment().insert_local(Number(1), Number(1))


def test_string_forms():
    env = Environment()
    env.insert_global("a", Number(1))
    assert str(env) == "{a: 1}"
    child = env.push()
    child.insert_local("b", Number(2))
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> <root: 1 bindings>>"
