import pytest

from kappa.errors import KappaSyntaxError, KappaUnboundSymbol
from kappa.types.environment import Frame, Unassigned
from kappa.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


def test_lookup_walks_parent_chain():
    outer = Frame()
    outer.define(x, 1)
    inner = Frame(parent=Frame(parent=outer))
    assert inner.lookup(x) == 1
    assert inner.find(x) is outer


def test_lookup_unbound_raises():
    with pytest.raises(KappaUnboundSymbol):
        Frame(parent=Frame()).lookup(x)


def test_inner_define_shadows_without_touching_outer():
    outer = Frame()
    outer.define(x, 1)
    inner = Frame(parent=outer)
    inner.define(x, 2)
    assert inner.lookup(x) == 2
    assert outer.lookup(x) == 1


def test_redefine_in_same_frame_keeps_single_newest_entry():
    f = Frame()
    f.define(x, 1)
    f.define(y, 2)
    f.define(x, 3)
    assert f.lookup(x) == 3
    assert list(f.bindings()) == [(x, 3), (y, 2)]


def test_set_mutates_nearest_binding_in_place():
    outer = Frame()
    outer.define(x, 1)
    inner = Frame(parent=outer)
    inner.set(x, 5)
    assert outer.lookup(x) == 5
    assert x not in inner.vars


def test_set_never_creates_binding():
    f = Frame()
    with pytest.raises(KappaUnboundSymbol):
        f.set(x, 1)
    assert f.find(x) is None


def test_define_requires_symbol():
    with pytest.raises(KappaSyntaxError):
        Frame().define("x", 1)


def test_unassigned_binding_is_unbound_for_lookup():
    f = Frame()
    f.define(x, Unassigned)
    with pytest.raises(KappaUnboundSymbol):
        f.lookup(x)


def test_update_defines_in_bulk():
    f = Frame()
    f.update({x: 1, y: 2})
    assert (f.lookup(x), f.lookup(y)) == (1, 2)
    assert str(f) == "{y: 2, x: 1}"
    assert str(Frame(parent=f)) == "{} -> ..."
