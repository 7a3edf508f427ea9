"""Tests for property wiring."""

import pytest

from classiest import NoOverloadMatchError, OverloadSet
from classiest import descriptors as t
from classiest.accessors import make_property, make_setter


def store(self, value):
    self.stored = value


def test_plain_setter_installed_directly():
    assert make_setter("C.val", store) is store


def test_overloaded_setter_dispatches():
    overloads = OverloadSet([
        {"args": [t.Number], "fn": lambda self, v: setattr(self, "kind", "num")},
        {"args": [t.String], "fn": lambda self, v: setattr(self, "kind", "str")},
    ])
    fset = make_setter("C.val", overloads)
    assert fset.__qualname__ == "C.val"
    assert fset.__name__ == "val"

    class Holder:
        pass

    h = Holder()
    fset(h, 1)
    assert h.kind == "num"
    fset(h, "x")
    assert h.kind == "str"
    with pytest.raises(NoOverloadMatchError, match="C.val"):
        fset(h, None)


class TestMakeProperty:
    def test_read_write(self):
        class C:
            pass

        C.val = make_property("C", "val", lambda self: self.stored, store)
        c = C()
        c.val = 3
        assert c.val == 3

    def test_read_only(self):
        class C:
            pass

        C.val = make_property("C", "val", getter=lambda self: 42)
        c = C()
        assert c.val == 42
        with pytest.raises(AttributeError):
            c.val = 1

    def test_write_only(self):
        class C:
            pass

        C.val = make_property("C", "val", setter=store)
        c = C()
        c.val = 1
        assert c.stored == 1
        with pytest.raises(AttributeError):
            c.val

    def test_doc(self):
        assert make_property("C", "val", getter=lambda self: 1).__doc__ == "C.val"
