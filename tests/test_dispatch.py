"""Tests for overload resolution and dispatch."""

import pytest

from classiest import NoOverloadMatchError, OverloadCase, OverloadSet, Undefined, dispatch
from classiest import descriptors as t


def tagged(tag):
    def fn(*args):
        return (tag, args)
    return fn


def make_set(*cases):
    return OverloadSet([{"args": args, "fn": fn} for args, fn in cases])


# ---------------------------------------------------------------------------
# OverloadCase.accepts
# ---------------------------------------------------------------------------

class TestAccepts:
    def test_exact_arity(self):
        case = OverloadCase(args=[t.Number, t.String], fn=tagged("a"))
        assert case.accepts((1, "x"))
        assert not case.accepts(("x", 1))

    def test_extra_arguments_ignored(self):
        case = OverloadCase(args=[t.Number], fn=tagged("a"))
        assert case.accepts((1, "ignored", None))

    def test_empty_args_match_anything(self):
        case = OverloadCase(args=[], fn=tagged("a"))
        assert case.accepts(())
        assert case.accepts((1, 2, 3))

    def test_missing_argument_tested_as_undefined(self):
        seen = []

        def record(value):
            seen.append(value)
            return True

        case = OverloadCase(args=[t.Any, t.irreducible("Rec", record)], fn=tagged("a"))
        assert case.accepts((1,))
        assert seen == [Undefined]

    def test_missing_argument_rejected_by_strict_descriptor(self):
        case = OverloadCase(args=[t.Number], fn=tagged("a"))
        assert not case.accepts(())

    def test_missing_argument_accepted_by_maybe(self):
        case = OverloadCase(args=[t.maybe(t.Number)], fn=tagged("a"))
        assert case.accepts(())

    def test_signature(self):
        case = OverloadCase(args=[t.Number, t.maybe(t.String)], fn=tagged("a"))
        assert case.signature == "(Number, ?String)"


# ---------------------------------------------------------------------------
# OverloadSet.resolve
# ---------------------------------------------------------------------------

def test_resolve_first_match_wins():
    a, b = tagged("a"), tagged("b")
    overloads = make_set(([t.Number], a), ([t.Any], b))
    assert overloads.resolve((1,)).fn is a
    assert overloads.resolve(("x",)).fn is b


def test_resolve_declaration_order_not_specificity():
    a, b = tagged("a"), tagged("b")
    overloads = make_set(([t.Any], a), ([t.Number], b))
    assert overloads.resolve((1,)).fn is a


def test_resolve_none():
    overloads = make_set(([t.Number], tagged("a")))
    assert overloads.resolve(("x",)) is None


def test_empty_set_never_matches():
    assert OverloadSet([]).resolve(()) is None


def test_iteration_preserves_order():
    overloads = make_set(([t.Number], tagged("a")), ([t.String], tagged("b")))
    assert [c.signature for c in overloads] == ["(Number)", "(String)"]
    assert overloads.signatures == ["(Number)", "(String)"]


# ---------------------------------------------------------------------------
# dispatch()
# ---------------------------------------------------------------------------

def test_dispatch_forwards_all_arguments():
    overloads = make_set(([t.Number], tagged("num")))
    assert dispatch(overloads, "C.f", (1, "extra")) == ("num", (1, "extra"))


def test_dispatch_prepends_bound_receiver():
    overloads = make_set(([t.Number], tagged("num")))
    receiver = object()
    assert dispatch(overloads, "C.f", (1,), bound=(receiver,)) == ("num", (receiver, 1))


def test_dispatch_bound_not_matched():
    # the receiver is not a Number, yet the case still matches
    overloads = make_set(([t.Number], tagged("num")))
    assert dispatch(overloads, "C.f", (2,), bound=("self",))[0] == "num"


def test_dispatch_only_calls_one_implementation():
    calls = []
    overloads = make_set(
        ([t.Number], lambda x: calls.append("a")),
        ([t.Number], lambda x: calls.append("b")),
    )
    dispatch(overloads, "C.f", (1,))
    assert calls == ["a"]


def test_dispatch_no_match():
    overloads = make_set(([t.Number], tagged("num")), ([t.String, t.Boolean], tagged("sb")))
    with pytest.raises(NoOverloadMatchError) as info:
        dispatch(overloads, "C.hello", ())
    err = info.value
    assert err.qualname == "C.hello"
    assert err.call_args == ()
    assert err.signatures == ["(Number)", "(String, Boolean)"]
    assert "C.hello" in str(err)


def test_dispatch_no_match_is_type_error():
    with pytest.raises(TypeError, match="No valid overload found for C.f"):
        dispatch(OverloadSet([]), "C.f", (True,))
