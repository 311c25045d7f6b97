"""
The composition laws every pipeline relies on:
order (compose(t1, t2) means t1 sees data first), associativity, identity,
and that no stage ever steps its inner reducer after it halted.
"""
from haltxf.reducer import reduce
from haltxf.reducers import listOf, member
from haltxf.steppers import iterStepper
from haltxf.transducer import apply, compose
from haltxf.util import identity
from haltxf.xf import map, take, withIndex
from haltxf.combinators import filter, drop
from tests.guards import Guard, spy

def inc(x):
    return x + 1

def double(x):
    return x * 2

def odd(x):
    return x % 2 == 1

def observe(xform, xs):
    """Result, outer steps and inner steps of one guarded reduction."""
    inner = Guard(listOf())
    outer = Guard(apply(xform, inner.reducer))
    result = reduce(iterStepper, outer.reducer, xs)
    assert outer.finishes == 1
    assert inner.finishes == 1
    return result, outer.steps, inner.steps

def test_order():
    seen = []
    r = apply(compose(spy("first", seen), spy("second", seen)), listOf())
    assert reduce(iterStepper, r, [1]) == [1]
    assert seen == [("first", 1), ("second", 1)]

def test_order_changes_meaning():
    assert reduce(iterStepper, apply(compose(map(inc), map(double)), listOf()), [1, 2]) == [4, 6]
    assert reduce(iterStepper, apply(compose(map(double), map(inc)), listOf()), [1, 2]) == [3, 5]

def test_order_with_halt():
    # take then index: indexes restart from the truncated stream.
    assert reduce(iterStepper, apply(compose(take(2), withIndex), listOf()), "abc") == [(0, "a"), (1, "b")]
    # filter then take: take counts survivors only.
    assert reduce(iterStepper, apply(compose(filter(odd), take(2)), listOf()), [1, 2, 3, 4, 5]) == [1, 3]
    assert reduce(iterStepper, apply(compose(take(2), filter(odd)), listOf()), [1, 2, 3, 4, 5]) == [1]

def test_associativity(xs, n):
    t1 = map(inc)
    t2 = take(n)
    t3 = withIndex
    left = compose(compose(t1, t2), t3)
    right = compose(t1, compose(t2, t3))
    assert observe(left, xs) == observe(right, xs)

def test_associativity_with_drop(xs, n):
    t1 = drop(1)
    t2 = filter(odd)
    t3 = take(n)
    left = compose(compose(t1, t2), t3)
    right = compose(t1, compose(t2, t3))
    assert observe(left, xs) == observe(right, xs)

def test_identity(xs, n):
    chain = compose(withIndex, take(n))
    plain = observe(chain, xs)
    assert observe(compose(map(identity), chain), xs) == plain
    assert observe(compose(chain, map(identity)), xs) == plain
    assert observe(compose(withIndex, compose(map(identity), take(n))), xs) == plain

def test_halt_propagates_outward():
    inner = Guard(member(2))
    outer = Guard(apply(compose(withIndex, compose(map(lambda p: p[1]), take(10))), inner.reducer))
    assert reduce(iterStepper, outer.reducer, [1, 2, 3]) is True
    assert outer.halted
    assert outer.steps == 2

def test_transducers_are_reusable(xs, n):
    xform = compose(withIndex, take(n))
    assert observe(xform, xs) == observe(xform, xs)
