"""
Terminal reducers: the consumers at the inner end of a pipeline.
Each call builds a fresh Reducer; none of them mutate their state, so a
Reducer value may be reused across reductions.
"""
from typing import Any, NamedTuple

from haltxf.reducer import reducer
from haltxf.reply import Continue, Halt
from haltxf.util import identity


class Cons(NamedTuple):
    head: Any
    tail: Any


def _cons(x, acc):
    return Continue(Cons(x, acc))

def _unwind(acc):
    out = []
    while acc is not None:
        out.append(acc.head)
        acc = acc.tail
    out.reverse()
    return out

def listOf():
    """Collects inputs into a list, in order."""
    return reducer(Continue(None), _cons, _unwind)

def fold(fn, seed):
    """
    Left fold. fn is (acc, val) -> acc, think foldl from Haskell.
    """
    def folding(x, acc):
        return Continue(fn(acc, x))
    return reducer(Continue(seed), folding, identity)

def sumOf():
    return fold(lambda acc, val: acc + val, 0)

def joinedWith(separator):
    def joint(acc, val):
        if acc is None:
            return "%s" % (val,)
        return "%s%s%s" % (acc, separator, val)
    return reducer(Continue(None), lambda x, acc: Continue(joint(acc, x)), lambda acc: acc or '')

def length():
    return fold(lambda n, _: n + 1, 0)

def isEmpty():
    """True if no input arrives. Halts on the first one."""
    return reducer(Continue(True), lambda x, _: Halt(False), identity)

def member(value):
    """True once value is seen. Halts on the first match."""
    def seek(x, _):
        if x == value:
            return Halt(True)
        return Continue(False)
    return reducer(Continue(False), seek, identity)

def expectSequence(expected):
    """
    True iff the inputs are exactly expected, in order.
    Halts on the first mismatch or on a surplus input.
    """
    expected = tuple(expected)

    def expect(x, i):
        if i < len(expected) and expected[i] == x:
            return Continue(i + 1)
        return Halt(None)

    def matched(i):
        return i == len(expected)

    return reducer(Continue(0), expect, matched)
