from functools import reduce as foldl
from typing import Callable, Generic, TypeVar

from func_prototypes import typed, returned

from haltxf.reducer import Reducer, reducer, reduce
from haltxf.util import identity

TS = TypeVar("TS")
RS = TypeVar("RS")
TR = TypeVar("TR")
RR = TypeVar("RR")
TA = TypeVar("TA")
RA = TypeVar("RA")

Wrap = Callable[[Reducer[RS, RR, RA]], Reducer[TS, TR, TA]]


class Transducer(Generic[TS, RS, TR, RR, TA, RA]):
    """
    A reusable transformation from an inner Reducer[RS, RR, RA] to an outer
    Reducer[TS, TR, TA]. Holds no state until applied.
    """

    def __init__(self, wrap: Wrap):
        self.wrap = wrap

    def __or__(self, other):
        """t1 | t2 is compose(t1, t2): t1 feeds into t2."""
        if not isinstance(other, Transducer):
            return NotImplemented
        return compose(self, other)

    def __repr__(self):
        return "Transducer(%s)" % getattr(self.wrap, "__name__", self.wrap)


def transducer(initF, stepF, finishF):
    """
    Build a Transducer from three lifts over the inner reducer's parts:
    initF: inner initial reply -> outer initial reply
    stepF: inner step -> outer step
    finishF: inner finish -> outer finish
    """
    def wrap(inner):
        return reducer(initF(inner.initial), stepF(inner.step), finishF(inner.finish))
    return Transducer(wrap)


@returned(Transducer)
@typed(Transducer, Transducer)
def compose(t1, t2):
    """
    compose(t1, t2) wraps t2 first and t1 around it, so at run time inputs
    reach t1's step before t2's.
    """
    def composed(rf):
        return t1.wrap(t2.wrap(rf))
    return Transducer(composed)


@returned(Reducer)
@typed(Transducer, Reducer)
def apply(t, r):
    return t.wrap(r)


passthrough = Transducer(identity)


def pipeline(*xforms):
    """Compose any number of transducers left to right. No xforms is passthrough."""
    return foldl(compose, xforms, passthrough)


def transduce(stepper, xform, reducer, collection):
    return reduce(stepper, apply(xform, reducer), collection)
