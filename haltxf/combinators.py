"""
Transducers beyond the canonical four, built from the same algebra.

Stages that only look at one input at a time go through transducer or
statefulMap. Stages that buffer input and flush it at finish time (partition,
reverse) need the whole inner reducer, so they build a Transducer directly.
Either way an inner reducer is never stepped after it halted.
"""
from func_prototypes import typed, returned

from haltxf.reducer import Pair, reducer
from haltxf.reducers import Cons
from haltxf.reply import Continue, andThen, state
from haltxf.reply import map as rmap
from haltxf.steppers import iterStepper
from haltxf.transducer import Transducer, transducer
from haltxf.util import identity
from haltxf.xf import Emit, Stop, finishInner, pairing, statefulMap


class _Unseen:
    pass


def filter(pred):
    def lift(step):
        def filtered(x, s):
            if pred(x):
                return step(x, s)
            return Continue(s)
        return filtered
    return transducer(identity, lift, identity)


@returned(Transducer)
@typed(int)
def drop(n):
    def lift(step):
        def dropping(x, pair):
            if pair.own > 0:
                return Continue(Pair(pair.own - 1, pair.inner))
            return rmap(lambda inner: Pair(0, inner), step(x, pair.inner))
        return dropping
    return transducer(pairing(n), lift, finishInner)


def takeWhile(pred):
    """Forward inputs while pred holds. The first failing input halts, unforwarded."""
    def check(x, own):
        if pred(x):
            return Emit(x, own)
        return Stop(own)
    return statefulMap(None, check)


def intersperse(separator):
    def lift(step):
        def interspersed(x, pair):
            if pair.own:
                reply = andThen(lambda inner: step(x, inner), step(separator, pair.inner))
            else:
                reply = step(x, pair.inner)
            return rmap(lambda inner: Pair(True, inner), reply)
        return interspersed
    return transducer(pairing(False), lift, finishInner)


def concat(stepper=iterStepper):
    """Each input is itself a collection; step its elements inward with stepper."""
    def lift(step):
        def concatenated(xs, s):
            return stepper(step, Continue(s), xs)
        return concatenated
    return transducer(identity, lift, identity)


def _dedupe_lift(step):
    def deduped(x, pair):
        if not isinstance(pair.own, _Unseen) and pair.own == x:
            return Continue(pair)
        return rmap(lambda inner: Pair(x, inner), step(x, pair.inner))
    return deduped


dedupe = transducer(pairing(_Unseen()), _dedupe_lift, finishInner)


@returned(Transducer)
@typed(int)
def partition(n):
    """
    Group inputs into tuples of n. A short trailing window is forwarded at
    finish time. The buffer is only non-empty while the inner reducer is
    still accepting, so the flush never steps a halted reducer.
    """
    if n < 1:
        raise ValueError("partition size must be positive, got %s" % n)

    def wrap(inner):
        def window(x, pair):
            chunk = pair.own + (x,)
            if len(chunk) < n:
                return Continue(Pair(chunk, pair.inner))
            return rmap(lambda s: Pair((), s), inner.step(chunk, pair.inner))

        def flush(pair):
            s = pair.inner
            if pair.own:
                s = state(inner.step(pair.own, s))
            return inner.finish(s)

        return reducer(pairing(())(inner.initial), window, flush)
    return Transducer(wrap)


def _newest_first(acc):
    while acc is not None:
        yield acc.head
        acc = acc.tail


def _reversing(inner):
    def buffer(x, pair):
        return Continue(Pair(Cons(x, pair.own), pair.inner))

    def replay(pair):
        reply = iterStepper(inner.step, Continue(pair.inner), _newest_first(pair.own))
        return inner.finish(state(reply))

    return reducer(pairing(None)(inner.initial), buffer, replay)


reverse = Transducer(_reversing)
