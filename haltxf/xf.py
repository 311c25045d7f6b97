"""
The canonical combinators. Everything stateful in haltxf is shaped like
statefulMap: a private state paired with the inner reducer's state, and a
transition that either stops the stage or emits one value inward.
"""
from typing import Any, Callable, Generic, TypeVar

from func_prototypes import typed, returned

from haltxf.reducer import Pair
from haltxf.reply import Halt, halt
from haltxf.reply import map as rmap
from haltxf.transducer import Transducer, transducer
from haltxf.util import identity

P = TypeVar("P")
B = TypeVar("B")


class Stop(Generic[P]):
    """Stop the stage with its private state. Nothing is forwarded."""
    stopped = True

    def __init__(self, state: P):
        self.state = state

    def __eq__(self, other):
        return isinstance(other, Stop) and self.state == other.state

    def __repr__(self):
        return "Stop(%r)" % (self.state,)


class Emit(Generic[B, P]):
    """Forward value to the inner reducer and continue with state."""
    stopped = False

    def __init__(self, value: B, state: P):
        self.value = value
        self.state = state

    def __eq__(self, other):
        return isinstance(other, Emit) and (self.value, self.state) == (other.value, other.state)

    def __repr__(self):
        return "Emit(%r, %r)" % (self.value, self.state)


def pairing(own):
    """Lift an inner initial reply into Pair(own, inner), keeping its tag."""
    def init(reply):
        return rmap(lambda inner: Pair(own, inner), reply)
    return init


def finishInner(finish):
    """Lift an inner finish over Pair state, discarding the stage's own part."""
    def finished(pair):
        return finish(pair.inner)
    return finished


def map(fn):
    """Transform each input with fn before the inner reducer sees it."""
    def lift(step):
        def mapped(x, s):
            return step(fn(x), s)
        return mapped
    return transducer(identity, lift, identity)


mapInput = map


def statefulMap(initial: Any, step1: Callable[[Any, Any], Any]) -> Transducer:
    """
    step1 is (input, own) -> Stop(own') | Emit(output, own').
    The stage state is Pair(own, inner).
    """
    def lift(step):
        def stepped(x, pair):
            out = step1(x, pair.own)
            if out.stopped:
                return Halt(Pair(out.state, pair.inner))
            own = out.state
            return rmap(lambda inner: Pair(own, inner), step(out.value, pair.inner))
        return stepped

    return transducer(pairing(initial), lift, finishInner)


def _index(x, i):
    return Emit((i, x), i + 1)


withIndex = statefulMap(0, _index)


@returned(Transducer)
@typed(int)
def take(n):
    """
    Forward at most n inputs. Halts on the input that fills the last slot,
    or immediately when n <= 0 without ever stepping the inner reducer.
    """
    def init(reply):
        paired = pairing(n)(reply)
        if n <= 0:
            return halt(paired)
        return paired

    def lift(step):
        def taking(x, pair):
            m = pair.own
            reply = rmap(lambda inner: Pair(m - 1, inner), step(x, pair.inner))
            if m <= 1:
                return halt(reply)
            return reply
        return taking

    return transducer(init, lift, finishInner)
