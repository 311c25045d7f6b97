import logging
from typing import Any, Callable, Generic, NamedTuple, TypeVar

from haltxf.reply import Reply, state

log = logging.getLogger(__name__)

S = TypeVar("S")
R = TypeVar("R")
A = TypeVar("A")

Step = Callable[[A, S], Reply[S]]
Finish = Callable[[S], R]


class Pair(NamedTuple):
    """State of a stage wrapped around an inner reducer: (own, inner)."""
    own: Any
    inner: Any


class Reducer(Generic[S, R, A]):
    """
    Consumes inputs of type A one at a time, threading a state S, and
    produces a result R.
    initial is a Reply: a reducer may refuse all input by starting halted.
    step is only called while the current reply is Continue.
    finish runs once, on whichever state was current when traversal ended.
    """

    def __init__(self, initial: Reply[S], step: Step, finish: Finish):
        self.initial = initial
        self.step = step
        self.finish = finish

    def __repr__(self):
        return "Reducer(%r, %s, %s)" % (
            self.initial,
            getattr(self.step, "__name__", self.step),
            getattr(self.finish, "__name__", self.finish))


def reducer(initial, step, finish):
    return Reducer(initial, step, finish)


def reduce(stepper, reducer, collection):
    """
    Drive reducer over collection with stepper, then finish.
    stepper is (step, reply, collection) -> reply and must stop at the first Halt.
    """
    final = stepper(reducer.step, reducer.initial, collection)
    if final.halted:
        log.debug("reduction over %s halted", type(collection).__name__)
    return reducer.finish(state(final))
