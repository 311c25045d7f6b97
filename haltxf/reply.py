"""
Replies are the early termination envelope threaded through every step.

A Reply always carries a state. The tag only says whether the driver may keep
feeding input (Continue) or must stop and finish with this state (Halt).
"""
from typing import Callable, Generic, TypeVar

S = TypeVar("S")
T = TypeVar("T")


class Reply(Generic[S]):
    """Base of the two tags. Only Continue and Halt are constructed."""

    def __init__(self, state: S):
        if type(self) is Reply:
            raise TypeError("Reply is either Continue or Halt, not bare")
        self.state = state

    def retag(self, state: T) -> "Reply[T]":
        """Same tag, new state."""
        return type(self)(state)

    def __eq__(self, other):
        return type(self) is type(other) and self.state == other.state

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self).__name__, self.state))

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.state)


class Continue(Reply[S]):
    halted = False


class Halt(Reply[S]):
    halted = True


def map(fn: Callable[[S], T], reply: Reply[S]) -> Reply[T]:
    """Transform the carried state, keeping the tag."""
    return reply.retag(fn(reply.state))


def andThen(fn: Callable[[S], Reply[T]], reply: Reply[S]) -> Reply[T]:
    """
    Sequence a reply producing function after reply.
    Halt is absorbing: fn is only consulted for Continue.
    """
    if reply.halted:
        return reply
    return fn(reply.state)


def state(reply: Reply[S]) -> S:
    return reply.state


def halt(reply: Reply[S]) -> Reply[S]:
    """Force the Halt tag onto reply, keeping its state."""
    if reply.halted:
        return reply
    return Halt(reply.state)
