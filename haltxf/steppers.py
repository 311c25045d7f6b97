"""
Reference steppers. A stepper is (step, reply, collection) -> reply.
It visits elements in the collection's natural order, never calls step once a
Halt has been seen, and returns exactly the last reply it saw.
"""
from collections.abc import Mapping


def stepper(traverse):
    """Build a stepper from traverse, a function of collection -> iterator."""
    def stepped(step, reply, collection):
        if reply.halted:
            return reply
        for x in traverse(collection):
            reply = step(x, reply.state)
            if reply.halted:
                break
        return reply
    stepped.__name__ = "stepper_" + getattr(traverse, "__name__", "traverse")
    return stepped


iterStepper = stepper(iter)
iterStepper.__doc__ = """Steps any iterable in iteration order."""


def _items(mapping):
    assert isinstance(mapping, Mapping), mapping
    return iter(mapping.items())


itemsStepper = stepper(_items)


def _leaves(tree):
    """Depth first, left to right leaves of nested lists and tuples."""
    stack = [iter([tree])]
    while stack:
        try:
            node = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue
        if isinstance(node, (list, tuple)):
            stack.append(iter(node))
        else:
            yield node


nestedStepper = stepper(_leaves)


def irange(start, increment):
    while True:
        yield start
        start += increment

def repeat(value):
    while True:
        yield value

def repeatedly(fn):
    while True:
        yield fn()
