import functools
import timeit
from itertools import islice
from tabulate import tabulate
from haltxf import apply, compose, iterStepper, reduce, transduce, take
from haltxf.combinators import filter as transfilter
from haltxf.reducers import fold, listOf, sumOf
from haltxf.steppers import irange
from haltxf.xf import map as transmap

def isEven(n):
    return n % 2 == 0

def plus(x, y):
    return x + y

def performance_compare(*cases, case_args=None, timeit_kwargs=None):
    """Time each case on the same arguments; scale is relative to the fastest."""
    args = case_args or ()
    timings = [(case.__name__, timeit.timeit(functools.partial(case, *args), **(timeit_kwargs or {})))
               for case in cases]
    fastest = min(elapsed for (_, elapsed) in timings)
    rows = [(name, elapsed, "%.2f" % (elapsed / fastest)) for (name, elapsed) in timings]
    print(tabulate(rows, headers=['case', 'time', 'scale']))

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_builtins(ns):
    return sum(filter(isEven, ns))

def sum_even_transduce(ns):
    return transduce(iterStepper, transfilter(isEven), sumOf(), ns)

def test_sum_even():
    performance_compare(
        sum_even_loop,
        sum_even_builtins,
        sum_even_transduce,
        case_args=[list(range(1000))],
        timeit_kwargs={'number': 1000})

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

incs = transmap(lambda x: x + 1)
squares = transmap(lambda x: x * x)
inc_square = apply(compose(incs, squares), listOf())

def inc_square_transduce(nums):
    return reduce(iterStepper, inc_square, nums)

hundredK = range(100000)

def test_maps():
    performance_compare(inc_square_loop,
                        inc_square_comprehension,
                        inc_square_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def first_squares_loop(n):
    out = []
    for x in irange(0, 1):
        if len(out) >= n:
            break
        out.append(x * x)
    return out

def first_squares_islice(n):
    return [x * x for x in islice(irange(0, 1), n)]

def first_squares_transduce(n):
    return transduce(iterStepper, compose(squares, take(n)), listOf(), irange(0, 1))

def test_early_termination():
    performance_compare(first_squares_loop,
                        first_squares_islice,
                        first_squares_transduce,
                        case_args=[10000],
                        timeit_kwargs={'number': 100})

def reduce_builtin(ns):
    return functools.reduce(plus, ns, 0)

def reduce_fold(ns):
    return reduce(iterStepper, fold(plus, 0), ns)

def test_reduce():
    performance_compare(reduce_builtin,
                        reduce_fold,
                        case_args=[range(10000)],
                        timeit_kwargs={'number': 1000})
