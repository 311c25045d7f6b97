from haltxf.reply import Reply, Continue, Halt, andThen, state, halt
from haltxf.reducer import Reducer, Pair, reducer, reduce
from haltxf.transducer import Transducer, transducer, compose, apply, pipeline, passthrough, transduce
from haltxf.xf import Stop, Emit, map, mapInput, statefulMap, withIndex, take
from haltxf.steppers import stepper, iterStepper, itemsStepper, nestedStepper
from haltxf.reducers import listOf, expectSequence

__version__ = '0.1.0'
