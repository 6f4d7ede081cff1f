"""
Tagged constraint variants used by OpSchema.

Arity constraints are predicates over a non-negative slot count.  In-place
relations are predicates over an (input index, output index) pair.  Output
counts map an input count to an output count.  The common cases (an exact
count, a range, a finite set, the identity relation, a finite pair set) stay
introspectable so that reports can describe them and OpSchema.validate can
reason about them.  The Custom* variants wrap an arbitrary function.
"""
import numbers
from collections.abc import Iterable
from .error import InvalidSchema


def _check_count(val, what):
    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        raise InvalidSchema(f'{what} must be an integer.  Received {val!r}')
    if val < 0:
        raise InvalidSchema(f'{what} must be non-negative.  Received {val}')
    return int(val)

class ArityConstraint(object):
    def __call__(self, count):
        raise NotImplementedError

    def describe(self):
        raise NotImplementedError

    def max_count(self):
        """
        The largest count accepted, or None if unbounded or unknown
        """
        return None

    def __repr__(self):
        return f'{type(self).__name__}({self.describe()})'

class Exact(ArityConstraint):
    def __init__(self, n):
        self.n = _check_count(n, 'Exact count')

    def __call__(self, count):
        return count == self.n

    def describe(self):
        return f'exactly {self.n}'

    def max_count(self):
        return self.n

class Range(ArityConstraint):
    """
    Inclusive range [lo, hi].  hi = None signifies no upper limit
    """
    def __init__(self, lo, hi=None):
        self.lo = _check_count(lo, 'Range minimum')
        if hi is not None:
            self.hi = _check_count(hi, 'Range maximum')
            if self.hi < self.lo:
                raise InvalidSchema(
                    f'Range maximum {hi} is less than its minimum {lo}')
        else:
            self.hi = None

    def __call__(self, count):
        if count < self.lo:
            return False
        return self.hi is None or count <= self.hi

    def describe(self):
        if self.hi is None:
            return f'at least {self.lo}'
        return f'between {self.lo} and {self.hi}'

    def max_count(self):
        return self.hi

class OneOf(ArityConstraint):
    def __init__(self, values):
        self.values = frozenset(_check_count(v, 'Allowed count')
                for v in values)

    def __call__(self, count):
        return count in self.values

    def describe(self):
        if len(self.values) == 0:
            return 'no count at all'
        return 'one of {' + ', '.join(str(v) for v in sorted(self.values)) + '}'

    def max_count(self):
        return max(self.values, default=0)

class CustomArity(ArityConstraint):
    def __init__(self, func):
        self.func = func

    def __call__(self, count):
        return bool(self.func(count))

    def describe(self):
        name = getattr(self.func, '__name__', 'function')
        return f'accepted by {name}'

def arity(*args):
    """
    Build an ArityConstraint from the argument forms accepted by
    OpSchema.num_inputs and OpSchema.num_outputs:
    (n), (min, max), (iterable of counts) or (callable)
    """
    if len(args) == 2:
        return Range(*args)
    if len(args) != 1:
        raise InvalidSchema(
            f'Expected one or two arguments for an arity constraint.  '
            f'Received {len(args)}')
    arg = args[0]
    if isinstance(arg, ArityConstraint):
        return arg
    if isinstance(arg, numbers.Integral) and not isinstance(arg, bool):
        return Exact(arg)
    if callable(arg):
        return CustomArity(arg)
    if isinstance(arg, Iterable) and not isinstance(arg, str):
        return OneOf(arg)
    raise InvalidSchema(
        f'Cannot interpret {arg!r} as an arity constraint.  Use an integer, '
        f'a (min, max) pair, a set of integers or a function')


class InplaceRelation(object):
    def __call__(self, in_idx, out_idx):
        raise NotImplementedError

    def describe(self):
        raise NotImplementedError

    def __repr__(self):
        return f'{type(self).__name__}({self.describe()})'

class NoInplace(InplaceRelation):
    def __call__(self, in_idx, out_idx):
        return False

    def describe(self):
        return 'none'

class OneToOne(InplaceRelation):
    def __call__(self, in_idx, out_idx):
        return in_idx == out_idx

    def describe(self):
        return 'input i with output i'

class PairSet(InplaceRelation):
    def __init__(self, pairs):
        checked = set()
        for pair in pairs:
            try:
                in_idx, out_idx = pair
            except (TypeError, ValueError):
                raise InvalidSchema(
                    f'In-place pairs must be (input index, output index) '
                    f'pairs.  Received {pair!r}')
            checked.add((_check_count(in_idx, 'Input index'),
                _check_count(out_idx, 'Output index')))
        self.pairs = frozenset(checked)

    def __call__(self, in_idx, out_idx):
        return (in_idx, out_idx) in self.pairs

    def describe(self):
        if len(self.pairs) == 0:
            return 'none'
        return ', '.join(f'{i}->{o}' for i, o in sorted(self.pairs))

class CustomInplace(InplaceRelation):
    def __init__(self, func):
        self.func = func

    def __call__(self, in_idx, out_idx):
        return bool(self.func(in_idx, out_idx))

    def describe(self):
        name = getattr(self.func, '__name__', 'function')
        return f'pairs accepted by {name}'

def inplace(arg):
    """
    Build an InplaceRelation from a callable (in_idx, out_idx) -> bool or an
    iterable of (in_idx, out_idx) pairs
    """
    if isinstance(arg, InplaceRelation):
        return arg
    if callable(arg):
        return CustomInplace(arg)
    if isinstance(arg, Iterable) and not isinstance(arg, str):
        return PairSet(arg)
    raise InvalidSchema(
        f'Cannot interpret {arg!r} as an in-place rule.  Use a function of '
        f'(input index, output index) or a set of such pairs')


class OutputCount(object):
    def __call__(self, num_input):
        raise NotImplementedError

    def describe(self):
        raise NotImplementedError

class SameAsInputs(OutputCount):
    def __call__(self, num_input):
        return num_input

    def describe(self):
        return 'same as number of inputs'

class CustomCount(OutputCount):
    def __init__(self, func):
        self.func = func

    def __call__(self, num_input):
        return self.func(num_input)

    def describe(self):
        name = getattr(self.func, '__name__', 'function')
        return f'computed by {name}'

def output_count(calc):
    if isinstance(calc, OutputCount):
        return calc
    if not callable(calc):
        raise InvalidSchema(
            f'Output calculator must be a function of the number of inputs.  '
            f'Received {calc!r}')
    return CustomCount(calc)
