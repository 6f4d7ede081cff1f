import logging
import numpy as np
from . import predicates as pr
from .error import *

logger = logging.getLogger(__name__)

# Returned by OpSchema.calculate_output if the number of outputs cannot be
# determined from the number of inputs
CANNOT_COMPUTE_NUM_OUTPUTS = -1

# Most slots probed by OpSchema.validate along each axis
PROBE_LIMIT = 32

class OpSchema(object):
    """
    Records the structural contract of one operator type: how many inputs and
    outputs it accepts, how the output count follows from the input count,
    and which input/output slots may or must share storage.

    Each setter replaces whatever its field held before and returns the
    schema itself, so a contract is declared by chaining:

        op.num_inputs(2).num_outputs(1).allow_inplace({(0, 0)})
    """
    def __init__(self, file='unknown', line=0):
        self.file = file
        self.line = line
        self.frozen = False

        self.input_arity = pr.Range(0)
        self.output_arity = pr.Range(0)
        self.output_count = None
        self.inplace_allowed = pr.NoInplace()
        self.inplace_enforced = pr.NoInplace()

    def __repr__(self):
        return f'{type(self).__name__}({self.file}:{self.line})'

    def _set(self, field, value):
        if self.frozen:
            raise RegistryFrozen(
                f'Cannot modify the schema declared at {self.file} line '
                f'{self.line} after its registry was frozen')
        setattr(self, field, value)
        return self

    def num_inputs(self, *args):
        """
        Constrain the number of inputs to an exact count {n}, an inclusive
        range {min, max} (max=None for no limit), a set of allowed counts,
        or a function of the count returning a boolean
        """
        return self._set('input_arity', pr.arity(*args))

    def num_outputs(self, *args):
        """
        Constrain the number of outputs.  Takes the same forms as num_inputs
        """
        return self._set('output_arity', pr.arity(*args))

    def output_calculator(self, calc):
        """
        Set {calc}, a function of the number of inputs, to compute the
        number of outputs.  When set, it decides the expected output count
        in verify and calculate_output, regardless of num_outputs.
        """
        return self._set('output_count', pr.output_count(calc))

    def same_number_of_output(self):
        return self._set('output_count', pr.SameAsInputs())

    def allow_inplace(self, rule):
        """
        Permit input i and output j to share storage whenever {rule} holds
        for (i, j).  {rule} is a function or a set of (i, j) pairs.
        """
        return self._set('inplace_allowed', pr.inplace(rule))

    def allow_one_to_one_inplace(self):
        return self._set('inplace_allowed', pr.OneToOne())

    def enforce_inplace(self, rule):
        """
        Require input i and output j to share storage whenever {rule} holds
        for (i, j).  Every enforced pair must also be allowed.
        """
        return self._set('inplace_enforced', pr.inplace(rule))

    def enforce_one_to_one_inplace(self):
        return self._set('inplace_enforced', pr.OneToOne())

    def calculate_output(self, num_input):
        """
        Return the number of outputs implied by {num_input} inputs, or
        CANNOT_COMPUTE_NUM_OUTPUTS if no output calculator is set
        """
        if self.output_count is None:
            return CANNOT_COMPUTE_NUM_OUTPUTS
        return self.output_count(num_input)

    def check(self, opdef):
        """
        Check {opdef} against every constraint of the schema, in order.
        Returns Success, or the status describing the first violation found.
        """
        nin, nout = len(opdef.inputs), len(opdef.outputs)
        if not self.input_arity(nin):
            return InputArityError(nin, self.input_arity)
        if not self.output_arity(nout):
            return OutputArityError(nout, self.output_arity)
        if self.output_count is not None:
            expected = self.output_count(nin)
            if expected != nout:
                return OutputCountMismatch(expected, nout)

        aliased = np.array([ inp == out for inp in opdef.inputs
            for out in opdef.outputs ], dtype=bool).reshape(nin, nout)

        for i, j in np.ndindex(nin, nout):
            if aliased[i, j]:
                if not self.inplace_allowed(i, j):
                    return UnauthorizedInplace(i, j, opdef.inputs[i])
            elif self.inplace_enforced(i, j):
                return MissingInplace(i, j, opdef.inputs[i],
                        opdef.outputs[j])
        return Success()

    def verify(self, opdef):
        status = self.check(opdef)
        if isinstance(status, Success):
            return True
        logger.warning(status.message(opdef))
        return False

    def _probe_range(self, arity, probe_limit):
        max_count = arity.max_count()
        if max_count is None:
            return range(probe_limit)
        return range(min(max_count, probe_limit))

    def validate(self, probe_limit=PROBE_LIMIT):
        """
        Raise InvalidSchema if some enforced in-place pair is not also an
        allowed pair.  Enforced pair sets are checked exactly.  Other
        relations are checked over the slot indices reachable under the
        declared arities, up to {probe_limit} slots along each axis.
        """
        enforced = self.inplace_enforced
        if isinstance(enforced, pr.NoInplace):
            return
        if isinstance(enforced, pr.PairSet):
            pairs = sorted(enforced.pairs)
        else:
            in_range = self._probe_range(self.input_arity, probe_limit)
            out_range = self._probe_range(self.output_arity, probe_limit)
            pairs = ((i, j) for i in in_range for j in out_range
                    if enforced(i, j))

        for i, j in pairs:
            if not self.inplace_allowed(i, j):
                raise InvalidSchema(
                    f'Schema declared at {self.file} line {self.line} '
                    f'enforces in-place input {i} with output {j}, but does '
                    f'not allow it.  Allowed: '
                    f'{self.inplace_allowed.describe()}.  Enforced: '
                    f'{enforced.describe()}')

    def inventory(self):
        """
        Rows of (property, description) summarizing the contract
        """
        if self.output_count is None:
            count = 'not computable'
        else:
            count = self.output_count.describe()
        return [
                ('inputs', self.input_arity.describe()),
                ('outputs', self.output_arity.describe()),
                ('output count', count),
                ('in-place allowed', self.inplace_allowed.describe()),
                ('in-place enforced', self.inplace_enforced.describe()),
                ('declared at', f'{self.file}:{self.line}')
                ]
