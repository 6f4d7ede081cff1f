import enum


class SchemaError(BaseException):
    """Represents an error in a schema definition or its registration"""
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg

class InvalidSchema(SchemaError):
    """A schema whose constraints contradict each other"""
    pass

class DuplicateRegistration(SchemaError):
    """The same operator type was registered twice"""
    def __init__(self, op_type, file, line, orig_file, orig_line):
        msg = (f'Trying to register schema with name \'{op_type}\' from file '
                f'{file} line {line}, but it is already registered from file '
                f'{orig_file} line {orig_line}')
        super().__init__(msg)
        self.op_type = op_type
        self.file = file
        self.line = line
        self.orig_file = orig_file
        self.orig_line = orig_line

class RegistryFrozen(SchemaError):
    """A write was attempted after the registry was frozen"""
    pass

class RegistryNotFrozen(SchemaError):
    """A read was attempted before the registry was frozen"""
    pass

class OpDefParseError(RuntimeError):
    pass


class FailureKind(enum.Enum):
    InputArity = 0
    OutputArity = 1
    OutputCount = 2
    UnauthorizedInplace = 3
    MissingInplace = 4
    UnknownOperator = 5


class SchemaStatus(object):
    """Represent the outcome of checking an operator against its schema"""
    kind = None

    def message(self, opdef):
        raise NotImplementedError

class Success(SchemaStatus):
    def message(self, opdef):
        return 'Success'

class InputArityError(SchemaStatus):
    kind = FailureKind.InputArity

    def __init__(self, num_inputs, constraint):
        self.num_inputs = num_inputs
        self.constraint = constraint

    def message(self, opdef):
        msg =  f'Operator \'{opdef.op_type}\' received {self.num_inputs} '
        msg += f'inputs but expected {self.constraint.describe()}'
        return msg

class OutputArityError(SchemaStatus):
    kind = FailureKind.OutputArity

    def __init__(self, num_outputs, constraint):
        self.num_outputs = num_outputs
        self.constraint = constraint

    def message(self, opdef):
        msg =  f'Operator \'{opdef.op_type}\' produced {self.num_outputs} '
        msg += f'outputs but expected {self.constraint.describe()}'
        return msg

class OutputCountMismatch(SchemaStatus):
    """The number of outputs differs from the one computed from the inputs"""
    kind = FailureKind.OutputCount

    def __init__(self, exp_num_outputs, act_num_outputs):
        self.expected_num_outputs = exp_num_outputs
        self.actual_num_outputs = act_num_outputs

    def message(self, opdef):
        msg =  f'Operator \'{opdef.op_type}\' has {self.actual_num_outputs} '
        msg += f'outputs but {len(opdef.inputs)} inputs imply '
        msg += f'{self.expected_num_outputs}'
        return msg

class UnauthorizedInplace(SchemaStatus):
    kind = FailureKind.UnauthorizedInplace

    def __init__(self, in_idx, out_idx, slot):
        self.in_idx = in_idx
        self.out_idx = out_idx
        self.slot = slot

    def message(self, opdef):
        msg =  f'Input {self.in_idx} and output {self.out_idx} '
        msg += f'(\'{self.slot}\') are in-place but operator '
        msg += f'\'{opdef.op_type}\' does not allow it'
        return msg

class MissingInplace(SchemaStatus):
    kind = FailureKind.MissingInplace

    def __init__(self, in_idx, out_idx, in_slot, out_slot):
        self.in_idx = in_idx
        self.out_idx = out_idx
        self.in_slot = in_slot
        self.out_slot = out_slot

    def message(self, opdef):
        msg =  f'Operator \'{opdef.op_type}\' requires input {self.in_idx} '
        msg += f'and output {self.out_idx} to be in-place, but they are '
        msg += f'\'{self.in_slot}\' and \'{self.out_slot}\''
        return msg

class UnknownOperatorType(SchemaStatus):
    """Only reported when a caller asks for strict checking"""
    kind = FailureKind.UnknownOperator

    def message(self, opdef):
        return f'No schema is registered for operator \'{opdef.op_type}\''
