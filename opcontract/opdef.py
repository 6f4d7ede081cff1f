"""
An operator instance as seen by the schema checks: the operator type name and
the ordered input and output slot names.  Two slots alias when they compare
equal.
"""
from collections import namedtuple

OperatorDef = namedtuple('OperatorDef', ['op_type', 'inputs', 'outputs'])

def make_opdef(op_type, inputs=(), outputs=()):
    return OperatorDef(op_type, tuple(inputs), tuple(outputs))
