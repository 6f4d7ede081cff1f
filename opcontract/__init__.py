import importlib
import inspect
from .schema import OpSchema, CANNOT_COMPUTE_NUM_OUTPUTS
from .registry import OpSchemaRegistry, default_registry
from .opdef import OperatorDef, make_opdef
from .opdef_parser import parse_opdef
from .error import *
from . import report

def _registry(registry):
    return default_registry() if registry is None else registry

def register(op_type, registry=None):
    """
    Register a schema for {op_type} in {registry} (the process-wide one by
    default), declared at the caller's file and line, and return it for
    configuration:

        opcontract.register('Relu').num_inputs(1).num_outputs(1)
    """
    caller = inspect.currentframe().f_back
    return _registry(registry).register(op_type, caller.f_code.co_filename,
            caller.f_lineno)

def operator_schema(op_type, registry=None):
    """
    Decorator registering {op_type} at the decorated function's definition
    site and configuring it by calling the function with the new schema.
    """
    def wrap(init_func):
        _register_init(_registry(registry), op_type, init_func)
        return init_func
    return wrap

def _register_init(registry, op_type, init_func):
    code = init_func.__code__
    op = registry.register(op_type, code.co_filename, code.co_firstlineno)
    init_func(op)
    return op

def available_ops():
    """
    List the operator schema modules bundled in the opcontract.ops package.
    Each module defines OP_TYPE and an init_schema(op) function.
    """
    from pkgutil import walk_packages
    from . import ops
    modinfos = list(walk_packages(ops.__path__, ops.__name__ + '.'))
    return [mi.name.rsplit('.', 1)[1] for mi in modinfos if not mi.ispkg]

def init(*op_modules, registry=None):
    """
    Register the schemas of each module in {op_modules}, or all bundled ones
    if empty, then freeze the registry and return it.
    """
    registry = _registry(registry)
    if len(op_modules) == 0:
        op_modules = available_ops()
    for mod_name in op_modules:
        mod = importlib.import_module(f'{__name__}.ops.{mod_name}')
        _register_init(registry, mod.OP_TYPE, mod.init_schema)
    registry.freeze()
    return registry

def freeze(registry=None):
    _registry(registry).freeze()

def lookup(op_type, registry=None):
    return _registry(registry).lookup(op_type)

def check(opdef, strict=False, registry=None):
    """
    Check {opdef} against the schema of its operator type.  An operator type
    with no schema passes unless {strict} is set.
    """
    op = lookup(opdef.op_type, registry)
    if op is None:
        return UnknownOperatorType() if strict else Success()
    return op.check(opdef)

def verify(opdef, strict=False, registry=None):
    op = lookup(opdef.op_type, registry)
    if op is None:
        return not strict
    return op.verify(opdef)

def check_all(opdefs, strict=False, registry=None):
    """
    Check every operator in {opdefs}.  Returns the list of (opdef, status)
    for those that failed.
    """
    failures = []
    for opdef in opdefs:
        status = check(opdef, strict, registry)
        if not isinstance(status, Success):
            failures.append((opdef, status))
    return failures

def calculate_output(op_type, num_input, registry=None):
    op = lookup(op_type, registry)
    if op is None:
        return CANNOT_COMPUTE_NUM_OUTPUTS
    return op.calculate_output(num_input)

def explain(op_type, registry=None):
    """
    Produce the report lines describing the contract of {op_type}
    """
    op = lookup(op_type, registry)
    if op is None:
        raise RuntimeError(
            f'Could not find a schema named \'{op_type}\' in the registry.  '
            f'Use opcontract.available_ops() to see bundled ops.')
    return report.schema_report(op_type, op)
