import inspect
import pytest

import opcontract
from opcontract import make_opdef, error


@pytest.fixture
def frozen(registry):
    registry.register('Add', 'add.py', 1).num_inputs(2).num_outputs(1)
    registry.register('Free', 'free.py', 1).same_number_of_output()
    registry.freeze()
    return registry


def test_register_records_the_call_site(default_registry):
    op = opcontract.register('Relu').num_inputs(1)
    assert op.file == __file__
    assert op.line > 0
    assert 'Relu' in default_registry


def test_operator_schema_decorator(registry):
    @opcontract.operator_schema('Relu', registry=registry)
    def relu_schema(op):
        op.num_inputs(1).num_outputs(1)

    op = registry.schemas['Relu']
    assert op.file == __file__
    assert op.line == relu_schema.__code__.co_firstlineno
    assert op.input_arity(1) and not op.input_arity(2)


def test_operator_schema_decorator_duplicate(registry):
    registry.register('Relu', 'relu.py', 3)
    with pytest.raises(error.DuplicateRegistration):
        @opcontract.operator_schema('Relu', registry=registry)
        def relu_schema(op):
            pass


def test_freeze_and_lookup_default_registry(default_registry):
    opcontract.register('Relu')
    opcontract.freeze()
    assert opcontract.lookup('Relu') is default_registry.schemas['Relu']
    assert opcontract.lookup('Conv') is None


def test_check_known_operator(frozen):
    status = opcontract.check(make_opdef('Add', ['A'], ['B']), registry=frozen)
    assert isinstance(status, error.InputArityError)
    assert opcontract.verify(make_opdef('Add', ['A', 'B'], ['C']),
            registry=frozen)


def test_unknown_operator_permissive_and_strict(frozen):
    opdef = make_opdef('Conv', ['X', 'W'], ['Y'])
    assert isinstance(opcontract.check(opdef, registry=frozen), error.Success)
    assert opcontract.verify(opdef, registry=frozen)
    status = opcontract.check(opdef, strict=True, registry=frozen)
    assert isinstance(status, error.UnknownOperatorType)
    assert status.kind == error.FailureKind.UnknownOperator
    assert not opcontract.verify(opdef, strict=True, registry=frozen)


def test_check_all_collects_every_violation(frozen):
    opdefs = [
            make_opdef('Add', ['A', 'B'], ['C']),
            make_opdef('Add', ['A', 'B'], ['A']),
            make_opdef('Free', ['A'], []),
            make_opdef('Conv', ['X'], ['Y']),
            ]
    failures = opcontract.check_all(opdefs, registry=frozen)
    assert [opdef for opdef, _ in failures] == opdefs[1:3]
    kinds = [status.kind for _, status in failures]
    assert kinds == [error.FailureKind.UnauthorizedInplace,
            error.FailureKind.OutputCount]

    strict = opcontract.check_all(opdefs, strict=True, registry=frozen)
    assert len(strict) == 3


def test_calculate_output_of_unknown_operator(frozen):
    assert opcontract.calculate_output('Free', 4, registry=frozen) == 4
    assert opcontract.calculate_output('Conv', 4, registry=frozen) == -1


def test_explain(frozen):
    lines = opcontract.explain('Add', registry=frozen)
    assert lines[0] == 'Schema for \'Add\''
    text = '\n'.join(lines)
    assert 'exactly 2' in text
    assert 'add.py:1' in text
    with pytest.raises(RuntimeError):
        opcontract.explain('Conv', registry=frozen)


def test_violations_report(frozen):
    opdef = make_opdef('Add', ['A', 'B'], ['A'])
    lines = opcontract.report.violations_report(
            opcontract.check_all([opdef], registry=frozen))
    assert len(lines) == 1
    assert 'UnauthorizedInplace' in lines[0]
    assert opcontract.report.violations_report([]) == ['All operators passed']


def test_register_into_explicit_registry(registry, default_registry):
    op = opcontract.register('Relu', registry=registry)
    assert registry.schemas['Relu'] is op
    assert 'Relu' not in default_registry
    assert op.file == __file__
    assert op.line == inspect.currentframe().f_lineno - 4
