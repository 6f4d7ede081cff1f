import pytest

import opcontract
from opcontract import parse_opdef


@pytest.fixture
def loaded(registry):
    return opcontract.init(registry=registry)


def test_available_ops_lists_bundled_modules():
    names = opcontract.available_ops()
    for mod_name in ('add', 'relu', 'iter', 'free', 'weighted_sum'):
        assert mod_name in names


def test_init_registers_every_bundled_op_and_freezes(loaded):
    assert loaded.frozen
    assert len(loaded) == len(opcontract.available_ops())
    assert 'MomentumSGDUpdate' in loaded


def test_init_selected_modules(registry):
    opcontract.init('add', 'relu', registry=registry)
    assert registry.names() == ['Add', 'Relu']


def test_registration_site_is_the_init_function(loaded):
    op = loaded.lookup('Relu')
    assert op.file.endswith('relu.py')
    assert op.line == 3


@pytest.mark.parametrize('text, expected', [
    ('Add(A, B) -> (C)', True),
    ('Add(A, B) -> (A)', True),
    ('Add(A, B) -> (B)', True),
    ('Add(A) -> (C)', False),
    ('Relu(X) -> (X)', True),
    ('Relu(X) -> (X, Y)', False),
    ('Copy(X) -> (X)', False),
    ('Sum(A, B, C) -> (A)', True),
    ('Sum(A, B, C) -> (B)', False),
    ('Sum() -> (A)', False),
    ('Split(X) -> (A, B, C)', True),
    ('Split(X, sizes) -> ()', False),
    ('Concat(A, B) -> (out, split_info)', True),
    ('Concat(A, B) -> (out)', False),
    ('Print(X) -> ()', True),
    ('Iter(it) -> (it)', True),
    ('Iter() -> (it)', True),
    ('Iter(it) -> (next_it)', False),
    ('Free(A, B) -> (A, B)', True),
    ('Free(A, B) -> (B, A)', False),
    ('Free(A, B) -> (A)', False),
    ('MomentumSGDUpdate(g, m, lr, p) -> (g, m, p)', True),
    ('MomentumSGDUpdate(g, m, lr, p) -> (g, m, lr)', False),
    ('WeightedSum(X0, w0, X1, w1) -> (X0)', True),
    ('WeightedSum(X0, w0, X1) -> (Y)', False),
])
def test_bundled_schemas(loaded, text, expected):
    opdef = parse_opdef(text)
    assert loaded.lookup(opdef.op_type).verify(opdef) == expected


def test_calculate_output_of_bundled_ops(loaded):
    assert opcontract.calculate_output('Free', 3, registry=loaded) == 3
    assert (opcontract.calculate_output('Add', 2, registry=loaded) ==
            opcontract.CANNOT_COMPUTE_NUM_OUTPUTS)
