import pytest
import opcontract
from opcontract import registry as reg


@pytest.fixture
def registry():
    return opcontract.OpSchemaRegistry()


@pytest.fixture
def default_registry(monkeypatch):
    """Swap in an empty process-wide registry for the duration of a test"""
    fresh = opcontract.OpSchemaRegistry()
    monkeypatch.setattr(reg, '_default_registry', fresh)
    return fresh
