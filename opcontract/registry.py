import logging
import threading
from .schema import OpSchema, PROBE_LIMIT
from .error import DuplicateRegistration, RegistryFrozen, RegistryNotFrozen

logger = logging.getLogger(__name__)

class OpSchemaRegistry(object):
    """
    Maps operator type names to their OpSchema.

    The registry has two phases.  During registration, schemas are added with
    register() and configured through the returned handle.  freeze() then
    validates every schema and makes the registry and its schemas read-only.
    lookup() is only available once frozen, after which concurrent readers
    need no synchronization.
    """
    def __init__(self, probe_limit=PROBE_LIMIT):
        self.schemas = {} # op_type => OpSchema
        self.frozen = False
        self.probe_limit = probe_limit
        self._lock = threading.Lock()

    def __contains__(self, op_type):
        return op_type in self.schemas

    def __len__(self):
        return len(self.schemas)

    def names(self):
        return sorted(self.schemas.keys())

    def register(self, op_type, file, line):
        """
        Create a default-constrained schema for {op_type}, declared at {file}
        line {line}, and return it for configuration.  Registering the same
        {op_type} twice raises DuplicateRegistration naming both sites.
        """
        with self._lock:
            if self.frozen:
                raise RegistryFrozen(
                    f'Cannot register schema \'{op_type}\' from file {file} '
                    f'line {line}: the registry is frozen')
            orig = self.schemas.get(op_type, None)
            if orig is not None:
                err = DuplicateRegistration(op_type, file, line, orig.file,
                        orig.line)
                logger.critical(err.msg)
                raise err
            schema = OpSchema(file, line)
            self.schemas[op_type] = schema
        logger.debug(f'Registered schema \'{op_type}\' from {file}:{line}')
        return schema

    def freeze(self):
        """
        Validate all schemas and end the registration phase.  Calling it
        again is a no-op.
        """
        with self._lock:
            if self.frozen:
                return
            for schema in self.schemas.values():
                schema.validate(self.probe_limit)
            for schema in self.schemas.values():
                schema.frozen = True
            self.frozen = True
        logger.info(f'Froze schema registry with {len(self.schemas)} schemas')

    def lookup(self, op_type):
        """
        Return the schema registered for {op_type}, or None
        """
        if not self.frozen:
            raise RegistryNotFrozen(
                f'Cannot look up schema \'{op_type}\' before the registry is '
                f'frozen.  Call freeze() after registering all schemas')
        return self.schemas.get(op_type, None)


_default_registry = None
_default_lock = threading.Lock()

def default_registry():
    """
    The process-wide registry, created on first use
    """
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = OpSchemaRegistry()
    return _default_registry
