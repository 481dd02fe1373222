import collections

import structlog

from .errors import ImportPartialFailure, MethodNotFound

logger = structlog.get_logger()

class ImportOutcome(collections.namedtuple("ImportOutcome", ["name", "error"])):
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

# a missing name fails on its own: everything else in the batch is still
# imported, and the failures are left on registry.last_errors
def import_methods(registry, source, dest, *names):
    source_class = registry.resolve(source)
    dest_class = registry.resolve(dest)

    outcomes = []
    errors = []
    for name in names:
        body = source_class.lookup(name)
        if body is None:
            error = MethodNotFound(source, name)
            errors.append(error)
            outcomes.append(ImportOutcome(name, error))
            continue
        dest_class.override_method(name, body)
        if name in source_class.accessors:
            dest_class.accessors.add(name)
        outcomes.append(ImportOutcome(name, None))

    if errors:
        registry.last_errors = ImportPartialFailure(source, dest, errors)
        logger.warning(
            "methods not imported",
            source=source, dest=dest, missing=[e.method_name for e in errors],
        )
    else:
        registry.last_errors = None
    registry.last_outcomes = outcomes
    return outcomes
