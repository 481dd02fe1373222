from .config import LopSettings
from .errors import (
    ClassNotFound,
    CyclicInheritance,
    ImportPartialFailure,
    LopError,
    MethodAlreadyExists,
    MethodNotFound,
    NoSuperMethod,
    ReadOnlyAttribute,
)
from .handle import Handle
from .importer import ImportOutcome
from .instance import Instance
from .registry import ClassRegistry

# the process-wide registry behind init() and new(). anything that wants its
# own set of classes (tests, embedding applications) builds a ClassRegistry
# and passes it in explicitly
REGISTRY = None

def bootstrap(settings=None):
    global REGISTRY
    REGISTRY = ClassRegistry(settings)
    return REGISTRY

# a handle on a class that must already exist
def init(name, registry=None):
    if registry is None:
        registry = REGISTRY
    return Handle(registry, name)

# a handle on a class, creating the class first if needed
def new(name, registry=None):
    if registry is None:
        registry = REGISTRY
    return Handle(registry, name, create=True)

bootstrap()
