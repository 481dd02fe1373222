import structlog

from .errors import CyclicInheritance, NoSuperMethod
from .instance import execute_method

logger = structlog.get_logger()

# depth-first, left-to-right, each class once. this is a simplification of
# c3: in a diamond the shared ancestor is reached through the first branch
def linearize(registry, name):
    mro = []
    seen = set()
    def visit(class_name):
        if class_name in seen:
            return
        seen.add(class_name)
        mro.append(class_name)
        for parent in registry.resolve(class_name).parents:
            visit(parent)
    visit(name)
    return mro

def ancestors(registry, name):
    return linearize(registry, name)[1:]

def extend(registry, name, *parents):
    metaclass = registry.resolve(name)

    # check every parent before touching the list, so a rejected parent
    # leaves the class exactly as it was
    to_add = []
    for parent in parents:
        registry.resolve(parent)
        if parent == name or name in ancestors(registry, parent):
            raise CyclicInheritance(name, parent)
        if parent not in metaclass.parents and parent not in to_add:
            to_add.append(parent)

    metaclass.parents.extend(to_add)
    logger.debug(
        "class extended",
        class_name=name, added=to_add, parents=list(metaclass.parents),
    )

def superclasses(registry, name):
    return list(registry.resolve(name).parents)

def subclasses(registry, name):
    registry.resolve(name)
    return [
        c for c in registry.classes()
        if name in registry.resolve(c).parents
    ]

def find_method(registry, name, method_name, start=0):
    for class_name in linearize(registry, name)[start:]:
        body = registry.resolve(class_name).lookup(method_name)
        if body is not None:
            return body
    return None

def call_super(registry, name, method_name, invocant, /, *args, **kwargs):
    body = find_method(registry, name, method_name, start=1)
    if body is None:
        raise NoSuperMethod(name, method_name)
    return execute_method(body, invocant, args, kwargs)

def isa(registry, thing, other):
    return registry.name_of(other) in linearize(registry, registry.name_of(thing))

def can(registry, name, method_name):
    return find_method(registry, name, method_name)
