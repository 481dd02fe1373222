import copy

import structlog

from .instance import Instance, create_instance

logger = structlog.get_logger()

def clone(instance):
    if not isinstance(instance, Instance):
        raise TypeError(
            "only instances can be cloned, not %r" % (type(instance).__name__,)
        )
    new = clone_value(instance, {})
    logger.debug("instance cloned", class_name=instance.class_name)
    return new

# memo maps id(original) -> copy, so shared and cyclic references come out
# with the same shape. it has the same layout as copy.deepcopy's memo, which
# lets the two be mixed
def clone_value(value, memo):
    key = id(value)
    if key in memo:
        return memo[key]

    if isinstance(value, Instance):
        # the class tag is shared, only the state is copied
        new = create_instance(value.metaclass, {})
        memo[key] = new
        for name, slot in value.slots.items():
            new.slots[name] = clone_value(slot, memo)
        return new

    kind = type(value)
    if kind is dict:
        new = {}
        memo[key] = new
        for k, v in value.items():
            new[clone_value(k, memo)] = clone_value(v, memo)
        return new
    if kind is list:
        new = []
        memo[key] = new
        new.extend(clone_value(v, memo) for v in value)
        return new
    if kind is set:
        new = set()
        memo[key] = new
        new.update(clone_value(v, memo) for v in value)
        return new
    if kind is tuple or kind is frozenset:
        new = kind(clone_value(v, memo) for v in value)
        # a cycle back through this value already built its copy
        if key in memo:
            return memo[key]
        memo[key] = new
        return new

    # opaque leaf
    return copy.deepcopy(value, memo)
