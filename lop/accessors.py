import structlog

from .clone import clone_value
from .errors import MethodAlreadyExists, ReadOnlyAttribute
from .instance import RESERVED_NAMES, Instance, create_instance

logger = structlog.get_logger()

ACCESSOR_MODES = ("rw", "ro")

# marks an attribute declared without a default
MISSING = object()

def get_default_for_instance(default):
    if callable(default):
        return default()
    # a plain value is copied, so instances never share one mutable default
    return clone_value(default, {})

def parse_options(registry, options, kwargs):
    merged = dict(options or {})
    merged.update(kwargs)
    # `is` can't be spelled as a keyword argument
    if "is_" in merged:
        merged["is"] = merged.pop("is_")

    mode = merged.pop("is", registry.settings.default_accessor_mode)
    if mode not in ACCESSOR_MODES:
        raise ValueError(
            "unknown accessor mode %r, expected one of %s"
            % (mode, ", ".join(ACCESSOR_MODES))
        )
    default = merged.pop("default", MISSING)
    override = bool(merged.pop("override", False))
    if merged:
        raise TypeError(
            "unknown accessor options: %s" % (", ".join(sorted(merged)),)
        )
    return mode, default, override

def gen_accessor(class_name, attribute_name, mode, default):
    def accessor(self, *args):
        if len(args) > 1:
            raise TypeError(
                "accessor %r takes at most one argument (%d given)"
                % (attribute_name, len(args))
            )
        if args:
            if mode == "ro":
                raise ReadOnlyAttribute(class_name, attribute_name)
            self.slots[attribute_name] = args[0]
            return args[0]
        if attribute_name not in self.slots:
            if default is MISSING:
                return None
            self.slots[attribute_name] = get_default_for_instance(default)
        return self.slots[attribute_name]
    accessor.__name__ = attribute_name
    return accessor

def install_accessor(registry, name, attribute_name, options=None, **kwargs):
    if attribute_name in RESERVED_NAMES or attribute_name.startswith("__"):
        raise ValueError(
            "%r is reserved on instances and can't be an accessor"
            % (attribute_name,)
        )
    metaclass = registry.resolve(name)
    mode, default, override = parse_options(registry, options, kwargs)

    # an accessor may replace an earlier accessor, but a hand-written method
    # only when asked to
    hand_written = (
        metaclass.has_method(attribute_name)
        and attribute_name not in metaclass.accessors
    )
    if hand_written and not override:
        raise MethodAlreadyExists(name, attribute_name)

    metaclass.override_method(
        attribute_name, gen_accessor(name, attribute_name, mode, default)
    )
    metaclass.accessors.add(attribute_name)
    logger.debug(
        "accessor generated",
        class_name=name, attribute=attribute_name, mode=mode,
        has_default=default is not MISSING,
    )

# the generator is installed once, but each call creates the accessor on the
# class of whoever invoked it, which need not be the class it lives in
def install_generator(registry, name, generator_name):
    def generator(self, attribute_name, options=None, **kwargs):
        install_accessor(
            registry, registry.name_of(self), attribute_name, options, **kwargs
        )
    generator.__name__ = generator_name
    registry.resolve(name).add_method(generator_name, generator)

def install_constructor(registry, name):
    metaclass = registry.resolve(name)

    # the instance is tagged with the receiver's class (a class name,
    # definition, handle or instance), so a constructor reached through a
    # subclass builds the subclass
    def new(self=None, /, **slots):
        target = metaclass
        if isinstance(self, Instance):
            target = self.metaclass
        elif self is not None:
            target = registry.resolve(registry.name_of(self))
        return create_instance(target, dict(slots))
    metaclass.override_method("new", new)
