import warnings

import structlog

from . import inheritance
from .config import LopSettings
from .definition import ClassDefinition
from .errors import ClassNotFound
from .instance import Instance

logger = structlog.get_logger()

# default namespace loader: the children of a namespace are the registered
# classes whose identifier starts with it, e.g. "Shapes.Point" for "Shapes"
def prefix_loader(registry, name):
    prefix = name + registry.settings.namespace_separator
    return [c for c in registry.classes() if c.startswith(prefix)]

# default pragma enabler
def enable_warnings():
    warnings.simplefilter("default")

class ClassRegistry(object):
    """Owns every class definition of one engine.

    Definitions are created on first reference and live as long as the
    registry does. `loader` and `pragma` are the collaborators behind
    load_namespaces() and warnings_strict(); pass your own to hook into a
    real module system.
    """

    def __init__(self, settings=None, loader=prefix_loader, pragma=enable_warnings):
        if settings is None:
            settings = LopSettings()
        self.settings = settings
        self.loader = loader
        self.pragma = pragma
        self.last_errors = None
        self.last_outcomes = []
        self._classes = {}

    def exists(self, name):
        return name in self._classes

    def resolve(self, name, create=False):
        metaclass = self._classes.get(name)
        if metaclass is None:
            if not create:
                raise ClassNotFound(name)
            metaclass = ClassDefinition(self, name)
            self._classes[name] = metaclass
            logger.debug("class created", class_name=name)
        return metaclass

    def create_class(self, name):
        return self.resolve(name, create=True)

    def classes(self):
        return list(self._classes.keys())

    def name_of(self, thing):
        if isinstance(thing, str):
            return thing
        if isinstance(thing, Instance):
            return thing.class_name
        if isinstance(thing, ClassDefinition):
            return thing.name
        # handles
        metaclass = getattr(thing, "definition", None)
        if isinstance(metaclass, ClassDefinition):
            return metaclass.name
        raise TypeError("%r does not identify a class" % (thing,))

    def find_method(self, name, method_name):
        return inheritance.find_method(self, name, method_name)

    def load_namespaces(self, name):
        children = list(self.loader(self, name))
        for child in children:
            self.resolve(child, create=True)
        logger.debug("namespaces loaded", class_name=name, children=children)
        return children

    def warnings_strict(self):
        self.pragma()
