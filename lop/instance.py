import copy

from .errors import MethodNotFound

# real python attributes of every instance: method calls by these names would
# never reach the method tables
RESERVED_NAMES = ("metaclass", "slots", "class_name")

# a data structure for instance data with no associated behavior of its own:
# all behavior comes from the method tables of the class it is tagged with
class Instance(object):
    def __init__(self, metaclass, slots):
        self.metaclass = metaclass
        self.slots = slots

    @property
    def class_name(self):
        return self.metaclass.name

    # python-level method calls are passed through to the engine, walking the
    # ancestors the same way inherited lookup does
    def __getattr__(self, name):
        # dunder lookups come from python's own protocols (copy, pickle, ...)
        # and must never hit the method tables
        if name.startswith("__"):
            raise AttributeError(name)
        metaclass = self.__dict__.get("metaclass")
        if metaclass is None:
            raise AttributeError(name)
        body = metaclass.registry.find_method(metaclass.name, name)
        if body is None:
            raise MethodNotFound(metaclass.name, name)
        return lambda *args, **kwargs: execute_method(body, self, args, kwargs)

    # instances nested inside opaque values are reached through copy.deepcopy;
    # they must keep pointing at the same class definition
    def __deepcopy__(self, memo):
        new = create_instance(self.metaclass, {})
        memo[id(self)] = new
        new.slots = copy.deepcopy(self.slots, memo)
        return new

    def __repr__(self):
        return "<%s %r>" % (self.metaclass.name, self.slots)

def execute_method(body, invocant, args, kwargs):
    return body(invocant, *args, **kwargs)

# shim layer to interface with python: every class definition gets its own
# python type, so type(instance).__name__ is the class identifier
def python_class_for(metaclass):
    if metaclass.python_class is None:
        metaclass.python_class = type(metaclass.name, (Instance,), {})
    return metaclass.python_class

def create_instance(metaclass, slots=None):
    if slots is None:
        slots = {}
    return python_class_for(metaclass)(metaclass, slots)
