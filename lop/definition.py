import structlog

from .errors import MethodAlreadyExists, MethodNotFound
from .instance import execute_method

logger = structlog.get_logger()

# the live record behind a class identifier. it is shared by everyone who
# resolves the same name, so every mutation here is visible to all of them
class ClassDefinition(object):
    def __init__(self, registry, name):
        self.registry = registry
        self.name = name
        self.methods = {}
        self.parents = []
        self.accessors = set()
        # advice chains and the callables composed from them, keyed by method
        # name. a name is in both or in neither
        self.hooks = {}
        self.compiled = {}
        self.python_class = None

    def __repr__(self):
        return "<ClassDefinition %s>" % (self.name,)

    # method table

    def has_method(self, name):
        return name in self.methods

    def list_methods(self):
        return list(self.methods.keys())

    def lookup(self, name):
        if name in self.compiled:
            return self.compiled[name]
        return self.methods.get(name)

    def add_method(self, name, body):
        if name in self.methods:
            raise MethodAlreadyExists(self.name, name)
        self.methods[name] = body
        logger.debug("method added", class_name=self.name, method=name)

    # the previous body is gone, so any advice wrapping it goes too
    def override_method(self, name, body):
        self._forget(name)
        self.methods[name] = body
        logger.debug("method overridden", class_name=self.name, method=name)

    def delete_method(self, name):
        if name not in self.methods:
            raise MethodNotFound(self.name, name)
        self._forget(name)
        del self.methods[name]
        logger.debug("method deleted", class_name=self.name, method=name)

    def invoke(self, name, invocant, /, *args, **kwargs):
        body = self.lookup(name)
        if body is None:
            raise MethodNotFound(self.name, name)
        return execute_method(body, invocant, args, kwargs)

    def install_chain(self, name, chain):
        composed = chain.compose()
        self.hooks[name] = chain
        self.compiled[name] = composed

    def _forget(self, name):
        self.hooks.pop(name, None)
        self.compiled.pop(name, None)
        self.accessors.discard(name)
