from . import accessors, clone, hooks, importer, inheritance

# a chainable view of one class. mutators return the handle, queries return
# data. handles hold no state of their own beyond the class they point at,
# so any number of them can exist for the same class
class Handle(object):
    def __init__(self, registry, name, create=False):
        self.registry = registry
        self.definition = registry.resolve(name, create=create)
        self.name = name

    def __repr__(self):
        return "<Handle %s>" % (self.name,)

    # queries

    def class_exists(self, name=None):
        if name is None:
            name = self.name
        return self.registry.exists(name)

    def method_exists(self, name):
        return self.definition.has_method(name)

    def list_methods(self):
        return self.definition.list_methods()

    def superclasses(self):
        return inheritance.superclasses(self.registry, self.name)

    def subclasses(self):
        return inheritance.subclasses(self.registry, self.name)

    def linearize(self):
        return inheritance.linearize(self.registry, self.name)

    def isa(self, other):
        return inheritance.isa(self.registry, self.name, other)

    def can(self, name):
        return inheritance.can(self.registry, self.name, name)

    def last_errors(self):
        return self.registry.last_errors

    def last_outcomes(self):
        return list(self.registry.last_outcomes)

    def load_namespaces(self):
        return self.registry.load_namespaces(self.name)

    # mutators

    def create_class(self, name):
        self.registry.create_class(name)
        return self

    def create_method(self, name, body):
        self.definition.add_method(name, body)
        return self

    def override_method(self, name, body):
        self.definition.override_method(name, body)
        return self

    def delete_method(self, name):
        self.definition.delete_method(name)
        return self

    def extend_class(self, *parents):
        inheritance.extend(self.registry, self.name, *parents)
        return self

    def have_accessors(self, generator_name):
        accessors.install_generator(self.registry, self.name, generator_name)
        return self

    def create_constructor(self):
        accessors.install_constructor(self.registry, self.name)
        return self

    def add_hook(self, type, name, body):
        hooks.add_hook(self.definition, type, name, body)
        return self

    def import_methods(self, dest, *names):
        importer.import_methods(self.registry, self.name, dest, *names)
        return self

    def warnings_strict(self):
        self.registry.warnings_strict()
        return self

    # calling

    def invoke(self, name, invocant, /, *args, **kwargs):
        return self.definition.invoke(name, invocant, *args, **kwargs)

    def call_super(self, name, invocant, /, *args, **kwargs):
        return inheritance.call_super(
            self.registry, self.name, name, invocant, *args, **kwargs
        )

    def clone_object(self, instance):
        return clone.clone(instance)
