class LopError(Exception):
    pass

class ClassNotFound(LopError, LookupError):
    def __init__(self, class_name):
        super().__init__("class %r does not exist" % (class_name,))
        self.class_name = class_name

class MethodAlreadyExists(LopError):
    def __init__(self, class_name, method_name):
        super().__init__(
            "method %r already exists in class %r" % (method_name, class_name)
        )
        self.class_name = class_name
        self.method_name = method_name

class MethodNotFound(LopError, AttributeError):
    def __init__(self, class_name, method_name):
        super().__init__(
            "method %r does not exist in class %r" % (method_name, class_name)
        )
        self.class_name = class_name
        self.method_name = method_name

class NoSuperMethod(LopError, AttributeError):
    def __init__(self, class_name, method_name):
        super().__init__(
            "no ancestor of %r defines method %r" % (class_name, method_name)
        )
        self.class_name = class_name
        self.method_name = method_name

class CyclicInheritance(LopError):
    def __init__(self, class_name, parent_name):
        super().__init__(
            "class %r cannot extend %r: %r would become its own ancestor"
            % (class_name, parent_name, class_name)
        )
        self.class_name = class_name
        self.parent_name = parent_name

class ReadOnlyAttribute(LopError):
    def __init__(self, class_name, attribute_name):
        super().__init__(
            "attribute %r of class %r is read-only"
            % (attribute_name, class_name)
        )
        self.class_name = class_name
        self.attribute_name = attribute_name

# never raised by the importer itself: it is left on the registry so the
# caller can inspect (or raise) it after a batch
class ImportPartialFailure(LopError):
    def __init__(self, source_name, dest_name, errors):
        names = ", ".join(repr(e.method_name) for e in errors)
        super().__init__(
            "importing from %r into %r failed for %s"
            % (source_name, dest_name, names)
        )
        self.source_name = source_name
        self.dest_name = dest_name
        self.errors = list(errors)
