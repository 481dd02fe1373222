import logging
import unittest

import structlog

import lop

# the engine logs every mutation at debug; keep test output to warnings
structlog.configure(
    wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
)

# every test gets a registry of its own, so classes created in one test never
# leak into another
class RegistryTestCase(unittest.TestCase):
    def setUp(self):
        self.registry = lop.ClassRegistry(lop.LopSettings())

    def new(self, name):
        return lop.new(name, registry=self.registry)

    def init(self, name):
        return lop.init(name, registry=self.registry)

# collects calls made by advice and methods, in order
class Recorder(object):
    def __init__(self):
        self.calls = []

    def method(self, label, result=None):
        def body(invocant, *args, **kwargs):
            self.calls.append((label,) + args)
            return result
        return body
