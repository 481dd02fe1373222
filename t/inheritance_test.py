import lop

from . import RegistryTestCase

class InheritanceTest(RegistryTestCase):
    def test_extend(self):
        for name in ["A", "B", "C"]:
            self.new(name)
        a = self.init("A")
        a.extend_class("B")
        a.extend_class("C", "B")
        assert a.superclasses() == ["B", "C"]
        assert self.init("B").subclasses() == ["A"]
        assert self.init("C").subclasses() == ["A"]
        assert a.subclasses() == []
        assert a.linearize() == ["A", "B", "C"]

    def test_extend_unknown_parent(self):
        a = self.new("A")
        self.new("B")
        with self.assertRaises(lop.ClassNotFound):
            a.extend_class("B", "Nope")
        assert a.superclasses() == []

    def test_cycles(self):
        a = self.new("A")
        b = self.new("B")
        c = self.new("C")
        a.extend_class("B")
        with self.assertRaises(lop.CyclicInheritance) as cm:
            b.extend_class("A")
        assert cm.exception.class_name == "B"
        assert cm.exception.parent_name == "A"
        assert b.superclasses() == []

        b.extend_class("C")
        with self.assertRaises(lop.CyclicInheritance):
            c.extend_class("A")
        with self.assertRaises(lop.CyclicInheritance):
            c.extend_class("C")
        assert c.superclasses() == []

    def test_subclasses_are_direct_only(self):
        self.new("Base")
        self.new("Middle").extend_class("Base")
        self.new("Leaf").extend_class("Middle")
        self.new("Other").extend_class("Base")
        assert self.init("Base").subclasses() == ["Middle", "Other"]

    def test_call_super(self):
        b = self.new("B").create_method("greet", lambda self, who: "B greets " + who)
        a = self.new("A").extend_class("B")
        assert a.call_super("greet", None, "you") == "B greets you"

        a.create_method("greet", lambda self, who: "A greets " + who)
        assert a.invoke("greet", None, "you") == "A greets you"
        assert a.call_super("greet", None, "you") == "B greets you"

        with self.assertRaises(lop.NoSuperMethod):
            a.call_super("missing", None)
        # B has no parents at all
        with self.assertRaises(lop.NoSuperMethod):
            b.call_super("greet", None, "you")

    def test_call_super_from_a_method(self):
        self.new("Animal").create_method("speak", lambda self: ["...."])
        dog = self.new("Dog").extend_class("Animal")
        dog.create_method(
            "speak",
            lambda self: dog.call_super("speak", self) + ["woof"],
        )
        assert dog.invoke("speak", None) == ["....", "woof"]

    def test_call_super_declaration_order(self):
        self.new("Left").create_method("side", lambda self: "left")
        self.new("Right").create_method("side", lambda self: "right")
        self.new("Deep").create_method("side", lambda self: "deep")
        self.init("Left").extend_class("Deep")
        self.new("Mixed").extend_class("Right", "Left")
        assert self.init("Mixed").call_super("side", None) == "right"
        self.new("Mixed2").extend_class("Left", "Right")
        assert self.init("Mixed2").call_super("side", None) == "left"

        # depth first: Deep is searched before Right
        self.init("Left").delete_method("side")
        assert self.init("Mixed2").call_super("side", None) == "deep"

    def test_diamond(self):
        #     Top
        #    /   \
        #  Left  Right
        #    \   /
        #    Bottom
        self.new("Top").create_method("where", lambda self: "top")
        self.new("Left").extend_class("Top")
        self.new("Right").extend_class("Top")
        self.init("Right").create_method("where", lambda self: "right")
        bottom = self.new("Bottom").extend_class("Left", "Right")
        assert bottom.linearize() == ["Bottom", "Left", "Top", "Right"]
        assert bottom.call_super("where", None) == "top"

    def test_isa_and_can(self):
        self.new("Base").create_method("greet", lambda self: "hi")
        point = self.new("Point").extend_class("Base").create_constructor()
        instance = point.invoke("new", "Point")
        assert point.isa("Base")
        assert point.isa("Point")
        assert not self.init("Base").isa("Point")
        assert lop.inheritance.isa(self.registry, instance, "Base")
        assert point.can("greet")(None) == "hi"
        assert point.can("missing") is None

    def test_instance_dispatch_walks_ancestors(self):
        self.new("Base").create_method("greet", lambda self: "hi from " + self.class_name)
        point = self.new("Point").extend_class("Base").create_constructor()
        instance = point.invoke("new", "Point")
        assert instance.greet() == "hi from Point"
        point.create_method("greet", lambda self: "own")
        assert instance.greet() == "own"
        with self.assertRaises(lop.MethodNotFound):
            instance.missing()
