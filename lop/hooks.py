import structlog

from .errors import MethodNotFound

logger = structlog.get_logger()

HOOK_TYPES = ("before", "after", "around")

# all the advice installed on one method, plus the body it wraps. the chain
# itself is never called: compose() turns it into a single callable which the
# class definition swaps in whole
class HookChain(object):
    def __init__(self, original):
        self.original = original
        self.before = []
        self.after = []
        self.around = []

    def add(self, type, fn):
        getattr(self, type).append(fn)

    def __len__(self):
        return len(self.before) + len(self.after) + len(self.around)

    def compose(self):
        # snapshot the lists, so advice added later only shows up in the next
        # composed callable and never in one that is already running
        before = list(self.before)
        after = list(self.after)

        # first installed around hook ends up outermost
        body = self.original
        for hook in reversed(self.around):
            body = wrap_around(hook, body)

        if not before and not after:
            return body

        def effective(invocant, /, *args, **kwargs):
            for hook in before:
                hook(invocant, *args, **kwargs)
            result = body(invocant, *args, **kwargs)
            for hook in after:
                hook(invocant, *args, **kwargs)
            return result
        return effective

def wrap_around(hook, next_body):
    def around(invocant, /, *args, **kwargs):
        return hook(next_body, invocant, *args, **kwargs)
    return around

def add_hook(metaclass, type, name, fn):
    if type not in HOOK_TYPES:
        raise ValueError(
            "unknown hook type %r, expected one of %s"
            % (type, ", ".join(HOOK_TYPES))
        )
    if not metaclass.has_method(name):
        raise MethodNotFound(metaclass.name, name)

    chain = metaclass.hooks.get(name)
    if chain is None:
        chain = HookChain(metaclass.methods[name])
    chain.add(type, fn)
    metaclass.install_chain(name, chain)

    logger.debug(
        "hook installed",
        class_name=metaclass.name, method=name, type=type, chain_length=len(chain),
    )
