"""On/off switches declared next to the code that reads them.

polyrep has two: `verbose` (polyrep.logging) and `check-invariants`
(polyrep.wf).  Both modules are imported by the package itself, so every
Option exists before the command line is parsed.  `setup` adds a flag per
Option to an argparse parser and `read` copies the parsed flags back.

A switch that defaults to on is turned off with `--no-<name>`.
"""

_OPTS = []

class Option(object):
    def __init__(self, name, default, description=""):
        assert isinstance(default, bool)
        assert all(o.name != name for o in _OPTS), "duplicate option {}".format(name)
        self.name = name
        self.default = default
        self.description = description
        self.value = default
        _OPTS.append(self)

    @property
    def flag(self):
        return ("no-" + self.name) if self.default else self.name

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`.")

    def __repr__(self):
        return "Option({!r}, value={!r})".format(self.name, self.value)

def setup(parser):
    for o in _OPTS:
        parser.add_argument("--" + o.flag, action="store_true", help=o.description)

def read(args):
    for o in _OPTS:
        given = getattr(args, o.flag.replace("-", "_"))
        o.value = (not given) if o.default else given

def snapshot():
    """Current option values by name."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Set options to the values in `snap`; options it does not name keep theirs."""
    for o in _OPTS:
        o.value = snap.get(o.name, o.value)
