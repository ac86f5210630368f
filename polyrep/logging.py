"""Indented, timed log of what polyrep is doing.

Important functions:
 - task: a context manager that times a named step and nests later messages
 - event: note something that happened inside the current tasks
 - recording: a context manager that collects events instead of (or as well
   as) printing them, so callers can count cross-representation additions
 - dump_profile: write the time spent in each task to a file

Messages are printed only when the `verbose` option is set; recording and
timing happen regardless.
"""

from collections import defaultdict, namedtuple
from contextlib import contextmanager
import datetime

from polyrep.opts import Option

verbose = Option("verbose", False, description="Log arithmetic and demonstration steps")

Event = namedtuple("Event", ["tasks", "message"])

_times = defaultdict(float)
_task_stack = []
_recorders = []
_begin = datetime.datetime.now()

def _print(message):
    if verbose.value:
        print("  " * len(_task_stack) + message)

@contextmanager
def task(name, **kwargs):
    details = ", ".join("{}={}".format(k, v) for k, v in kwargs.items())
    _print("{}{}...".format(name, " [{}]".format(details) if details else ""))
    _task_stack.append(name)
    start = datetime.datetime.now()
    try:
        yield
    finally:
        duration = (datetime.datetime.now() - start).total_seconds()
        _times[tuple(_task_stack)] += duration
        _task_stack.pop()
        _print("Finished {} [duration={:.3}s]".format(name, duration))

def event(message):
    e = Event(tuple(_task_stack), message)
    for events in _recorders:
        events.append(e)
    _print(message)

@contextmanager
def recording():
    """Collect every Event raised inside the block into the yielded list."""
    events = []
    _recorders.append(events)
    try:
        yield events
    finally:
        _recorders.remove(events)

def dump_profile(path):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n\n".format(duration))
        for k in sorted(_times, key=_times.get, reverse=True):
            f.write("{:16.3} {}\n".format(_times[k], ", ".join(k)))
