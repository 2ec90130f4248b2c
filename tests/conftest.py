import pytest
from ptf_testkit.runners.suite import Suite


class Recorder:
    """Reporter double that records every call instead of rendering."""

    def __init__(self):
        self.calls = []
        self.metadata = None

    def names(self):
        return [name for name, _ in self.calls]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record


@pytest.fixture
def lines():
    return []


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_suite(lines):
    """Suite factory writing into `lines`, never touching sys.argv or the real exit."""
    exits = []

    def factory(name="Unit Suite", options=None, **kwargs):
        kwargs.setdefault("argv", [])
        kwargs.setdefault("exit_fn", exits.append)
        if "reporter" not in kwargs:
            kwargs.setdefault("sink", lines.append)
        suite = Suite(name, options, **kwargs)
        suite.exit_codes = exits
        return suite

    return factory
