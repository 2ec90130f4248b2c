
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union
import logging, sys, time
from ..config import SuiteOptions, resolve_options
from ..reporters.base import Reporter, ReporterMetadata, Sink
from ..reporters.registry import get_reporter

log = logging.getLogger(__name__)

class Verbosity(IntEnum):
    SILENT = 0   # nothing
    QUIET = 1    # failures and errors
    NORMAL = 2   # + structure, info/warn, summary
    VERBOSE = 3  # + passes, code, diffs, failure registry
    DEBUG = 4

@dataclass
class Result:
    id: str
    description: str
    passed: bool = False
    actual: Any = None
    expected: Any = None
    message: Optional[str] = None

@dataclass
class Detailed:
    """Structured assertion outcome; return this (or a dict with the same keys) from a test."""
    passed: bool = False
    actual: Any = None
    expected: Any = None
    message: Optional[str] = None

Outcome = Union[bool, Detailed, Mapping[str, Any]]

@dataclass
class Stats:
    total: int
    passed: int
    failed: int
    pass_rate: str
    duration: int  # ms

def normalize_outcome(test_id: str, description: str, outcome: Any) -> Result:
    res = Result(id=test_id, description=description)
    if isinstance(outcome, bool):
        res.passed = outcome
    elif isinstance(outcome, Detailed):
        res.passed = bool(outcome.passed)
        res.actual, res.expected, res.message = outcome.actual, outcome.expected, outcome.message
    elif isinstance(outcome, Mapping):
        res.passed = bool(outcome.get("passed", False))
        res.actual = outcome.get("actual")
        res.expected = outcome.get("expected")
        res.message = outcome.get("message")
    # anything else (None, numbers, strings ...) stays a failure
    return res

_SCALARS = (str, bytes, int, float, complex)

def strict_equal(a: Any, b: Any) -> bool:
    """
    Identity for objects, value equality for scalars.
    bool never equals a number, and [2] is not [2].
    """
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        if isinstance(a, (str, bytes)) or isinstance(b, (str, bytes)):
            return type(a) is type(b) and a == b
        return a == b
    return False

def arrays_equal(a: Any, b: Any) -> bool:
    return (isinstance(a, (list, tuple)) and isinstance(b, (list, tuple))
            and len(a) == len(b)
            and all(strict_equal(x, y) for x, y in zip(a, b)))

class Suite:
    def __init__(self, name: str, options: Union[SuiteOptions, Dict[str, Any], None] = None, *,
                 reporter: Optional[Reporter] = None, sink: Optional[Sink] = None,
                 exit_fn: Optional[Callable[[int], Any]] = None,
                 clock: Optional[Callable[[], float]] = None,
                 argv: Optional[Sequence[str]] = None):
        if isinstance(options, Mapping) and "reporter" in options:
            options = dict(options)
            reporter = reporter or options.pop("reporter")
        self.options = resolve_options(options, sys.argv[1:] if argv is None else argv)
        self.name = name
        self.verbosity = Verbosity(self.options.verbosity)
        self.metadata = ReporterMetadata.build(self.options.metadata,
                                               classification=self.options.classification,
                                               document_id=self.options.document_id)
        self.reporter: Reporter = reporter or get_reporter(self.options.format, self.metadata, sink)
        self.section_number = 0
        self.test_number = 0
        self._successes: List[Result] = []
        self._failures: List[Result] = []
        self._exit = exit_fn or sys.exit
        self._clock = clock or time.monotonic
        self.start_time = self._clock()

    @property
    def passed(self) -> List[Result]: return list(self._successes)
    @property
    def failed(self) -> List[Result]: return list(self._failures)
    @property
    def results(self) -> List[Result]:
        return sorted(self._successes + self._failures, key=lambda r: tuple(int(p) for p in r.id.split(".")))

    def _at(self, level: Verbosity) -> bool:
        return self.verbosity >= level

    # ---------- document structure ----------
    def header(self) -> "Suite":
        if self._at(Verbosity.NORMAL):
            self.reporter.header(self.name)
        return self

    def section(self, title: str) -> "Suite":
        self.section_number += 1
        self.test_number = 0
        if self._at(Verbosity.NORMAL):
            self.reporter.section(self.section_number, title)
        return self

    def subsection(self, title: str) -> "Suite":
        # numbered after the test that is about to run
        if self._at(Verbosity.NORMAL):
            self.reporter.subsection(self.section_number, self.test_number + 1, title)
        return self

    def code(self, language: str, content: str, label: Optional[str] = None) -> "Suite":
        if self._at(Verbosity.VERBOSE):
            self.reporter.code(language, content, label)
        return self

    def javascript(self, content: str, label: Optional[str] = None) -> "Suite":
        return self.code("javascript", content, label)

    def python(self, content: str, label: Optional[str] = None) -> "Suite":
        return self.code("python", content, label)

    # ---------- execution ----------
    def test(self, description: str, assertion: Callable[[], Outcome]) -> "Suite":
        self.test_number += 1
        test_id = f"{self.section_number}.{self.test_number}"
        try:
            res = normalize_outcome(test_id, description, assertion())
        except Exception as e:
            log.debug("test %s raised %r", test_id, e)
            res = Result(id=test_id, description=description, passed=False,
                         message=str(e) or type(e).__name__)

        if res.passed:
            self._successes.append(res)
            if self._at(Verbosity.VERBOSE):
                self.reporter.test_passed(test_id, description)
        else:
            self._failures.append(res)
            if self._at(Verbosity.QUIET):
                self.reporter.test_failed(test_id, description, res)
        return self

    def assert_equal(self, actual: Any, expected: Any, description: str) -> "Suite":
        def check() -> Detailed:
            ok = strict_equal(actual, expected)
            return Detailed(passed=ok, actual=actual, expected=expected,
                            message=None if ok else "Values do not match")
        return self.test(description, check)

    def assert_arrays_equal(self, actual: Any, expected: Any, description: str) -> "Suite":
        def check() -> Detailed:
            ok = arrays_equal(actual, expected)
            return Detailed(passed=ok, actual=actual, expected=expected,
                            message=None if ok else "Arrays do not match")
        return self.test(description, check)

    assertEqual = assert_equal
    assertArraysEqual = assert_arrays_equal

    def diff(self, expected: Any, actual: Any, label: Optional[str] = None) -> "Suite":
        if self._at(Verbosity.VERBOSE):
            if label is None:
                self.reporter.diff(expected, actual)
            else:
                self.reporter.diff(expected, actual, label)
        return self

    # ---------- summary ----------
    def stats(self) -> Stats:
        passed, failed = len(self._successes), len(self._failures)
        total = passed + failed
        rate = f"{passed / total * 100:.2f}" if total else "0.00"
        duration = int(round((self._clock() - self.start_time) * 1000))
        return Stats(total=total, passed=passed, failed=failed, pass_rate=rate, duration=duration)

    def summary(self) -> bool:
        ok = not self._failures
        if not self._at(Verbosity.NORMAL):
            return ok
        self.reporter.summary(self.stats())
        if self._at(Verbosity.VERBOSE) and self._failures:
            self.reporter.failure_details(list(self._failures))
        return ok

    def exit(self):
        ok = self.summary()
        if self.options.junit:
            from ..reporters.junit import JUnitReporter
            JUnitReporter(self.options.junit).emit(self)
        return self._exit(0 if ok else 1)

    # ---------- leveled output ----------
    def log(self, *args: Any) -> "Suite":
        if self._at(Verbosity.VERBOSE):
            self.reporter.log(*args)
        return self

    def debug(self, *args: Any) -> "Suite":
        if self._at(Verbosity.DEBUG):
            self.reporter.log(*args)
        return self

    def info(self, *args: Any) -> "Suite":
        if self._at(Verbosity.NORMAL):
            self.reporter.info(*args)
        return self

    def warn(self, *args: Any) -> "Suite":
        if self._at(Verbosity.NORMAL):
            self.reporter.warn(*args)
        return self

    def error(self, *args: Any) -> "Suite":
        if self._at(Verbosity.QUIET):
            self.reporter.error(*args)
        return self

    def success(self, *args: Any) -> "Suite":
        if self._at(Verbosity.VERBOSE):
            self.reporter.success(*args)
        return self

def create_suite(name: str, options: Union[SuiteOptions, Dict[str, Any], None] = None, **kwargs) -> Suite:
    """Build a Suite. Extra keyword arguments (reporter, sink, exit_fn, clock, argv) go to Suite."""
    return Suite(name, options, **kwargs)
