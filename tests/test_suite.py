import click
import pytest
from ptf_testkit import create_suite
from ptf_testkit.runners.suite import (Verbosity, Detailed, Result, normalize_outcome,
                                       strict_equal, arrays_equal)


def ids(suite):
    return [r.id for r in suite.results]


def ticking(*values):
    it = iter(values)
    return lambda: next(it)


def test_numbering_resets_per_section(make_suite):
    s = make_suite(options={"verbosity": Verbosity.SILENT})
    s.section("one").test("a", lambda: True).test("b", lambda: True).test("c", lambda: False)
    s.section("two").test("d", lambda: True)
    assert ids(s) == ["1.1", "1.2", "1.3", "2.1"]


def test_sections_count_even_when_silent(make_suite, recorder):
    s = make_suite(options={"verbosity": Verbosity.SILENT}, reporter=recorder)
    s.section("one").section("two").test("x", lambda: True)
    assert ids(s) == ["2.1"]
    assert recorder.calls == []


def test_tests_before_any_section_use_section_zero(make_suite):
    s = make_suite()
    s.test("early", lambda: True)
    assert ids(s) == ["0.1"]


def test_subsection_numbers_the_next_test(make_suite, recorder):
    s = make_suite(reporter=recorder)
    s.section("Parsing").test("a", lambda: True).subsection("edge cases")
    assert ("subsection", (1, 2, "edge cases")) in recorder.calls
    assert s.test_number == 1


def test_boolean_outcome(make_suite):
    s = make_suite()
    s.test("t", lambda: False)
    r = s.failed[0]
    assert (r.passed, r.actual, r.expected, r.message) == (False, None, None, None)


def test_structured_outcome_dict(make_suite):
    s = make_suite()
    s.test("t", lambda: {"passed": True, "actual": 3, "expected": 3, "message": "close enough"})
    r = s.passed[0]
    assert (r.actual, r.expected, r.message) == (3, 3, "close enough")


def test_structured_outcome_without_passed_fails(make_suite):
    s = make_suite()
    s.test("t", lambda: {"actual": 1})
    assert len(s.failed) == 1


@pytest.mark.parametrize("outcome", [None, 1, "yes", [True]])
def test_malformed_outcomes_fail(outcome):
    assert normalize_outcome("1.1", "d", outcome).passed is False


def test_detailed_outcome():
    r = normalize_outcome("1.1", "d", Detailed(passed=True, actual="a", expected="a"))
    assert r == Result("1.1", "d", True, "a", "a", None)


def test_raised_fault_becomes_failure(make_suite):
    def boom():
        raise RuntimeError("boom")

    s = make_suite()
    s.test("explodes", boom)
    r = s.failed[0]
    assert r.passed is False
    assert r.message == "boom"


def test_fault_without_message_uses_class_name(make_suite):
    def fails():
        raise KeyError()

    s = make_suite()
    s.test("explodes", fails)
    assert s.failed[0].message == "KeyError"


def test_assert_equal(make_suite):
    s = make_suite()
    obj = object()
    s.assert_equal(obj, obj, "same").assert_equal(2, 2, "ints").assert_equal(1, 2, "differ")
    assert len(s.passed) == 2
    r = s.failed[0]
    assert r.message == "Values do not match"
    assert (r.actual, r.expected) == (1, 2)
    assert s.passed[0].message is None


def test_assert_equal_is_strict(make_suite):
    s = make_suite()
    s.assert_equal(1, True, "bool vs int").assert_equal("1", 1, "str vs int").assert_equal([1], [1], "lists")
    assert len(s.failed) == 3


def test_assert_equal_same_nan_object_passes(make_suite):
    nan = float("nan")
    s = make_suite()
    s.assertEqual(nan, nan, "nan")
    assert len(s.passed) == 1


def test_assert_arrays_equal(make_suite):
    s = make_suite()
    s.assert_arrays_equal([1, 2, 3], [1, 2, 3], "same")
    s.assert_arrays_equal([1, 2], [1, 2, 3], "length")
    s.assert_arrays_equal([1, [2]], [1, [2]], "nested lists compare by identity")
    s.assertArraysEqual("abc", "abc", "strings are not arrays")
    assert [r.description for r in s.passed] == ["same"]
    assert all(r.message == "Arrays do not match" for r in s.failed)


def test_arrays_equal_shares_nested_reference():
    inner = [2]
    assert arrays_equal([1, inner], (1, inner))


def test_strict_equal_scalars():
    assert strict_equal(1, 1.0)
    assert strict_equal("a", "a")
    assert not strict_equal(b"a", "a")
    assert not strict_equal(0, False)
    assert not strict_equal({"a": 1}, {"a": 1})


@pytest.mark.parametrize("verbosity", list(Verbosity))
def test_summary_returns_all_passed(make_suite, recorder, verbosity):
    s = make_suite(options={"verbosity": verbosity}, reporter=recorder)
    s.test("a", lambda: True)
    assert s.summary() is True
    s.test("b", lambda: False)
    assert s.summary() is False


@pytest.mark.parametrize("verbosity", [Verbosity.SILENT, Verbosity.QUIET])
def test_summary_below_normal_renders_nothing(make_suite, recorder, verbosity):
    s = make_suite(options={"verbosity": verbosity}, reporter=recorder)
    s.test("b", lambda: True)
    recorder.calls.clear()
    s.summary()
    assert recorder.calls == []


def test_summary_failure_details_only_when_verbose(make_suite, recorder):
    s = make_suite(options={"verbosity": Verbosity.NORMAL}, reporter=recorder)
    s.test("b", lambda: False)
    s.summary()
    assert "summary" in recorder.names()
    assert "failure_details" not in recorder.names()

    verbose = make_suite(options={"verbosity": Verbosity.VERBOSE}, reporter=recorder)
    verbose.test("ok", lambda: True)
    recorder.calls.clear()
    verbose.summary()
    assert recorder.names() == ["summary"]


def test_end_to_end_stats(make_suite, recorder):
    s = make_suite(options={"verbosity": Verbosity.VERBOSE}, reporter=recorder,
                   clock=ticking(10.0, 10.25))
    s.test("t1", lambda: True)
    s.test("t2", lambda: {"passed": False, "actual": 1, "expected": 2})
    assert s.summary() is False

    (stats,) = [args[0] for name, args in recorder.calls if name == "summary"]
    assert (stats.total, stats.passed, stats.failed) == (2, 1, 1)
    assert stats.pass_rate == "50.00"
    assert stats.duration == 250
    (failures,) = [args[0] for name, args in recorder.calls if name == "failure_details"]
    assert [f.id for f in failures] == ["0.2"]


def test_empty_suite_stats(make_suite):
    stats = make_suite(clock=ticking(1.0, 1.0)).stats()
    assert (stats.total, stats.pass_rate, stats.duration) == (0, "0.00", 0)


@pytest.mark.parametrize("verbosity,expected", [
    (Verbosity.SILENT, []),
    (Verbosity.QUIET, ["test_failed", "error"]),
    (Verbosity.NORMAL, ["header", "section", "subsection", "test_failed", "info", "warn", "error"]),
    (Verbosity.VERBOSE, ["header", "section", "subsection", "code", "code", "test_passed",
                         "test_failed", "diff", "log", "info", "warn", "error", "success"]),
    (Verbosity.DEBUG, ["header", "section", "subsection", "code", "code", "test_passed",
                       "test_failed", "diff", "log", "log", "info", "warn", "error", "success"]),
])
def test_verbosity_gates(make_suite, recorder, verbosity, expected):
    s = make_suite(options={"verbosity": verbosity}, reporter=recorder)
    (s.header().section("S").subsection("sub")
     .code("sql", "select 1").javascript("let x = 1")
     .test("p", lambda: True).test("f", lambda: False)
     .diff(1, 2).log("l").debug("d").info("i").warn("w").error("e").success("s"))
    assert recorder.names() == expected


def test_chaining_returns_suite(make_suite):
    s = make_suite()
    assert s.header().section("x").subsection("y").test("t", lambda: True).info("i") is s


def test_exit_codes(make_suite):
    good = make_suite(options={"verbosity": Verbosity.SILENT})
    good.test("ok", lambda: True).exit()
    bad = make_suite(options={"verbosity": Verbosity.SILENT})
    bad.test("no", lambda: False).exit()
    assert good.exit_codes == [0, 1]


def test_exit_defaults_to_system_exit():
    s = create_suite("real", {"verbosity": 0}, argv=[])
    s.test("no", lambda: False)
    with pytest.raises(SystemExit) as err:
        s.exit()
    assert err.value.code == 1


def test_rendered_output_plain(make_suite, lines):
    s = make_suite(options={"verbosity": Verbosity.VERBOSE, "format": "ascii",
                            "classification": "RESTRICTED", "document_id": "D-1"})
    s.header().section("Math").test("adds", lambda: 1 + 1 == 2).assert_equal(3, 4, "subtracts")
    s.summary()
    text = "\n".join(lines)
    assert "RESTRICTED" in text and "D-1" in text
    assert "SECTION 1: Math" in text
    assert "[PASS] TEST 1.1: adds" in text
    assert "[FAIL] TEST 1.2: subtracts" in text
    assert "Reason: Values do not match" in text
    assert "FAILED OPERATIONS REGISTRY:" in text


def test_format_from_argv_selects_reporter(make_suite, lines):
    s = make_suite(options={"verbosity": Verbosity.NORMAL}, argv=["--format=markdown"])
    s.section("Intro")
    assert "## Section 1: Intro" in lines


def test_explicit_reporter_in_options(make_suite, recorder):
    s = make_suite(options={"reporter": recorder, "verbosity": Verbosity.NORMAL})
    s.section("x")
    assert recorder.names() == ["section"]


def test_metadata_merges_over_defaults(make_suite):
    s = make_suite(options={"classification": "SECRET", "metadata": {"author": "qa", "classification": "TOP SECRET"}})
    assert s.metadata.classification == "TOP SECRET"
    assert s.metadata.extensions == {"author": "qa"}
    assert s.metadata.document_id.startswith("TEST-")


def test_terminal_default(make_suite, lines):
    s = make_suite(options={"verbosity": Verbosity.VERBOSE})
    s.test("p", lambda: True)
    assert click.unstyle(lines[0]) == "✓ TEST 0.1 PASSED: p"


def test_unserializable_values_render_on_failure(make_suite, lines):
    s = make_suite(options={"verbosity": Verbosity.QUIET, "format": "ascii"})
    s.assert_equal({(0, 0): 1}, {(0, 0): 2}, "grid cell")
    assert len(s.failed) == 1
    assert "       Expected: {(0, 0): 2}" in lines
    assert "       Actual:   {(0, 0): 1}" in lines


def test_diff_with_unserializable_values(make_suite, lines):
    s = make_suite(options={"verbosity": Verbosity.VERBOSE, "format": "ascii"})
    s.diff({(0, 0): 1}, {(0, 0): 1})
    assert lines.count("  [NO VARIANCE DETECTED]") == 1


def test_metadata_document_id_camel_case(make_suite, lines):
    s = make_suite(options={"verbosity": Verbosity.NORMAL, "format": "ascii",
                            "metadata": {"documentId": "CITS-2025-001"}})
    s.header()
    assert s.metadata.document_id == "CITS-2025-001"
    assert any("CITS-2025-001" in line for line in lines)
