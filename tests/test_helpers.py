import click
from ptf_testkit.helpers import (print_line, print_info, print_success, print_error, print_divider,
                                 print_code, print_fenced, print_javascript, arrays_equal)


def test_plain_printers():
    out = []
    print_line("a", 1, sink=out.append)
    print_divider("Setup", sink=out.append)
    print_code("\n  x = 1\n", sink=out.append)
    assert out == ["a 1", "=== Setup ===\n", "x = 1\n"]


def test_colored_printers():
    out = []
    print_info("i", sink=out.append)
    print_success("s", sink=out.append)
    print_error("e", sink=out.append)
    assert all("\x1b[" in line for line in out)
    assert [click.unstyle(line) for line in out] == ["i", "s", "e"]


def test_fenced_printers():
    out = []
    print_fenced(" y = 2 ", sink=out.append)
    print_javascript("let z = 3;", sink=out.append)
    assert out == ["```python\ny = 2\n```\n", "```javascript\nlet z = 3;\n```\n"]


def test_arrays_equal_is_shallow():
    assert arrays_equal([1, 2], [1, 2])
    assert not arrays_equal([[1]], [[1]])
