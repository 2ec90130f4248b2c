from ptf_testkit.layout import (pad, stringify, to_json, label_rule, closing_rule,
                                box_top, box_line, box_field, value_lines)


def test_pad_fills_to_width():
    assert pad("abc", 10) == "abc" + " " * 7
    assert len(pad("abc", 10)) == 10


def test_pad_never_truncates():
    assert pad("abcdefghij", 5) == "abcdefghij"
    assert pad("", 0) == ""


def test_stringify_strings_verbatim():
    assert stringify("hello") == "hello"


def test_stringify_structures_are_indented_json():
    assert stringify({"a": 1}) == '{\n  "a": 1\n}'
    assert stringify([1, 2]) == "[\n  1,\n  2\n]"


def test_stringify_primitives_use_literals():
    assert stringify(True) == "true"
    assert stringify(None) == "null"
    assert stringify(1.5) == "1.5"


def test_to_json_is_compact():
    assert to_json({"a": [1, 2]}) == '{"a": [1, 2]}'


def test_box_rows_are_eighty_columns():
    assert len(box_top()) == 80
    assert len(box_line("UNCLASSIFIED")) == 80
    assert len(box_field("Failed:", "3")) == 80
    assert box_line("x").startswith("║ x") and box_line("x").endswith(" ║")


def test_box_rows_overflow_instead_of_truncating():
    long = "x" * 100
    assert long in box_line(long)


def test_label_rule_fills_width():
    assert label_rule("SOURCE").startswith("┌─[ SOURCE ]─")
    assert len(label_rule("SOURCE")) == 80
    assert len(closing_rule()) == 80


def test_value_lines_indent_continuations():
    out = value_lines("Expected: ", {"a": 1})
    assert out[0] == "Expected: {"
    assert out[1] == " " * len("Expected: ") + '  "a": 1'


class Marker:
    def __str__(self):
        return "<Marker 7>"


def test_stringify_objects_use_str():
    assert stringify(Marker()) == "<Marker 7>"
    assert to_json(Marker()) == "<Marker 7>"


def test_stringify_tuple_keys_fall_back_to_str():
    value = {(0, 0): 1}
    assert stringify(value) == "{(0, 0): 1}"
    assert to_json(value) == "{(0, 0): 1}"


def test_stringify_circular_container():
    loop = [1]
    loop.append(loop)
    assert stringify(loop) == "[1, [...]]"
    assert to_json(loop) == "[1, [...]]"
