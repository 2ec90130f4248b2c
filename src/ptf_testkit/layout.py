
import json
from typing import Any

BOX_WIDTH = 80

def pad(text: str, width: int) -> str:
    """Right-pad `text` with spaces to `width`. Longer text is returned as-is."""
    return text + " " * max(0, width - len(text))

_JSON_NATIVE = (type(None), bool, int, float, str, dict, list, tuple)

def to_json(value: Any) -> str:
    if not isinstance(value, _JSON_NATIVE):
        return str(value)
    try:
        return json.dumps(value, default=str, ensure_ascii=False)
    except (TypeError, ValueError):
        # non-string keys, circular containers
        return str(value)

def stringify(value: Any) -> str:
    """Canonical text of a value: strings verbatim, structures as indented JSON, the rest via str()."""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set, frozenset)):
        if isinstance(value, (set, frozenset)):
            value = sorted(value, key=repr)
        try:
            return json.dumps(value, indent=2, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(value)
    return to_json(value)

def rule(char: str, width: int = BOX_WIDTH) -> str:
    return char * width

def label_rule(label: str, width: int = BOX_WIDTH) -> str:
    # ┌─[ label ]───... filled out to `width` columns
    return f"┌─[ {label} ]" + "─" * max(0, width - 6 - len(label))

def closing_rule(width: int = BOX_WIDTH) -> str:
    return "└" + "─" * (width - 1)

def box_top(width: int = BOX_WIDTH) -> str:
    return "╔" + "═" * (width - 2) + "╗"

def box_divider(width: int = BOX_WIDTH) -> str:
    return "╠" + "═" * (width - 2) + "╣"

def box_bottom(width: int = BOX_WIDTH) -> str:
    return "╚" + "═" * (width - 2) + "╝"

def box_line(text: str, width: int = BOX_WIDTH) -> str:
    return f"║ {pad(text, width - 4)} ║"

def box_field(label: str, value: str, label_width: int = 21, width: int = BOX_WIDTH) -> str:
    return box_line(pad(label, label_width) + value, width)

def value_lines(prefix: str, value: Any) -> list:
    """`prefix` + stringified value; continuation lines are indented under the value."""
    lines = stringify(value).split("\n")
    indent = " " * len(prefix)
    return [prefix + lines[0]] + [indent + ln for ln in lines[1:]]
