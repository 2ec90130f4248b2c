
from typing import Any, Dict, Optional, Sequence, Union
from ..layout import (stringify, to_json, box_top, box_divider, box_bottom, box_line, box_field)
from .base import (ReporterMetadata, Sink, DEFAULT_DIFF_LABEL, coerce_metadata,
                   default_sink, join_args, shows_comparison)

FENCE = "```"

class MarkdownReporter:
    """
    Markdown output for archival. Redirect stdout to a .md file; the header and
    summary boxes are kept inside plain fences so they render monospaced.
    """

    def __init__(self, metadata: Union[ReporterMetadata, Dict[str, Any], None] = None, sink: Optional[Sink] = None):
        self.metadata = coerce_metadata(metadata)
        self._sink = sink or default_sink()

    def output(self, line: str) -> None:
        self._sink(line)

    def header(self, suite_name: str) -> None:
        md = self.metadata
        self.output(FENCE)
        self.output(box_top())
        self.output(box_line(md.classification))
        self.output(box_divider())
        self.output(box_line("OPERATIONAL TEST REPORT"))
        self.output(box_field("Facility:", suite_name, 20))
        self.output(box_field("Document Control:", md.document_id, 20))
        self.output(box_field("Transmission Date:", md.date, 20))
        self.output(box_field("Timestamp:", md.time, 20))
        self.output(box_bottom())
        self.output(FENCE)
        self.output("")

    def section(self, section_number: int, title: str) -> None:
        self.output("")
        self.output(f"## Section {section_number}: {title}")
        self.output("")

    def subsection(self, section_number: int, test_number: int, title: str) -> None:
        self.output("")
        self.output(f"### {section_number}.{test_number} {title}")
        self.output("")

    def code(self, language: str, content: str, label: Optional[str] = None) -> None:
        if label:
            self.output(f"**{label}**")
            self.output("")
        self.output(FENCE + language)
        self.output(content.strip())
        self.output(FENCE)
        self.output("")

    def test_passed(self, test_id: str, description: str) -> None:
        self.output(f"- ✓ **TEST {test_id} PASSED**: {description}")

    def test_failed(self, test_id: str, description: str, result) -> None:
        self.output(f"- ✗ **TEST {test_id} FAILED**: {description}")
        if result.message:
            self.output(f"  - Reason: {result.message}")
        if shows_comparison(result):
            self._value("Expected", result.expected)
            self._value("Actual", result.actual)

    def _value(self, name: str, value: Any) -> None:
        text = stringify(value)
        if "\n" not in text:
            self.output(f"  - {name}: `{to_json(value)}`")
            return
        # structured values go into an indented fence under the bullet
        self.output(f"  - {name}:")
        self.output("")
        self.output("    " + FENCE + "json")
        for line in text.split("\n"):
            self.output("    " + line)
        self.output("    " + FENCE)

    def summary(self, stats) -> None:
        self.output("")
        self.output(FENCE)
        self.output(box_top())
        self.output(box_line("MISSION STATUS REPORT"))
        self.output(box_divider())
        self.output(box_field("Total Operations:", str(stats.total)))
        self.output(box_field("Successful:", str(stats.passed)))
        self.output(box_field("Failed:", str(stats.failed)))
        self.output(box_field("Success Rate:", f"{stats.pass_rate}%"))
        self.output(box_field("Execution Duration:", f"{stats.duration}ms"))
        self.output(box_divider())
        if stats.failed == 0:
            self.output(box_line("CLEARANCE: ALL OPERATIONS SUCCESSFUL"))
        else:
            self.output(box_line(f"ALERT: {stats.failed} OPERATION(S) FAILED"))
        self.output(box_bottom())
        self.output(FENCE)
        self.output("")

    def failure_details(self, failures: Sequence) -> None:
        if not failures:
            return
        self.output("## Failed Operations Registry")
        self.output("")
        for f in failures:
            self.output(f"- **[{f.id}]** {f.description}")
            if f.message:
                self.output(f"  - {f.message}")
        self.output("")

    def diff(self, expected: Any, actual: Any, label: str = DEFAULT_DIFF_LABEL) -> None:
        self.output("")
        self.output(f"### {label}")
        self.output("")
        exp, act = stringify(expected), stringify(actual)
        if exp == act:
            self.output("**[NO VARIANCE DETECTED]**")
            self.output("")
            return
        for title, text, mark in (("Expected State", exp, "-"), ("Actual State", act, "+")):
            self.output(f"**{title}:**")
            self.output("")
            self.output(FENCE + "diff")
            for line in text.split("\n"):
                self.output(f"{mark} {line}")
            self.output(FENCE)
            self.output("")

    def log(self, *args: Any) -> None:
        self.output(join_args(args))

    def info(self, *args: Any) -> None:
        self.output(f"ℹ️ {join_args(args)}")

    def warn(self, *args: Any) -> None:
        self.output(f"⚠️ **Warning:** {join_args(args)}")

    def error(self, *args: Any) -> None:
        self.output(f"❌ **Error:** {join_args(args)}")

    def success(self, *args: Any) -> None:
        self.output(f"✅ {join_args(args)}")
