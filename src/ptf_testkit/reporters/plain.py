
from typing import Any, Dict, Optional, Sequence, Union
from ..layout import (stringify, value_lines, rule, label_rule, closing_rule,
                      box_top, box_divider, box_bottom, box_line, box_field)
from .base import (ReporterMetadata, Sink, DEFAULT_DIFF_LABEL, coerce_metadata,
                   default_sink, join_args, shows_comparison)

class PlainReporter:
    """ASCII-safe reporter for logs, archives and dumb terminals."""

    def __init__(self, metadata: Union[ReporterMetadata, Dict[str, Any], None] = None, sink: Optional[Sink] = None):
        self.metadata = coerce_metadata(metadata)
        self._sink = sink or default_sink()

    def output(self, line: str) -> None:
        self._sink(line)

    # ---------- document structure ----------
    def header(self, suite_name: str) -> None:
        md = self.metadata
        self.output("")
        self.output(box_top())
        self.output(box_line(md.classification))
        self.output(box_divider())
        self.output(box_line("OPERATIONAL TEST REPORT"))
        self.output(box_field("Facility:", suite_name, 20))
        self.output(box_field("Document Control:", md.document_id, 20))
        self.output(box_field("Transmission Date:", md.date, 20))
        self.output(box_field("Timestamp:", md.time, 20))
        self.output(box_bottom())
        self.output("")

    def section(self, section_number: int, title: str) -> None:
        self.output("")
        self.output(rule("═"))
        self.output(f"SECTION {section_number}: {title}")
        self.output(rule("═"))
        self.output("")

    def subsection(self, section_number: int, test_number: int, title: str) -> None:
        self.output("")
        self.output(rule("─"))
        self.output(f"{section_number}.{test_number} {title}")
        self.output(rule("─"))
        self.output("")

    def code(self, language: str, content: str, label: Optional[str] = None) -> None:
        if label:
            self.output(label_rule(label))
        self.output(f"```{language}")
        self.output(content.strip())
        self.output("```")
        if label:
            self.output(closing_rule())
        self.output("")

    # ---------- results ----------
    def test_passed(self, test_id: str, description: str) -> None:
        self.output(f"[PASS] TEST {test_id}: {description}")

    def test_failed(self, test_id: str, description: str, result) -> None:
        self.output(f"[FAIL] TEST {test_id}: {description}")
        if result.message:
            self.output(f"       Reason: {result.message}")
        if shows_comparison(result):
            for line in value_lines("       Expected: ", result.expected):
                self.output(line)
            for line in value_lines("       Actual:   ", result.actual):
                self.output(line)

    def summary(self, stats) -> None:
        self.output("")
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
        self.output("")

    def failure_details(self, failures: Sequence) -> None:
        if not failures:
            return
        self.output("FAILED OPERATIONS REGISTRY:")
        self.output("")
        for f in failures:
            self.output(f"  [{f.id}] {f.description}")
            if f.message:
                self.output(f"       {f.message}")
        self.output("")

    def diff(self, expected: Any, actual: Any, label: str = DEFAULT_DIFF_LABEL) -> None:
        self.output("")
        self.output(label_rule(label))
        self.output("")
        exp, act = stringify(expected), stringify(actual)
        if exp == act:
            self.output("  [NO VARIANCE DETECTED]")
        else:
            self.output("  EXPECTED STATE:")
            for line in exp.split("\n"):
                self.output("  - " + line)
            self.output("")
            self.output("  ACTUAL STATE:")
            for line in act.split("\n"):
                self.output("  + " + line)
        self.output("")
        self.output(closing_rule())
        self.output("")

    # ---------- leveled lines ----------
    def log(self, *args: Any) -> None:
        self.output(join_args(args))

    def info(self, *args: Any) -> None:
        self.output(f"[INFO] {join_args(args)}")

    def warn(self, *args: Any) -> None:
        self.output(f"[WARN] {join_args(args)}")

    def error(self, *args: Any) -> None:
        self.output(f"[ERROR] {join_args(args)}")

    def success(self, *args: Any) -> None:
        self.output(f"[SUCCESS] {join_args(args)}")
