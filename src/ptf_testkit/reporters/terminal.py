
from typing import Any, Dict, Optional, Sequence, Union
import typer
from ..layout import (pad, stringify, value_lines, rule, label_rule, closing_rule,
                      box_top, box_divider, box_bottom, BOX_WIDTH)
from .base import (ReporterMetadata, Sink, DEFAULT_DIFF_LABEL, coerce_metadata,
                   default_sink, join_args, shows_comparison)

C = typer.colors
FRAME = C.CYAN

def _frame(s: str) -> str:
    return typer.style(s, fg=FRAME)

class TerminalReporter:
    """
    Interactive reporter: the plain layout, decorated with ANSI styles.
    Styling is applied after padding so the frame stays 80 columns wide.
    """

    def __init__(self, metadata: Union[ReporterMetadata, Dict[str, Any], None] = None, sink: Optional[Sink] = None):
        self.metadata = coerce_metadata(metadata)
        self._sink = sink or default_sink()

    def output(self, line: str) -> None:
        self._sink(line)

    def _row(self, text: str, **style) -> str:
        return _frame("║ ") + typer.style(pad(text, BOX_WIDTH - 4), **style) + _frame(" ║")

    def _field(self, label: str, value: str, fg: str = C.WHITE, width: int = 21) -> str:
        body = typer.style(label.ljust(width), fg=fg) + pad(value, BOX_WIDTH - 4 - width)
        return _frame("║ ") + body + _frame(" ║")

    # ---------- document structure ----------
    def header(self, suite_name: str) -> None:
        md = self.metadata
        self.output("")
        self.output(_frame(box_top()))
        self.output(self._row(md.classification, fg=C.YELLOW, bold=True))
        self.output(_frame(box_divider()))
        self.output(self._row("OPERATIONAL TEST REPORT", bold=True))
        self.output(self._field("Facility:", suite_name, width=20))
        self.output(self._field("Document Control:", md.document_id, width=20))
        self.output(self._field("Transmission Date:", md.date, width=20))
        self.output(self._field("Timestamp:", md.time, width=20))
        self.output(_frame(box_bottom()))
        self.output("")

    def section(self, section_number: int, title: str) -> None:
        self.output("")
        self.output(typer.style(rule("═"), fg=C.BLUE))
        self.output(typer.style(f"SECTION {section_number}: ", fg=C.BLUE, bold=True)
                    + typer.style(title, fg=C.WHITE, bold=True))
        self.output(typer.style(rule("═"), fg=C.BLUE))
        self.output("")

    def subsection(self, section_number: int, test_number: int, title: str) -> None:
        self.output("")
        self.output(_frame(rule("─")))
        self.output(_frame(f"{section_number}.{test_number} ") + typer.style(title, fg=C.WHITE))
        self.output(_frame(rule("─")))
        self.output("")

    def code(self, language: str, content: str, label: Optional[str] = None) -> None:
        if label:
            self.output(typer.style(label_rule(label), dim=True))
        self.output(typer.style(f"```{language}", dim=True))
        for line in content.strip().split("\n"):
            self.output(typer.style(line, dim=True))
        self.output(typer.style("```", dim=True))
        if label:
            self.output(typer.style(closing_rule(), dim=True))
        self.output("")

    # ---------- results ----------
    def test_passed(self, test_id: str, description: str) -> None:
        self.output(typer.style(f"✓ TEST {test_id} PASSED", fg=C.GREEN) + f": {description}")

    def test_failed(self, test_id: str, description: str, result) -> None:
        self.output(typer.style(f"✗ TEST {test_id} FAILED", fg=C.RED) + f": {description}")
        if result.message:
            self.output("  " + typer.style(f"Reason: {result.message}", fg=C.YELLOW))
        if shows_comparison(result):
            for line in value_lines("  Expected: ", result.expected):
                self.output(typer.style(line, fg=C.CYAN))
            for line in value_lines("  Actual:   ", result.actual):
                self.output(typer.style(line, fg=C.MAGENTA))

    def summary(self, stats) -> None:
        self.output("")
        self.output(_frame(box_top()))
        self.output(self._row("MISSION STATUS REPORT", fg=C.WHITE, bold=True))
        self.output(_frame(box_divider()))
        self.output(self._field("Total Operations:", str(stats.total)))
        self.output(self._field("Successful:", str(stats.passed), fg=C.GREEN))
        self.output(self._field("Failed:", str(stats.failed), fg=C.RED))
        self.output(self._field("Success Rate:", f"{stats.pass_rate}%", fg=C.YELLOW))
        self.output(self._field("Execution Duration:", f"{stats.duration}ms", fg=C.BLUE))
        self.output(_frame(box_divider()))
        if stats.failed == 0:
            self.output(self._row("CLEARANCE: ALL OPERATIONS SUCCESSFUL", fg=C.GREEN, bold=True))
        else:
            self.output(self._row(f"ALERT: {stats.failed} OPERATION(S) FAILED", fg=C.RED, bold=True))
        self.output(_frame(box_bottom()))
        self.output("")

    def failure_details(self, failures: Sequence) -> None:
        if not failures:
            return
        self.output(typer.style("FAILED OPERATIONS REGISTRY:", fg=C.RED, bold=True))
        self.output("")
        for f in failures:
            self.output("  " + typer.style(f"[{f.id}]", fg=C.RED) + f" {f.description}")
            if f.message:
                self.output("       " + typer.style(f.message, fg=C.YELLOW))
        self.output("")

    def diff(self, expected: Any, actual: Any, label: str = DEFAULT_DIFF_LABEL) -> None:
        self.output("")
        self.output(typer.style(label_rule(label), fg=C.YELLOW))
        self.output("")
        exp, act = stringify(expected), stringify(actual)
        if exp == act:
            self.output("  " + typer.style("[NO VARIANCE DETECTED]", fg=C.GREEN))
        else:
            self.output("  " + typer.style("EXPECTED STATE:", fg=C.CYAN))
            for line in exp.split("\n"):
                self.output("  " + typer.style(f"- {line}", fg=C.RED))
            self.output("")
            self.output("  " + typer.style("ACTUAL STATE:", fg=C.CYAN))
            for line in act.split("\n"):
                self.output("  " + typer.style(f"+ {line}", fg=C.GREEN))
        self.output("")
        self.output(typer.style(closing_rule(), fg=C.YELLOW))
        self.output("")

    # ---------- leveled lines ----------
    def log(self, *args: Any) -> None:
        self.output(join_args(args))

    def info(self, *args: Any) -> None:
        self.output(typer.style(f"ℹ {join_args(args)}", fg=C.BLUE))

    def warn(self, *args: Any) -> None:
        self.output(typer.style(f"⚠ {join_args(args)}", fg=C.YELLOW))

    def error(self, *args: Any) -> None:
        self.output(typer.style(f"✗ {join_args(args)}", fg=C.RED))

    def success(self, *args: Any) -> None:
        self.output(typer.style(f"✓ {join_args(args)}", fg=C.GREEN))
