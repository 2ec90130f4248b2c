
"""
Reporter contract shared by every output format.

A reporter is anything providing the methods of `Reporter` below. The suite
engine decides *whether* something is rendered (verbosity); a reporter only
decides *how*. Every method writes through `output(line)` and returns None.
"""
from __future__ import annotations
import datetime, time
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, TYPE_CHECKING, runtime_checkable
import typer
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ..runners.suite import Result, Stats

Sink = Callable[[str], Any]

DEFAULT_DIFF_LABEL = "DIFFERENTIAL ANALYSIS"

def _now() -> datetime.datetime:
    return datetime.datetime.now()

class ReporterMetadata(BaseModel):
    """Header metadata; unknown keys are kept as extensions."""
    model_config = ConfigDict(extra="allow")

    classification: str = "UNCLASSIFIED"
    document_id: str = Field(default_factory=lambda: f"PTF-{int(time.time() * 1000)}")
    date: str = Field(default_factory=lambda: _now().date().isoformat())
    time: str = Field(default_factory=lambda: _now().strftime("%H:%M:%S"))

    @classmethod
    def build(cls, metadata: Optional[Dict[str, Any]] = None, **defaults: Any) -> "ReporterMetadata":
        # caller metadata wins over defaults on key collision
        merged = {k: v for k, v in defaults.items() if v is not None}
        extra = dict(metadata or {})
        if "documentId" in extra:
            extra.setdefault("document_id", extra.pop("documentId"))
        merged.update(extra)
        return cls.model_validate(merged)

    @property
    def extensions(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

def coerce_metadata(metadata: Any) -> ReporterMetadata:
    if isinstance(metadata, ReporterMetadata):
        return metadata
    return ReporterMetadata.build(metadata)

def default_sink() -> Sink:
    return typer.echo

def join_args(args: Sequence[Any]) -> str:
    return " ".join(str(a) for a in args)

@runtime_checkable
class Reporter(Protocol):
    metadata: ReporterMetadata

    def header(self, suite_name: str) -> None: ...
    def section(self, section_number: int, title: str) -> None: ...
    def subsection(self, section_number: int, test_number: int, title: str) -> None: ...
    def code(self, language: str, content: str, label: Optional[str] = None) -> None: ...
    def test_passed(self, test_id: str, description: str) -> None: ...
    def test_failed(self, test_id: str, description: str, result: "Result") -> None: ...
    def summary(self, stats: "Stats") -> None: ...
    def failure_details(self, failures: Sequence["Result"]) -> None: ...
    def diff(self, expected: Any, actual: Any, label: str = DEFAULT_DIFF_LABEL) -> None: ...
    def log(self, *args: Any) -> None: ...
    def info(self, *args: Any) -> None: ...
    def warn(self, *args: Any) -> None: ...
    def error(self, *args: Any) -> None: ...
    def success(self, *args: Any) -> None: ...
    def output(self, line: str) -> None: ...

def shows_comparison(result: "Result") -> bool:
    return result.expected is not None and result.actual is not None
