
from typing import Any, Dict, Optional, Type
from ..config import normalize_format
from .base import Reporter, Sink
from .plain import PlainReporter
from .terminal import TerminalReporter
from .markdown import MarkdownReporter

REPORTERS: Dict[str, Type] = {
    "terminal": TerminalReporter,
    "markdown": MarkdownReporter,
    "ascii": PlainReporter,
}

def get_reporter(fmt: Optional[str] = None, metadata: Any = None, sink: Optional[Sink] = None) -> Reporter:
    """Built-in reporter for `fmt`; unknown names get the terminal reporter."""
    return REPORTERS[normalize_format(fmt)](metadata, sink)
