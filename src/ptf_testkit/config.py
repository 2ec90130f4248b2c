
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, Sequence, Union
import logging, pathlib, time
import yaml

log = logging.getLogger(__name__)

FORMATS = ("terminal", "markdown", "ascii")
DEFAULT_FORMAT = "terminal"

def _document_id() -> str:
    return f"TEST-{int(time.time() * 1000)}"

class SuiteOptions(BaseModel):
    verbosity: int = Field(3, ge=0, le=4, description="0=SILENT .. 4=DEBUG")
    classification: str = Field("UNCLASSIFIED")
    document_id: str = Field(default_factory=_document_id)
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Extra header metadata, merged over defaults")
    format: Optional[str] = Field(None, description="terminal, markdown or ascii")
    junit: Optional[str] = Field(None, description="Write JUnit XML here on exit()")

def load_options(path: Union[str, pathlib.Path]) -> SuiteOptions:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return SuiteOptions.model_validate(data)

def _argv_value(argv: Sequence[str], name: str) -> Optional[str]:
    prefix = f"--{name}="
    found = None
    for arg in argv:
        if arg.startswith(prefix):
            found = arg[len(prefix):]
    return found

def format_from_argv(argv: Sequence[str]) -> Optional[str]:
    return _argv_value(argv, "format")

def normalize_format(fmt: Optional[str]) -> str:
    if fmt is None:
        return DEFAULT_FORMAT
    name = fmt.strip().lower()
    if name not in FORMATS:
        log.debug("unknown format %r, using %s", fmt, DEFAULT_FORMAT)
        return DEFAULT_FORMAT
    return name

def resolve_options(options: Union[SuiteOptions, Dict[str, Any], None], argv: Sequence[str] = ()) -> SuiteOptions:
    """
    Merge option sources, highest first:
      explicit options > --format=/--junit= arguments > --config=<yaml> file > defaults
    The format is always one of FORMATS afterwards.
    """
    if isinstance(options, SuiteOptions):
        explicit = options.model_dump(exclude_unset=True)
    else:
        explicit = dict(options or {})
        # camelCase spelling used by callers coming from other harnesses
        if "documentId" in explicit:
            explicit.setdefault("document_id", explicit.pop("documentId"))
    explicit = {k: v for k, v in explicit.items() if v is not None}

    merged: Dict[str, Any] = {}
    config_path = _argv_value(argv, "config")
    if config_path:
        merged.update(load_options(config_path).model_dump(exclude_unset=True))
    for key in ("format", "junit"):
        val = _argv_value(argv, key)
        if val:
            merged[key] = val
    merged.update(explicit)

    opts = SuiteOptions.model_validate(merged)
    opts.format = normalize_format(opts.format)
    return opts
