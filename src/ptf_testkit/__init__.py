# Lightweight package init: the reporters and engine load on first attribute access.
__all__ = ["create_suite", "Suite", "Verbosity", "VERBOSITY_LEVELS", "Result", "Detailed", "Stats",
           "SuiteOptions", "load_options", "get_reporter", "PlainReporter", "TerminalReporter",
           "MarkdownReporter", "Reporter", "ReporterMetadata", "pad"]

_EXPORTS = {
    "create_suite": ".runners.suite", "Suite": ".runners.suite", "Verbosity": ".runners.suite",
    "Result": ".runners.suite", "Detailed": ".runners.suite", "Stats": ".runners.suite",
    "SuiteOptions": ".config", "load_options": ".config",
    "get_reporter": ".reporters.registry",
    "PlainReporter": ".reporters.plain", "TerminalReporter": ".reporters.terminal",
    "MarkdownReporter": ".reporters.markdown",
    "Reporter": ".reporters.base", "ReporterMetadata": ".reporters.base",
    "pad": ".layout",
}

def __getattr__(name):
    if name == "VERBOSITY_LEVELS":
        from .runners.suite import Verbosity
        return Verbosity
    if name in _EXPORTS:
        import importlib
        return getattr(importlib.import_module(_EXPORTS[name], __name__), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
