
"""One-shot printing helpers, usable without a Suite."""
from typing import Any, Optional
import typer
from .reporters.base import Sink, default_sink, join_args
from .runners.suite import arrays_equal

__all__ = ["print_line", "print_info", "print_success", "print_error", "print_divider",
           "print_code", "print_fenced", "print_javascript", "arrays_equal"]

def _out(sink: Optional[Sink]) -> Sink:
    return sink or default_sink()

def print_line(*args: Any, sink: Optional[Sink] = None) -> None:
    _out(sink)(join_args(args))

def print_info(*args: Any, sink: Optional[Sink] = None) -> None:
    _out(sink)(typer.style(join_args(args), fg=typer.colors.BLUE))

def print_success(*args: Any, sink: Optional[Sink] = None) -> None:
    _out(sink)(typer.style(join_args(args), fg=typer.colors.GREEN))

def print_error(*args: Any, sink: Optional[Sink] = None) -> None:
    _out(sink)(typer.style(join_args(args), fg=typer.colors.RED))

def print_divider(text: str, sink: Optional[Sink] = None) -> None:
    _out(sink)(f"=== {text} ===\n")

def print_code(text: str, sink: Optional[Sink] = None) -> None:
    _out(sink)(f"{text.strip()}\n")

def print_fenced(text: str, language: str = "python", sink: Optional[Sink] = None) -> None:
    _out(sink)(f"```{language}\n{text.strip()}\n```\n")

def print_javascript(text: str, sink: Optional[Sink] = None) -> None:
    print_fenced(text, "javascript", sink=sink)
