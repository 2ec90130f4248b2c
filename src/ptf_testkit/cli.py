
from typing import Optional, List
import pathlib, runpy, sys
import typer
from .config import FORMATS, DEFAULT_FORMAT
from .logging import setup_logging

app = typer.Typer(add_completion=False, help="PTF Testkit - assertion suites with plain, terminal and markdown reports")

@app.command()
def run(
    script: str = typer.Argument(..., help="Suite script to execute, e.g. tests/acceptance.py"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help=f"Report format: {', '.join(FORMATS)} (default: options file, then {DEFAULT_FORMAT})"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to suite options YAML"),
    junit: Optional[str] = typer.Option(None, "--junit", help="Write JUnit XML to this path"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Diagnostic log level"),
):
    path = pathlib.Path(script)
    if not path.is_file():
        raise typer.BadParameter(f"no such script: {script}", param_hint="SCRIPT")
    log = setup_logging(log_level)

    argv: List[str] = [str(path)]
    if fmt: argv.append(f"--format={fmt}")
    if config: argv.append(f"--config={config}")
    if junit: argv.append(f"--junit={junit}")

    log.debug("running %s with %s", path, argv[1:])
    saved = sys.argv
    sys.argv = argv
    code = 0
    try:
        runpy.run_path(str(path), run_name="__main__")
    except SystemExit as e:
        # Suite.exit() ends the script; its status is ours
        code = e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
    finally:
        sys.argv = saved
    raise typer.Exit(code=code)

@app.command()
def formats():
    """List the built-in report formats."""
    for name in FORMATS:
        suffix = " (default)" if name == DEFAULT_FORMAT else ""
        typer.echo(f"{name}{suffix}")
