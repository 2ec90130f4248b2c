
import logging
from rich.logging import RichHandler
def setup_logging(level: str = "WARNING"):
    logging.basicConfig(level=level.upper(), format="%(message)s", datefmt="[%X]",
                        handlers=[RichHandler(rich_tracebacks=True, show_path=False)])
    return logging.getLogger("ptf_testkit")
