import logging
import sys


def setup_logging(level: str | int = logging.INFO) -> None:
    """Install a stdout handler for scripts and batch jobs."""
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
