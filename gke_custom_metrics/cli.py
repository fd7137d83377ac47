"""Command line entry point: `gke-custom-metric -name <name> -value <value>`."""
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .config import Config
from .exceptions import ExporterError
from .exporter import Exporter
from .logger import get_logger


def main(argv: Optional[List[str]] = None) -> int:
    """Run one export. Returns the process exit status."""
    load_dotenv()

    logger = logging.getLogger("gke_custom_metrics")
    try:
        cfg = Config.from_args(argv)
        logger = get_logger(cfg)
        Exporter(cfg).export()
    except ExporterError as e:
        logger.error(f"Export failed: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())
