"""Configuration for gke_custom_metrics.

The metric name and value come from the command line; ambient settings
(log level, metadata server) come from OS environment variables.
"""
import argparse
import os
from typing import List, Optional

from .exceptions import ValidationError

DEFAULT_METADATA_HOST = "metadata.google.internal"


class Config:
    def __init__(self, name: str = "", value: float = 0.0):
        # metric to export, no validation on either
        self.METRIC_NAME = name
        self.METRIC_VALUE = value

        # defaults
        self.LOG_LEVEL = "INFO"
        self.METADATA_HOST = DEFAULT_METADATA_HOST
        self.METADATA_TIMEOUT = 5.0

        # environment overrides
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", self.LOG_LEVEL).upper()
        self.METADATA_HOST = os.getenv("GCE_METADATA_HOST") or self.METADATA_HOST
        timeout = os.getenv("METADATA_TIMEOUT", str(self.METADATA_TIMEOUT))
        try:
            self.METADATA_TIMEOUT = float(timeout)
        except ValueError:
            raise ValidationError(f"METADATA_TIMEOUT must be a number, got {timeout!r}")

    @classmethod
    def from_args(cls, argv: Optional[List[str]] = None) -> "Config":
        """Build a Config from command line flags (`-name`, `-value`)."""
        args = build_parser().parse_args(argv)
        return cls(name=args.name, value=args.value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gke-custom-metric",
        description="Export one custom metric value for the current GKE cluster to Cloud Monitoring",
    )
    parser.add_argument("-name", "--name", default="", help="The metric name.")
    parser.add_argument("-value", "--value", type=float, default=0.0, help="The value to export.")
    return parser
