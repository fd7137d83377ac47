from .config import Config
from .exceptions import ClientError, ExporterError, MetadataError, SubmissionError, ValidationError
from .exporter import Exporter
from .logger import get_logger
from .timeseries import build_time_series_request

__all__ = [
    "Config",
    "Exporter",
    "get_logger",
    "build_time_series_request",
    "ExporterError",
    "ClientError",
    "MetadataError",
    "SubmissionError",
    "ValidationError",
]
