"""
Custom metric exporter.
Discovers the cluster identity, builds one time series and writes it to
Cloud Monitoring. Any client or API failure is fatal; there are no retries.
"""
import logging
from typing import Optional

import google.auth.exceptions
from google.api_core import exceptions as gcp_exceptions
from google.auth import compute_engine
from google.cloud import monitoring_v3

from .config import Config
from .exceptions import ClientError, SubmissionError
from .metadata import MetadataClient, discover_resource_labels
from .timeseries import build_time_series_request

logger = logging.getLogger(__name__)


class Exporter:
    """Exports a single metric value for the cluster this process runs in."""

    def __init__(
        self,
        cfg: Config,
        client: Optional[monitoring_v3.MetricServiceClient] = None,
        metadata: Optional[MetadataClient] = None,
    ):
        self.cfg = cfg
        self.client = client or self._initialize_client()
        self.metadata = metadata or MetadataClient(host=cfg.METADATA_HOST, timeout=cfg.METADATA_TIMEOUT)

    def _initialize_client(self) -> monitoring_v3.MetricServiceClient:
        """Initialize the monitoring client with the node's compute credentials."""
        try:
            client = monitoring_v3.MetricServiceClient(credentials=compute_engine.Credentials())
        except Exception as e:
            raise ClientError(f"Failed to initialize Cloud Monitoring client: {e}") from e
        logger.debug("Cloud Monitoring client initialized")
        return client

    def submit(self, request: monitoring_v3.CreateTimeSeriesRequest) -> None:
        try:
            self.client.create_time_series(request=request)
        except (gcp_exceptions.GoogleAPIError, google.auth.exceptions.GoogleAuthError) as e:
            raise SubmissionError(f"Failed to create time series in {request.name}: {e}") from e

    def export(self) -> str:
        """
        Export the configured metric.

        Returns:
            The metric type that was written
        """
        labels = discover_resource_labels(self.metadata)
        mtype, request = build_time_series_request(self.cfg.METRIC_NAME, self.cfg.METRIC_VALUE, labels)
        self.submit(request)
        logger.info(f"Exported custom metric '{mtype}' = {self.cfg.METRIC_VALUE}.")
        return mtype
