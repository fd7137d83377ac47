"""Exceptions raised by gke_custom_metrics."""


class ExporterError(Exception):
    """Base class for every failure the exporter reports."""


class ValidationError(ExporterError):
    pass


class ClientError(ExporterError):
    """The Cloud Monitoring client could not be constructed."""


class SubmissionError(ExporterError):
    """The time series could not be written to Cloud Monitoring."""


class MetadataError(ExporterError):
    """A lookup against the GCE metadata server failed."""


class MetadataNotDefinedError(MetadataError):
    def __init__(self, suffix: str):
        super().__init__(f"metadata: GCE metadata {suffix!r} not defined")
        self.suffix = suffix
