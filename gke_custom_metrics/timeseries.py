"""Builds the single-point CreateTimeSeriesRequest for a custom metric."""
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from google.cloud import monitoring_v3
from google.protobuf import timestamp_pb2

METRIC_PREFIX = "custom.googleapis.com/"
RESOURCE_TYPE = "k8s_cluster"


def metric_type(name: str) -> str:
    # no normalization or escaping of the name
    return METRIC_PREFIX + name


def rfc3339(moment: Optional[datetime] = None) -> str:
    """Format `moment` (default: now) as an RFC3339 UTC timestamp, e.g. 2024-01-15T10:30:00Z."""
    if moment is None:
        moment = datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_time_series_request(
    name: str,
    value: float,
    resource_labels: Dict[str, str],
    now: Optional[datetime] = None,
) -> Tuple[str, monitoring_v3.CreateTimeSeriesRequest]:
    """
    Build the request exporting `value` as `custom.googleapis.com/<name>`.

    Args:
        name: Metric name appended to the custom metric prefix
        value: Value stored as the point's double value
        resource_labels: `project_id`, `location` and `cluster_name` of the
            k8s_cluster resource; the project id also scopes the request
        now: End time of the point; defaults to the current time

    Returns:
        Tuple of the metric type and a request holding exactly one time
        series with exactly one point
    """
    mtype = metric_type(name)

    end_time = timestamp_pb2.Timestamp()
    end_time.FromJsonString(rfc3339(now))

    series = monitoring_v3.TimeSeries()
    series.metric.type = mtype
    series.resource.type = RESOURCE_TYPE
    for key, label in resource_labels.items():
        series.resource.labels[key] = label

    point = monitoring_v3.Point(
        {
            "interval": monitoring_v3.TimeInterval({"end_time": end_time}),
            "value": monitoring_v3.TypedValue({"double_value": float(value)}),
        }
    )
    series.points = [point]

    project = monitoring_v3.MetricServiceClient.common_project_path(resource_labels.get("project_id", ""))
    request = monitoring_v3.CreateTimeSeriesRequest(name=project, time_series=[series])
    return mtype, request
