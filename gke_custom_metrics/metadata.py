"""
Best-effort discovery of the cluster identity from the GCE metadata server.

Every lookup may fail (the server is unreachable outside GCE, or an
attribute is not set on the node). Failures are logged and reported as an
empty label so the metric is still exported.
"""
import logging
from typing import Any, Callable, Dict, NamedTuple, Optional

import requests

from .config import DEFAULT_METADATA_HOST
from .exceptions import MetadataError, MetadataNotDefinedError

logger = logging.getLogger(__name__)

LOCATION_ATTRIBUTE = "cluster-location"
CLUSTER_NAME_ATTRIBUTE = "cluster-name"


class MetadataClient:
    """Minimal client for the `computeMetadata/v1` endpoint."""

    def __init__(
        self,
        host: str = DEFAULT_METADATA_HOST,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self.host = host
        self.timeout = timeout
        self.session = session or requests.Session()

    def get(self, suffix: str) -> str:
        url = f"http://{self.host}/computeMetadata/v1/{suffix.lstrip('/')}"
        try:
            resp = self.session.get(url, headers={"Metadata-Flavor": "Google"}, timeout=self.timeout)
        except requests.RequestException as e:
            raise MetadataError(f"metadata: request for {suffix!r} failed: {e}") from e

        if resp.status_code == 404:
            raise MetadataNotDefinedError(suffix)
        if resp.status_code != 200:
            raise MetadataError(f"metadata: {suffix!r} returned HTTP {resp.status_code}")
        return resp.text

    def project_id(self) -> str:
        return self.get("project/project-id").strip()

    def instance_attribute_value(self, attr: str) -> str:
        # value is returned as stored; callers trim
        return self.get(f"instance/attributes/{attr}")


class Lookup(NamedTuple):
    value: str
    error: Optional[MetadataError]


def best_effort(lookup: Callable[..., str], *args: Any) -> Lookup:
    """Run a metadata lookup, turning a MetadataError into an empty value.

    The error is handed back rather than raised so the caller decides, in
    plain sight, to ignore it.
    """
    try:
        return Lookup(lookup(*args), None)
    except MetadataError as e:
        return Lookup("", e)


def discover_resource_labels(client: MetadataClient) -> Dict[str, str]:
    """Return the `k8s_cluster` resource labels for the node we run on."""
    lookups = {
        "project_id": best_effort(client.project_id),
        "location": best_effort(client.instance_attribute_value, LOCATION_ATTRIBUTE),
        "cluster_name": best_effort(client.instance_attribute_value, CLUSTER_NAME_ATTRIBUTE),
    }

    labels: Dict[str, str] = {}
    for key, result in lookups.items():
        if result.error is not None:
            # ignored: an unavailable label is exported as ""
            logger.warning(f"Metadata lookup for {key} failed, using empty value: {result.error}")
        labels[key] = result.value.strip()
    return labels
