import os
import sys

import pytest
import requests

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from gke_custom_metrics.metadata import MetadataClient


class FakeResponse:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session; unknown paths behave like an unreachable server."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        suffix = url.split("/computeMetadata/v1/", 1)[1]
        route = self.routes.get(suffix)
        if route is None:
            raise requests.ConnectionError(f"cannot reach {url}")
        if isinstance(route, Exception):
            raise route
        return FakeResponse(*route)


@pytest.fixture
def fake_metadata():
    """Build a MetadataClient answering from a {suffix: (status, body)} map."""
    def factory(routes):
        return MetadataClient(host="metadata.test", timeout=1.0, session=FakeSession(routes))
    return factory


@pytest.fixture
def cluster_routes():
    return {
        "project/project-id": (200, "proj-1"),
        "instance/attributes/cluster-location": (200, "  us-central1-a  "),
        "instance/attributes/cluster-name": (200, "my-cluster"),
    }
