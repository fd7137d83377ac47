from setuptools import setup, find_packages

setup(
    name="gke_custom_metrics",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.8",
    description="Export a single custom metric value for a GKE cluster to Cloud Monitoring",
    install_requires=[
        "google-cloud-monitoring>=2.0",
        "google-api-core",
        "google-auth",
        "protobuf",
        "requests",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "gke-custom-metric=gke_custom_metrics.cli:run",
        ],
    },
)
