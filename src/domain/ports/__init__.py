"""Domain ports package."""

from .classifier import IDeviceClassifier
from .host_metrics import IHostMetricsProvider

__all__ = ["IDeviceClassifier", "IHostMetricsProvider"]
