"""Infrastructure services package."""

from .host_metrics_service import HostMetricsService
from .role_classifier import ControlPattern, RolePatternClassifier

__all__ = ["ControlPattern", "HostMetricsService", "RolePatternClassifier"]
