"""
Application Services Package

Building blocks shared by the use cases: snapshot loading, device
grouping and classification, live-value enrichment and method dispatch.
"""

from .device_builder import DeviceBuilder
from .method_dispatcher import MethodBinding, MethodDispatcher
from .snapshot_loader import SnapshotLoader
from .state_enricher import StateEnricher

__all__ = [
    "DeviceBuilder",
    "MethodBinding",
    "MethodDispatcher",
    "SnapshotLoader",
    "StateEnricher",
]
