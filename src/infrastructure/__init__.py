"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the object store
REST API, device classification and local platform metrics.
"""

from src.infrastructure import gateways, services

__all__ = ["gateways", "services"]
