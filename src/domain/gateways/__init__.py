"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .object_store_gateway import IObjectStoreGateway

__all__ = ["IObjectStoreGateway"]
