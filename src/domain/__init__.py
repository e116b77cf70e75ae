"""
Domain Layer Package

This package contains the core rules of the application: the object
namespace and device entities, the gateway and port contracts, and the
pure services resolving names and enumeration membership. It has no
dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
