# schemas/__init__.py

from .infrastructure import (
    Infrastructure,
    InfrastructureStatus,
    ObjectMeta,
    PlatformStatus,
    PowerVSPlatformStatus,
    ServiceEndpoint,
)

__all__ = [
    "Infrastructure",
    "InfrastructureStatus",
    "ObjectMeta",
    "PlatformStatus",
    "PowerVSPlatformStatus",
    "ServiceEndpoint",
]
