# domain/__init__.py

from .configure import configure_sdk_environment
from .resolve import endpoints_from_infrastructure, powervs_status, resolve_endpoints

__all__ = [
    "configure_sdk_environment",
    "endpoints_from_infrastructure",
    "powervs_status",
    "resolve_endpoints",
]
