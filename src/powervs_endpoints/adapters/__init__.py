# adapters/__init__.py

from .kube import fetch_infrastructure, make_custom_objects_api

__all__ = [
    "fetch_infrastructure",
    "make_custom_objects_api",
]
