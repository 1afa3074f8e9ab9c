# powervs_endpoints/__init__.py

from .domain import configure_sdk_environment, resolve_endpoints
from .environment import (
    ENDPOINT_KEY_TO_ENV_NAME,
    REGION_ENV_NAME,
    get_custom_endpoint,
    get_custom_endpoints,
    get_region,
    set_custom_endpoints,
    set_environment_variables,
)
from .errors import (
    EndpointsError,
    EnvironmentWriteError,
    InfrastructureNotFoundError,
    InfrastructureReadError,
    UnknownServiceKeyError,
)

__all__ = [
    "configure_sdk_environment",
    "resolve_endpoints",
    "ENDPOINT_KEY_TO_ENV_NAME",
    "REGION_ENV_NAME",
    "get_custom_endpoint",
    "get_custom_endpoints",
    "get_region",
    "set_custom_endpoints",
    "set_environment_variables",
    "EndpointsError",
    "EnvironmentWriteError",
    "InfrastructureNotFoundError",
    "InfrastructureReadError",
    "UnknownServiceKeyError",
]
