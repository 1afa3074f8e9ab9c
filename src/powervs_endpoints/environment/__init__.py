# environment/__init__.py

from .export import (
    get_custom_endpoint,
    get_custom_endpoints,
    get_region,
    set_custom_endpoints,
    set_environment_variables,
)
from .store import (
    EnvironmentStore,
    InMemoryEnvironment,
    ProcessEnvironment,
    get_environment_variable,
    set_environment_variable,
)
from .translation import (
    ENDPOINT_KEY_TO_ENV_NAME,
    REGION_ENV_NAME,
    custom_endpoint_keys,
    env_name_for,
    is_recognised,
    suggest_service_key,
)

__all__ = [
    # export
    "get_custom_endpoint",
    "get_custom_endpoints",
    "get_region",
    "set_custom_endpoints",
    "set_environment_variables",
    # store
    "EnvironmentStore",
    "InMemoryEnvironment",
    "ProcessEnvironment",
    "get_environment_variable",
    "set_environment_variable",
    # translation
    "ENDPOINT_KEY_TO_ENV_NAME",
    "REGION_ENV_NAME",
    "custom_endpoint_keys",
    "env_name_for",
    "is_recognised",
    "suggest_service_key",
]
