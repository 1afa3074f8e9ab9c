# environment/export.py

import logging
from collections.abc import Iterable, Mapping

from powervs_endpoints.errors import EnvironmentWriteError

from .store import EnvironmentStore, get_environment_variable, set_environment_variable
from .translation import ENDPOINT_KEY_TO_ENV_NAME, REGION_ENV_NAME, env_name_for

logger = logging.getLogger(__name__)


def set_environment_variables(
    name: str,
    value: str,
    *,
    store: EnvironmentStore | None = None,
) -> None:
    """
    Set a single environment variable and verify it reads back unchanged.

    Args:
        name (str): Variable name, e.g. "IBMCLOUD_REGION".
        value (str): Value to write.
        store (EnvironmentStore | None, optional): Target store; defaults to
            the process environment.

    Raises:
        EnvironmentWriteError: If the write fails or reads back differently.
    """
    set_environment_variable(name, value, store=store)

    found = get_environment_variable(name, store=store)
    if found != value:
        raise EnvironmentWriteError(
            name,
            f"expected {value!r} after write but read {found!r}",
        )


def set_custom_endpoints(
    endpoints: Mapping[str, str],
    keys: Iterable[str],
    *,
    store: EnvironmentStore | None = None,
) -> None:
    """
    Export endpoint overrides into the environment variables the SDK reads.

    Keys are exported in the given order. The first translation or write
    failure is raised immediately and variables already written are left in
    place.

    Args:
        endpoints (Mapping[str, str]): Service key to override URL.
        keys (Iterable[str]): Keys of endpoints to export, in export order.
        store (EnvironmentStore | None, optional): Target store; defaults to
            the process environment.

    Raises:
        UnknownServiceKeyError: If a key has no environment variable.
        EnvironmentWriteError: If a write fails.
    """
    for key in keys:
        env_name = env_name_for(key)
        set_environment_variables(env_name, endpoints[key], store=store)
        logger.info("Exported %s endpoint override to %s", key, env_name)


def get_custom_endpoint(
    key: str,
    *,
    store: EnvironmentStore | None = None,
) -> str | None:
    """
    Read the exported override URL for one service key.

    Raises:
        UnknownServiceKeyError: If the key has no environment variable.

    Returns:
        str | None: The override URL, or None if none is exported.
    """
    return get_environment_variable(env_name_for(key), store=store) or None


def get_custom_endpoints(*, store: EnvironmentStore | None = None) -> dict[str, str]:
    """
    Read every exported endpoint override, keyed by service key.

    Returns:
        dict[str, str]: Service key to override URL for each exported override.
    """
    return {
        key: value
        for key, env_name in ENDPOINT_KEY_TO_ENV_NAME.items()
        if (value := get_environment_variable(env_name, store=store))
    }


def get_region(*, store: EnvironmentStore | None = None) -> str | None:
    return get_environment_variable(REGION_ENV_NAME, store=store) or None
