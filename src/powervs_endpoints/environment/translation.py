# environment/translation.py

from collections.abc import Mapping
from types import MappingProxyType

from rapidfuzz import process, utils

from powervs_endpoints.errors import UnknownServiceKeyError

# Service key -> environment variable read by the IBM Cloud SDK
ENDPOINT_KEY_TO_ENV_NAME: Mapping[str, str] = MappingProxyType(
    {
        "IAM": "IBMCLOUD_IAM_API_ENDPOINT",
        "ResourceController": "IBMCLOUD_RESOURCE_CONTROLLER_API_ENDPOINT",
        "Power": "IBMCLOUD_POWER_API_ENDPOINT",
    },
)

REGION_ENV_NAME = "IBMCLOUD_REGION"

if len(set(ENDPOINT_KEY_TO_ENV_NAME.values())) != len(ENDPOINT_KEY_TO_ENV_NAME):
    raise RuntimeError("service keys must map to distinct environment variables")


def env_name_for(key: str) -> str:
    """
    Translate a service key into the environment variable the SDK reads.

    Args:
        key (str): Service key, e.g. "IAM".

    Raises:
        UnknownServiceKeyError: If the key is not in the translation table.

    Returns:
        str: The environment variable name for the key.
    """
    try:
        return ENDPOINT_KEY_TO_ENV_NAME[key]
    except KeyError:
        raise UnknownServiceKeyError(key) from None


def is_recognised(key: str) -> bool:
    return key in ENDPOINT_KEY_TO_ENV_NAME


def custom_endpoint_keys(endpoints: Mapping[str, str]) -> list[str]:
    """
    Return the keys of an endpoint mapping in a deterministic (sorted) order.

    Returns:
        list[str]: Sorted service keys.
    """
    return sorted(endpoints)


def suggest_service_key(name: str, *, score_cutoff: int = 80) -> str | None:
    """
    Find the recognised service key closest to an unrecognised name.

    Used only for diagnostics, so a mistyped or differently cased name in the
    Infrastructure status can be spotted in the logs.

    Returns:
        str | None: The closest recognised key, or None if nothing is close.
    """
    if not name:
        return None

    match = process.extractOne(
        name,
        list(ENDPOINT_KEY_TO_ENV_NAME),
        processor=utils.default_process,
        score_cutoff=score_cutoff,
    )
    return match[0] if match else None
