# domain/resolve.py

import logging

import httpx
from kubernetes import client

from powervs_endpoints.adapters import fetch_infrastructure
from powervs_endpoints.adapters.kube import RequestTimeout
from powervs_endpoints.config import EndpointsConfig
from powervs_endpoints.environment import is_recognised, suggest_service_key
from powervs_endpoints.schemas import Infrastructure, PowerVSPlatformStatus

logger = logging.getLogger(__name__)

_config = EndpointsConfig()

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def resolve_endpoints(
    api: client.CustomObjectsApi,
    *,
    request_timeout: RequestTimeout = None,
) -> dict[str, str]:
    """
    Resolve the custom IBM Cloud service endpoints configured for the cluster.

    Fetches the Infrastructure singleton and collects the PowerVS service
    endpoints it lists. Nothing is exported; the caller decides whether to
    apply the result.

    Args:
        api (client.CustomObjectsApi): Kubernetes custom objects client.
        request_timeout (RequestTimeout, optional): Passed through to the
            Kubernetes client.

    Raises:
        InfrastructureNotFoundError: If the Infrastructure object is absent.
        InfrastructureReadError: If reading the Infrastructure object fails.

    Returns:
        dict[str, str]: Recognised service key to override URL. Empty when no
            custom endpoints are configured.
    """
    infrastructure = fetch_infrastructure(api, request_timeout=request_timeout)
    return endpoints_from_infrastructure(infrastructure)


def endpoints_from_infrastructure(infrastructure: Infrastructure) -> dict[str, str]:
    """
    Collect recognised service endpoint overrides from an Infrastructure object.

    Entries with unrecognised names or URLs that are not absolute http(s)
    URLs are skipped. When a name appears more than once, the last entry
    wins.

    Returns:
        dict[str, str]: Recognised service key to override URL.
    """
    powervs = powervs_status(infrastructure)
    if powervs is None:
        logger.debug("No PowerVS platform status, no custom endpoints to resolve")
        return {}

    endpoints: dict[str, str] = {}

    for endpoint in powervs.service_endpoints:
        if not is_recognised(endpoint.name):
            _log_unrecognised(endpoint.name)
            continue

        if not _is_absolute_http_url(endpoint.url):
            logger.warning(
                "Rejecting %s endpoint with invalid URL %r",
                endpoint.name,
                endpoint.url,
            )
            continue

        endpoints[endpoint.name] = endpoint.url

    logger.info("Resolved %d custom service endpoint(s)", len(endpoints))
    return endpoints


def powervs_status(infrastructure: Infrastructure) -> PowerVSPlatformStatus | None:
    """
    Return the PowerVS platform status of an Infrastructure object.

    Returns:
        PowerVSPlatformStatus | None: The PowerVS status, or None if the
            status is missing or belongs to another platform.
    """
    status = infrastructure.status
    platform_status = status.platform_status if status else None

    if platform_status is None or platform_status.type != _config.platform_type:
        return None

    return platform_status.powervs


def _is_absolute_http_url(value: str) -> bool:
    """
    Check whether a value is an absolute http or https URL with a host.

    Returns:
        bool: True if the URL is usable as an SDK base URL.
    """
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError):
        return False

    return url.scheme in _ALLOWED_SCHEMES and bool(url.host)


def _log_unrecognised(name: str) -> None:
    suggestion = suggest_service_key(name)
    if suggestion is None:
        logger.debug("Ignoring unrecognised service endpoint %r", name)
    else:
        logger.debug(
            "Ignoring unrecognised service endpoint %r (did you mean %r?)",
            name,
            suggestion,
        )
