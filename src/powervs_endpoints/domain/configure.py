# domain/configure.py

import logging

from kubernetes import client

from powervs_endpoints.adapters import fetch_infrastructure
from powervs_endpoints.adapters.kube import RequestTimeout
from powervs_endpoints.environment import (
    REGION_ENV_NAME,
    EnvironmentStore,
    custom_endpoint_keys,
    set_custom_endpoints,
    set_environment_variables,
)

from .resolve import endpoints_from_infrastructure, powervs_status

logger = logging.getLogger(__name__)


def configure_sdk_environment(
    api: client.CustomObjectsApi,
    *,
    region: str | None = None,
    store: EnvironmentStore | None = None,
    request_timeout: RequestTimeout = None,
) -> dict[str, str]:
    """
    Prepare the environment for constructing IBM Cloud SDK clients.

    Resolves the cluster's custom service endpoints, exports them and sets
    the region. An explicit region takes precedence over the region recorded
    in the PowerVS platform status; if neither is available the region is
    left untouched.

    Args:
        api (client.CustomObjectsApi): Kubernetes custom objects client.
        region (str | None, optional): Region to export.
        store (EnvironmentStore | None, optional): Target store; defaults to
            the process environment.
        request_timeout (RequestTimeout, optional): Passed through to the
            Kubernetes client.

    Raises:
        InfrastructureNotFoundError: If the Infrastructure object is absent.
        InfrastructureReadError: If reading the Infrastructure object fails.
        EnvironmentWriteError: If an environment write fails.

    Returns:
        dict[str, str]: The endpoint overrides that were exported.
    """
    infrastructure = fetch_infrastructure(api, request_timeout=request_timeout)
    endpoints = endpoints_from_infrastructure(infrastructure)

    set_custom_endpoints(endpoints, custom_endpoint_keys(endpoints), store=store)

    if region is None:
        powervs = powervs_status(infrastructure)
        region = powervs.region if powervs else None

    if region:
        set_environment_variables(REGION_ENV_NAME, region, store=store)
        logger.info("Exported region %s to %s", region, REGION_ENV_NAME)

    return endpoints
