# adapters/kube.py

import logging

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from kubernetes.config.config_exception import ConfigException
from pydantic import ValidationError
from urllib3.exceptions import HTTPError

from powervs_endpoints.config import EndpointsConfig
from powervs_endpoints.errors import (
    InfrastructureNotFoundError,
    InfrastructureReadError,
)
from powervs_endpoints.schemas import Infrastructure

logger = logging.getLogger(__name__)

_config = EndpointsConfig()

RequestTimeout = float | tuple[float, float] | None


def make_custom_objects_api() -> client.CustomObjectsApi:
    """
    Build a CustomObjectsApi client for the current cluster.

    Loads the in-cluster service account configuration when running in a pod,
    falling back to the local kubeconfig otherwise.

    Returns:
        client.CustomObjectsApi: Client for cluster custom objects.
    """
    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes config")
    except ConfigException:
        config.load_kube_config()
        logger.info("Loaded Kubernetes config from kubeconfig")

    return client.CustomObjectsApi()


def fetch_infrastructure(
    api: client.CustomObjectsApi,
    *,
    name: str | None = None,
    request_timeout: RequestTimeout = None,
) -> Infrastructure:
    """
    Fetch the cluster Infrastructure object by name.

    No retries are attempted. The request timeout, if given, is handed to the
    Kubernetes client unchanged.

    Args:
        api (client.CustomObjectsApi): Kubernetes custom objects client.
        name (str | None, optional): Object name; defaults to "cluster".
        request_timeout (RequestTimeout, optional): Total timeout in seconds,
            or a (connect, read) pair.

    Raises:
        InfrastructureNotFoundError: If the object does not exist.
        InfrastructureReadError: If the read fails for any other reason.

    Returns:
        Infrastructure: The parsed Infrastructure object.
    """
    name = name or _config.infrastructure_name
    logger.info("Fetching infrastructure object %r", name)

    try:
        payload = api.get_cluster_custom_object(
            _config.group,
            _config.version,
            _config.plural,
            name,
            _request_timeout=request_timeout,
        )
    except ApiException as error:
        if error.status == 404:
            raise InfrastructureNotFoundError(name) from error
        raise InfrastructureReadError(name, _describe_api_error(error)) from error
    except (HTTPError, OSError) as error:
        raise InfrastructureReadError(name, str(error)) from error

    try:
        return Infrastructure.model_validate(payload)
    except ValidationError as error:
        raise InfrastructureReadError(name, f"malformed object: {error}") from error


def _describe_api_error(error: ApiException) -> str:
    """
    Summarise an ApiException as "<status> <reason>".

    Returns:
        str: Short description of the API failure.
    """
    return f"{error.status} {error.reason}".strip()
