# powervs_endpoints/config.py

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EndpointsConfig:
    """
    Immutable configuration for locating the cluster Infrastructure object.

    Centralises the API coordinates of the OpenShift Infrastructure singleton
    and the platform type whose status carries PowerVS service endpoints.

    Returns:
        EndpointsConfig: Immutable configuration object.
    """

    # config.openshift.io/v1 infrastructures, cluster scoped
    group: str = "config.openshift.io"
    version: str = "v1"
    plural: str = "infrastructures"

    # well-known name of the singleton Infrastructure object
    infrastructure_name: str = "cluster"

    # platform status type that carries PowerVS service endpoints
    platform_type: str = "PowerVS"
