# schemas/infrastructure.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_API_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


class ServiceEndpoint(BaseModel):
    """
    A custom endpoint for one IBM Cloud service, as listed in the
    Infrastructure status.

    Missing or null fields read as empty strings, so an incomplete entry is
    skipped during resolution instead of failing the whole object.
    """

    model_config = _API_MODEL_CONFIG

    name: str = ""
    url: str = ""

    @field_validator("name", "url", mode="before")
    @classmethod
    def _null_to_empty(cls, value: object) -> object:
        return "" if value is None else value


class PowerVSPlatformStatus(BaseModel):
    """
    PowerVS-specific part of the Infrastructure platform status.
    """

    model_config = _API_MODEL_CONFIG

    region: str | None = None
    zone: str | None = None
    resource_group: str | None = None
    service_endpoints: tuple[ServiceEndpoint, ...] = ()

    @field_validator("service_endpoints", mode="before")
    @classmethod
    def _null_to_empty_tuple(cls, value: object) -> object:
        return () if value is None else value


class PlatformStatus(BaseModel):
    """
    Platform status union; only the PowerVS member is modelled.
    """

    model_config = _API_MODEL_CONFIG

    type: str | None = None
    powervs: PowerVSPlatformStatus | None = None


class InfrastructureStatus(BaseModel):
    model_config = _API_MODEL_CONFIG

    platform: str | None = None
    platform_status: PlatformStatus | None = None


class ObjectMeta(BaseModel):
    model_config = _API_MODEL_CONFIG

    name: str = ""


class Infrastructure(BaseModel):
    """
    The cluster-wide OpenShift Infrastructure object
    (config.openshift.io/v1).

    Only the fields needed to locate PowerVS service endpoints are modelled.
    Every level below the object itself may be absent.
    """

    model_config = _API_MODEL_CONFIG

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    status: InfrastructureStatus | None = None
