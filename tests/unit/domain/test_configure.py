# domain/test_configure.py

import pytest

from powervs_endpoints.domain.configure import configure_sdk_environment
from powervs_endpoints.environment import (
    InMemoryEnvironment,
    get_custom_endpoints,
    get_region,
)
from powervs_endpoints.errors import InfrastructureNotFoundError

from .._helpers import FakeCustomObjectsApi, make_infrastructure_payload

pytestmark = pytest.mark.unit

_ENDPOINTS = [
    {"name": "IAM", "url": "https://test.iam.cloud.ibm.com"},
    {"name": "ResourceController", "url": "https://test.resource-controller.cloud.ibm.com"},
]


def test_configure_exports_resolved_endpoints() -> None:
    """
    ARRANGE: Infrastructure with IAM and ResourceController endpoints
    ACT:     configure_sdk_environment
    ASSERT:  the read path recovers both endpoints
    """
    store = InMemoryEnvironment()
    api = FakeCustomObjectsApi(make_infrastructure_payload(_ENDPOINTS))

    configure_sdk_environment(api, store=store)

    assert get_custom_endpoints(store=store) == {
        "IAM": "https://test.iam.cloud.ibm.com",
        "ResourceController": "https://test.resource-controller.cloud.ibm.com",
    }


def test_configure_returns_exported_endpoints() -> None:
    """
    ARRANGE: Infrastructure with IAM and ResourceController endpoints
    ACT:     configure_sdk_environment
    ASSERT:  returns the exported mapping
    """
    api = FakeCustomObjectsApi(make_infrastructure_payload(_ENDPOINTS))

    actual = configure_sdk_environment(api, store=InMemoryEnvironment())

    assert set(actual) == {"IAM", "ResourceController"}


def test_configure_explicit_region_takes_precedence() -> None:
    """
    ARRANGE: Infrastructure with region "test-region", explicit "us-south"
    ACT:     configure_sdk_environment
    ASSERT:  exported region is "us-south"
    """
    store = InMemoryEnvironment()
    api = FakeCustomObjectsApi(make_infrastructure_payload(_ENDPOINTS))

    configure_sdk_environment(api, region="us-south", store=store)

    assert get_region(store=store) == "us-south"


def test_configure_falls_back_to_status_region() -> None:
    """
    ARRANGE: Infrastructure with region "test-region", no explicit region
    ACT:     configure_sdk_environment
    ASSERT:  exported region is "test-region"
    """
    store = InMemoryEnvironment()
    api = FakeCustomObjectsApi(make_infrastructure_payload(_ENDPOINTS))

    configure_sdk_environment(api, store=store)

    assert get_region(store=store) == "test-region"


def test_configure_leaves_region_unset_when_unknown() -> None:
    """
    ARRANGE: Infrastructure without a region, no explicit region
    ACT:     configure_sdk_environment
    ASSERT:  no region is exported
    """
    store = InMemoryEnvironment()
    api = FakeCustomObjectsApi(make_infrastructure_payload(_ENDPOINTS, region=None))

    configure_sdk_environment(api, store=store)

    assert get_region(store=store) is None


def test_configure_without_endpoints_writes_nothing() -> None:
    """
    ARRANGE: non-PowerVS Infrastructure, no explicit region
    ACT:     configure_sdk_environment
    ASSERT:  store stays empty
    """
    store = InMemoryEnvironment()
    api = FakeCustomObjectsApi(
        make_infrastructure_payload(_ENDPOINTS, platform_type="AWS"),
    )

    configure_sdk_environment(api, store=store)

    assert store.as_dict() == {}


def test_configure_propagates_not_found_without_writing() -> None:
    """
    ARRANGE: fake API with no Infrastructure object
    ACT:     configure_sdk_environment
    ASSERT:  raises InfrastructureNotFoundError and writes nothing
    """
    store = InMemoryEnvironment()

    with pytest.raises(InfrastructureNotFoundError):
        configure_sdk_environment(FakeCustomObjectsApi(), region="us-south", store=store)

    assert store.as_dict() == {}
