from collections.abc import Generator
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from summation.core.config import OverflowPolicy, Settings
from summation.main import app
from summation.services.summation import SummationService, get_summation_service


def make_service(
    policy: OverflowPolicy = OverflowPolicy.WRAP, width: int = 64
) -> SummationService:
    return SummationService(settings=Settings(overflow_policy=policy, integer_width=width))


@pytest.fixture()
def service() -> SummationService:
    return make_service()


@pytest.fixture()
def service_factory():
    return make_service


@pytest.fixture(autouse=True)
def override_summation_service(service: SummationService) -> Generator[None, None, None]:
    app.dependency_overrides[get_summation_service] = lambda: service
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(aws_request_id="test-invoke-12345", function_name="summation")
