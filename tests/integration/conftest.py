import pytest
from fastapi.testclient import TestClient

from txdoctor.api.server import create_app
from txdoctor.config.settings import Settings
from txdoctor.diagnosis.diagnoser import Diagnoser
from txdoctor.diagnosis.example_client_adapter import ExampleClientAdapter


@pytest.fixture()
def settings() -> Settings:
    return Settings(diagnosis_provider="example", batch_max_size=3)


@pytest.fixture()
def example_diagnoser() -> Diagnoser:
    return Diagnoser(client=ExampleClientAdapter(), model="example")


@pytest.fixture()
def api_client(settings: Settings, example_diagnoser: Diagnoser) -> TestClient:
    return TestClient(create_app(settings=settings, diagnoser=example_diagnoser))
