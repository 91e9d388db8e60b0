import random

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from giveaway.api.routers import giveaway_router
from giveaway.services.giveaway import GiveawayService, get_giveaway_service

SAMPLE_TEXT = "1 - Alice\n2 - Bob\n3 - Carol Ann"


@pytest.fixture
def service():
    return GiveawayService(reveal_delay=0, rng=random.Random(7))


@pytest.fixture
def loaded_service(service):
    service.load(SAMPLE_TEXT)
    return service


@pytest.fixture
def client(service):
    app = FastAPI()
    app.include_router(giveaway_router)
    app.dependency_overrides[get_giveaway_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
