import random

import pytest

from fragments.rotation import RotationRegistry
from presets.catalog import default_registry
from routing.router import PayloadRouter
from routing.settings import EngineSettings

IMAGE_URL = "https://img/x.png"


@pytest.fixture
def settings():
    return EngineSettings()


@pytest.fixture
def rotation():
    return RotationRegistry(rng=random.Random(1234))


@pytest.fixture
def router(settings, rotation):
    return PayloadRouter(registry=default_registry(), rotation=rotation, settings=settings)
