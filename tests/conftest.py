import pytest

from doubles import RecordingWait

from brew_demo.domain.models import Recipe
from brew_demo.services.factory import MachineFactory


@pytest.fixture(autouse=True)
def _reset_factory():
    MachineFactory.reset()
    yield
    MachineFactory.reset()


@pytest.fixture
def recording_wait():
    return RecordingWait()


@pytest.fixture
def espresso():
    return Recipe(name="Espresso", strength=100, water_amount=30, brew_time=20)


@pytest.fixture
def latte():
    return Recipe(name="Latte", strength=70, water_amount=200, brew_time=40)


@pytest.fixture
def americano():
    return Recipe(name="Americano", strength=80, water_amount=150, brew_time=30)
