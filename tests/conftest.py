import pytest

from arclens import Animator, Reactive
from arclens.registry import PROXIMITY_REGISTRY, SNAP_REGISTRY


@pytest.fixture(autouse=True)
def _clean_registries():
    yield
    PROXIMITY_REGISTRY.clear()
    SNAP_REGISTRY.clear()


@pytest.fixture
def reactive():
    return Reactive()


@pytest.fixture
def animator():
    return Animator()
