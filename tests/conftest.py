"""Shared test fixtures for triangle geometry and display tests."""
import pytest
from trigeom.types import Triangle
from trigeom.constants import DEFAULT_POINTS
from display.report import compute_report
from display.store import JsonFileStore


@pytest.fixture(scope="session")
def default_tri():
    return DEFAULT_POINTS


@pytest.fixture(scope="session")
def right_tri():
    """3-4-5 right triangle scaled by 100, right angle at A."""
    return Triangle((0.0, 0.0), (300.0, 0.0), (0.0, 400.0))


@pytest.fixture(scope="session")
def default_report(default_tri):
    """DisplayReport for the default triangle."""
    return compute_report(default_tri)


@pytest.fixture(scope="session")
def right_report(right_tri):
    return compute_report(right_tri)


@pytest.fixture
def json_store(tmp_path):
    """JsonFileStore in a fresh (not yet created) subdirectory."""
    return JsonFileStore(tmp_path / "state" / "store.json")
