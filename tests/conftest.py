import os

import pytest

from automata_utils import loader

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def fixture_path():
    def _fixture_path(name):
        return os.path.join(FIXTURES, f"{name}.json")

    return _fixture_path


@pytest.fixture
def load(fixture_path):
    def _load(name, kind=None):
        return loader.from_json_file(fixture_path(name), kind=kind)

    return _load
