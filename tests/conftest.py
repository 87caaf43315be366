from __future__ import annotations

import pytest

from ofdb_cli.domain.model import Place  # noqa: TC001
from tests.helpers.catalog import FakeCatalog, FakeGeoCoder, make_place


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def fake_geocoder() -> FakeGeoCoder:
    return FakeGeoCoder(coordinates={"Stuttgart": (48.7758, 9.1829)})


@pytest.fixture
def place() -> Place:
    return make_place()
