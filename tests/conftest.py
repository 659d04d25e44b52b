from __future__ import annotations

import pytest

from fakes import FakePokeApi


@pytest.fixture
def fake_api() -> FakePokeApi:
    return FakePokeApi()
