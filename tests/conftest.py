import pytest

from fakes import BASE_ENV, FakeFinder, FakeSearch, FakeTransport, snapshot
from mpris_presence.config import Config
from mpris_presence.cover_art import CoverArt
from mpris_presence.reconciler import Reconciler


@pytest.fixture
def env():
    return dict(BASE_ENV)


@pytest.fixture
def finder():
    return FakeFinder([snapshot()])


@pytest.fixture
def search():
    return FakeSearch({"Album": ["mbid-album"]})


@pytest.fixture
def reconciler(env, finder, search):
    return Reconciler(Config(env), finder, CoverArt(search))


@pytest.fixture
def transport():
    return FakeTransport()
