from dataclasses import dataclass

import pytest

from quadlite import storage
from quadlite.storage import Storage


@dataclass
class WorldBoundaries:
    value: int


@dataclass
class Settings:
    volume: float


def test_global_store_and_get():
    storage.store(WorldBoundaries(23))
    assert storage.get(WorldBoundaries).value == 23


def test_global_try_get_missing():
    class NeverStored:
        pass

    assert storage.try_get(NeverStored) is None


def test_global_get_missing_raises():
    class AlsoNeverStored:
        pass

    with pytest.raises(KeyError):
        storage.get(AlsoNeverStored)


def test_store_overwrites():
    s = Storage()
    s.store(Settings(0.5))
    s.store(Settings(0.9))
    assert s.get(Settings) == Settings(0.9)


def test_values_keyed_by_type():
    s = Storage()
    s.store(Settings(0.5))
    s.store(WorldBoundaries(7))
    assert s.get(Settings) == Settings(0.5)
    assert s.get(WorldBoundaries) == WorldBoundaries(7)
    assert WorldBoundaries in s


def test_returned_value_is_shared_and_mutable():
    s = Storage()
    s.store(Settings(0.5))
    s.get(Settings).volume = 0.25
    assert s.get(Settings).volume == 0.25


def test_instances_are_independent():
    a = Storage()
    b = Storage()
    a.store(Settings(0.5))
    assert b.try_get(Settings) is None
    with pytest.raises(KeyError):
        b.get(Settings)