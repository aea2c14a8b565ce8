"""Shared pytest fixtures for rrdecoder tests."""

from pathlib import Path

import pytest

from rrdecoder.catalog import Flavor, System, SystemType, Tag, Talkgroup, Voice
from rrdecoder.classifier import ProtocolClassifier


TYPE_NAMES = [
    "LTR",
    "MPT-1327",
    "Project 25",
    "Motorola",
    "DMR",
    "NXDN",
    "EDACS",
    "TETRA",
    "Midland CMS",
    "OpenSky",
    "iDEN",
    "SmarTrunk",
    "Other",
    "Zetron Smartnet",  # not a known RadioReference type
]

FLAVOR_NAMES = [
    "Standard",
    "Net",
    "Passport",
    "Phase I",
    "Phase II",
    "Type II",
    "Capacity Plus",
]

VOICE_NAMES = [
    "Analog",
    "Analog and APCO-25 Common Air Interface",
    "APCO-25 Common Air Interface Exclusive",
    "Digital",
]

TAGS = {
    1: Tag(1, "Law Dispatch"),
    2: Tag(2, "Fire Dispatch"),
    3: Tag(3, "EMS Dispatch"),
}


@pytest.fixture
def backend_root() -> Path:
    """Get the backend root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(backend_root: Path) -> Path:
    """Get the config directory."""
    return backend_root / "config"


@pytest.fixture
def type_map() -> dict[int, SystemType]:
    return {i: SystemType(i, name) for i, name in enumerate(TYPE_NAMES, start=1)}


@pytest.fixture
def flavor_map() -> dict[int, Flavor]:
    return {i: Flavor(i, name) for i, name in enumerate(FLAVOR_NAMES, start=1)}


@pytest.fixture
def voice_map() -> dict[int, Voice]:
    return {i: Voice(i, name) for i, name in enumerate(VOICE_NAMES, start=1)}


@pytest.fixture
def tag_map() -> dict[int, Tag]:
    return dict(TAGS)


@pytest.fixture
def classifier(type_map, flavor_map, voice_map, tag_map) -> ProtocolClassifier:
    return ProtocolClassifier(type_map, flavor_map, voice_map, tag_map)


@pytest.fixture
def make_system(type_map, flavor_map, voice_map):
    """Factory building a System from catalog names."""
    def _ids(table, name):
        for key, entry in table.items():
            if entry.name == name:
                return key
        raise KeyError(name)

    def _make(type_name: str, flavor_name: str = "Standard", voice_name: str = "Analog",
              system_id: int = 1) -> System:
        return System(
            system_id=system_id,
            type_id=_ids(type_map, type_name),
            flavor_id=_ids(flavor_map, flavor_name),
            voice_id=_ids(voice_map, voice_name),
            name=f"{type_name} {flavor_name}",
        )

    return _make


@pytest.fixture
def make_talkgroup():
    """Factory building a Talkgroup with optional tag references."""
    def _make(value: int, tag_ids: list[int] | None = None) -> Talkgroup:
        tags = None if tag_ids is None else tuple(Tag(tag_id) for tag_id in tag_ids)
        return Talkgroup(decimal_value=value, tags=tags)

    return _make
