"""RadioReference catalog records and a YAML catalog loader.

The records mirror the RadioReference SOAP types (Type, Flavor, Voice, Tag,
System, Talkgroup). Fetching them from the service is handled elsewhere; this
module only holds them and loads locally cached catalog documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import CatalogDocument, TagModel

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    pass


@dataclass(frozen=True)
class SystemType:
    id: int
    name: str


@dataclass(frozen=True)
class Flavor:
    id: int
    name: str


@dataclass(frozen=True)
class Voice:
    id: int
    name: str


@dataclass(frozen=True)
class Tag:
    """Talkgroup tag (service category).

    Tags embedded in a talkgroup only carry the id; the description has to be
    looked up in the full tag map.
    """
    tag_id: int
    description: str = ""


@dataclass(frozen=True)
class System:
    system_id: int
    type_id: int
    flavor_id: int
    voice_id: int
    name: str = ""


@dataclass(frozen=True)
class Talkgroup:
    decimal_value: int
    alpha_tag: str = ""
    description: str = ""
    mode: str = ""
    tags: tuple[Tag, ...] | None = None


@dataclass
class Catalog:
    """Lookup tables keyed by RadioReference id."""
    types: dict[int, SystemType] = field(default_factory=dict)
    flavors: dict[int, Flavor] = field(default_factory=dict)
    voices: dict[int, Voice] = field(default_factory=dict)
    tags: dict[int, Tag] = field(default_factory=dict)
    systems: dict[int, System] = field(default_factory=dict)
    talkgroups: dict[int, list[Talkgroup]] = field(default_factory=dict)

    def get_system(self, system_id: int) -> System | None:
        return self.systems.get(system_id)

    def get_talkgroups(self, system_id: int) -> list[Talkgroup]:
        return list(self.talkgroups.get(system_id, []))


def _tag_refs(tags: list[TagModel] | None) -> tuple[Tag, ...] | None:
    if tags is None:
        return None
    return tuple(Tag(tag_id=t.tagId) for t in tags)


def catalog_from_document(doc: CatalogDocument) -> Catalog:
    catalog = Catalog(
        types={t.sType: SystemType(t.sType, t.sTypeDescr) for t in doc.types},
        flavors={f.sFlavor: Flavor(f.sFlavor, f.sFlavorDescr) for f in doc.flavors},
        voices={v.sVoice: Voice(v.sVoice, v.sVoiceDescr) for v in doc.voices},
        tags={t.tagId: Tag(t.tagId, t.tagDescr) for t in doc.tags},
        systems={
            s.sid: System(
                system_id=s.sid,
                type_id=s.sType,
                flavor_id=s.sFlavor,
                voice_id=s.sVoice,
                name=s.sName,
            )
            for s in doc.systems
        },
    )

    for tg in doc.talkgroups:
        # Talkgroup tag entries are references only; descriptions come from the tag map
        catalog.talkgroups.setdefault(tg.sid, []).append(
            Talkgroup(
                decimal_value=tg.tgDec,
                alpha_tag=tg.tgAlpha,
                description=tg.tgDescr,
                mode=tg.tgMode,
                tags=_tag_refs(tg.tags),
            )
        )

    return catalog


def load_catalog(path_str: str, config_dir: str | None = None) -> Catalog:
    """Load a catalog YAML document.

    Expected YAML format:
    ```yaml
    types:
      - {sType: 8, sTypeDescr: 'Project 25'}
    flavors:
      - {sFlavor: 2, sFlavorDescr: 'Phase II'}
    voices:
      - {sVoice: 3, sVoiceDescr: 'APCO-25 Common Air Interface Exclusive'}
    tags:
      - {tagId: 1, tagDescr: 'Law Dispatch'}
    systems:
      - {sid: 1234, sName: 'County P25', sType: 8, sFlavor: 2, sVoice: 3}
    talkgroups:
      - {sid: 1234, tgDec: 100, tgAlpha: 'PD DISP', tags: [{tagId: 1}]}
    ```

    Args:
        path_str: Path to YAML file (absolute or relative to config_dir, supports ~)
        config_dir: Base directory for resolving relative paths

    Returns:
        Catalog with all lookup tables populated

    Raises:
        CatalogError: if the file is missing, unreadable or fails validation
    """
    path = Path(path_str).expanduser()
    if config_dir and not path.is_absolute():
        path = Path(config_dir) / path

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse catalog {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog root must be a mapping: {path}")

    try:
        doc = CatalogDocument.model_validate(raw)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog {path}: {exc}") from exc

    catalog = catalog_from_document(doc)
    logger.info(
        f"Loaded catalog {path}: {len(catalog.types)} types, {len(catalog.flavors)} flavors, "
        f"{len(catalog.voices)} voices, {len(catalog.tags)} tags, {len(catalog.systems)} systems"
    )
    return catalog
