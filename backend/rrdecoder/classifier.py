"""Classify RadioReference systems into protocols and decoder types.

Translates a system's Type, Flavor and Voice into the protocol used to format
its talkgroups and the decoder that can follow it, and formats talkgroups
according to the user's display preferences.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .catalog import Flavor, System, SystemType, Tag, Talkgroup, Voice
from .formatting import TalkgroupFormatPolicy
from .identifiers import (
    APCO25Talkgroup,
    LTRTalkgroup,
    MPT1327Talkgroup,
    PassportTalkgroup,
    encode_ltr,
)
from .protocol import DecoderType, FlavorKind, Protocol, SystemKind, VoiceKind

logger = logging.getLogger(__name__)


def ltr_components(value: int) -> tuple[int, int, int]:
    """Split a RadioReference LTR decimal talkgroup into (area, home, group).

    The home value is taken from the full decimal, including the area digit.
    """
    area = 1 if value >= 100000 else 0
    home = value // 1000
    group = value % 1000
    return area, home, group


def mpt1327_components(value: int) -> tuple[int, int]:
    """Split a RadioReference MPT-1327 decimal talkgroup into (prefix, ident)."""
    return value // 10000, value % 10000


@dataclass(frozen=True)
class SystemClassification:
    """Resolved catalog names and classification for a single system."""
    system_id: int
    type_name: str | None
    flavor_name: str | None
    voice_name: str | None
    protocol: Protocol
    decoder_type: DecoderType | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "systemId": self.system_id,
            "type": self.type_name,
            "flavor": self.flavor_name,
            "voice": self.voice_name,
            "protocol": self.protocol.name,
            "protocolLabel": self.protocol.label,
            "decoderType": self.decoder_type.name if self.decoder_type else None,
            "decoderLabel": self.decoder_type.label if self.decoder_type else None,
        }


class ProtocolClassifier:
    """Decodes system type, flavor and voice and formats talkgroups.

    Catalog names are translated into SystemKind / FlavorKind / VoiceKind once,
    at construction, so the tables are never consulted by name afterwards.
    The lookup tables are held as read-only views and are safe to share across
    threads.

    Example:
        classifier = ProtocolClassifier(types, flavors, voices, tags)
        classifier.protocol_for(system)               # Protocol.APCO25
        classifier.format_talkgroup(talkgroup, system)  # "1001"
    """

    def __init__(
        self,
        type_map: Mapping[int, SystemType],
        flavor_map: Mapping[int, Flavor],
        voice_map: Mapping[int, Voice],
        tag_map: Mapping[int, Tag],
        format_policy: TalkgroupFormatPolicy | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._type_map: Mapping[int, SystemType] = MappingProxyType(dict(type_map))
        self._flavor_map: Mapping[int, Flavor] = MappingProxyType(dict(flavor_map))
        self._voice_map: Mapping[int, Voice] = MappingProxyType(dict(voice_map))
        self._tag_map: Mapping[int, Tag] = MappingProxyType(dict(tag_map))
        self._format_policy = format_policy or TalkgroupFormatPolicy()
        self._log = log or logger

        self._type_kinds = {k: SystemKind.from_name(v.name) for k, v in self._type_map.items()}
        self._flavor_kinds = {k: FlavorKind.from_name(v.name) for k, v in self._flavor_map.items()}
        self._voice_kinds = {k: VoiceKind.from_name(v.name) for k, v in self._voice_map.items()}

    @property
    def format_policy(self) -> TalkgroupFormatPolicy:
        return self._format_policy

    def get_type(self, system: System) -> SystemType | None:
        return self._type_map.get(system.type_id)

    def get_flavor(self, system: System) -> Flavor | None:
        return self._flavor_map.get(system.flavor_id)

    def get_voice(self, system: System) -> Voice | None:
        return self._voice_map.get(system.voice_id)

    def _kinds(self, system: System) -> tuple[SystemKind, FlavorKind, VoiceKind]:
        system_kind = self._type_kinds.get(system.type_id)
        if system_kind is None:
            self._log.warning(
                f"System {system.system_id}: type id {system.type_id} not in catalog"
            )
            system_kind = SystemKind.UNRECOGNIZED

        # Flavor and voice only refine some types; a missing one is not worth a warning
        flavor_kind = self._flavor_kinds.get(system.flavor_id, FlavorKind.OTHER)
        voice_kind = self._voice_kinds.get(system.voice_id, VoiceKind.OTHER)
        return system_kind, flavor_kind, voice_kind

    def protocol_for(self, system: System) -> Protocol:
        """Protocol used to interpret the system's talkgroups.

        Returns Protocol.UNKNOWN for any type/flavor/voice combination that is
        not supported, including ids missing from the catalog.
        """
        return self._protocol(system, *self._kinds(system))

    def _protocol(
        self, system: System, system_kind: SystemKind, flavor_kind: FlavorKind, voice_kind: VoiceKind
    ) -> Protocol:
        if system_kind == SystemKind.LTR:
            if flavor_kind in (FlavorKind.STANDARD, FlavorKind.NET):
                return Protocol.LTR
            if flavor_kind == FlavorKind.PASSPORT:
                return Protocol.PASSPORT
        elif system_kind == SystemKind.MPT1327:
            return Protocol.MPT1327
        elif system_kind == SystemKind.PROJECT_25:
            return Protocol.APCO25
        elif system_kind == SystemKind.MOTOROLA:
            if voice_kind.is_apco25:
                return Protocol.APCO25

        self._log.debug(
            f"System {system.system_id}: no protocol for type={system_kind.value!r} "
            f"flavor={flavor_kind.value!r} voice={voice_kind.value!r}"
        )
        return Protocol.UNKNOWN

    def decoder_type_for(self, system: System) -> DecoderType | None:
        """Decoder type for the system, or None when no decoder supports it."""
        return self._decoder_type(*self._kinds(system))

    @staticmethod
    def _decoder_type(
        system_kind: SystemKind, flavor_kind: FlavorKind, voice_kind: VoiceKind
    ) -> DecoderType | None:
        if system_kind == SystemKind.LTR:
            if flavor_kind == FlavorKind.NET:
                return DecoderType.LTR_NET
            if flavor_kind == FlavorKind.PASSPORT:
                return DecoderType.PASSPORT
            return DecoderType.LTR_STANDARD
        if system_kind == SystemKind.MPT1327:
            return DecoderType.MPT1327
        if system_kind == SystemKind.PROJECT_25:
            if flavor_kind == FlavorKind.PHASE_II:
                return DecoderType.P25_PHASE2
            if flavor_kind == FlavorKind.PHASE_I:
                return DecoderType.P25_PHASE1
        elif system_kind == SystemKind.MOTOROLA:
            if voice_kind.is_apco25:
                return DecoderType.P25_PHASE1

        return None

    def format_talkgroup(self, talkgroup: Talkgroup, system: System) -> str:
        """Format the talkgroup's decimal value for display on this system."""
        protocol = self.protocol_for(system)
        value = talkgroup.decimal_value
        policy = self._format_policy

        if protocol == Protocol.APCO25:
            return policy.format(APCO25Talkgroup.create(value))
        if protocol == Protocol.LTR:
            area, home, group = ltr_components(value)
            return policy.format(LTRTalkgroup.encode(encode_ltr(area, home, group)))
        if protocol == Protocol.MPT1327:
            prefix, ident = mpt1327_components(value)
            return policy.format(MPT1327Talkgroup.create_to(prefix, ident))
        if protocol == Protocol.PASSPORT:
            return policy.format(PassportTalkgroup.create(value))

        self._log.info(f"Unrecognized Protocol [{protocol.name}] - providing default talkgroup format")
        return str(value)

    def tags_for(self, talkgroup: Talkgroup) -> list[Tag]:
        """Resolve the talkgroup's tag references against the tag map.

        Talkgroup tags only carry the tag id, so each one is replaced by the
        catalog entry. An id missing from the catalog keeps the bare reference
        (empty description).
        """
        tags: list[Tag] = []
        if not talkgroup.tags:
            return tags

        for ref in talkgroup.tags:
            tag = self._tag_map.get(ref.tag_id)
            if tag is None:
                self._log.warning(f"Talkgroup {talkgroup.decimal_value}: tag id {ref.tag_id} not in catalog")
                tag = ref
            tags.append(tag)

        return tags

    def classify(self, system: System) -> SystemClassification:
        kinds = self._kinds(system)
        type_ = self.get_type(system)
        flavor = self.get_flavor(system)
        voice = self.get_voice(system)
        return SystemClassification(
            system_id=system.system_id,
            type_name=type_.name if type_ else None,
            flavor_name=flavor.name if flavor else None,
            voice_name=voice.name if voice else None,
            protocol=self._protocol(system, *kinds),
            decoder_type=self._decoder_type(*kinds),
        )
