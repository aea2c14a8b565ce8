"""Protocol-specific talkgroup identifiers.

Each identifier wraps the protocol's native talkgroup value together with its
role, following SDRTrunk's identifier architecture.

Reference: https://github.com/DSheirer/sdrtrunk
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .protocol import Protocol

LTR_AREA_MASK = 0x2000
LTR_HOME_MASK = 0x1F00
LTR_GROUP_MASK = 0xFF

MPT1327_PREFIX_MASK = 0xFE000
MPT1327_IDENT_MASK = 0x1FFF


class IdentifierRole(Enum):
    """Role of an identifier in a call event."""
    FROM = "from"       # Source (transmitting unit)
    TO = "to"           # Destination (talkgroup or target unit)
    ANY = "any"         # No specific role


@dataclass(frozen=True)
class TalkgroupIdentifier:
    """Immutable talkgroup identifier with value, role and protocol.

    Examples:
        APCO25Talkgroup.create(1001)
        MPT1327Talkgroup.create_to(12, 3456)
    """
    value: int
    role: IdentifierRole = IdentifierRole.TO

    protocol: ClassVar[Protocol] = Protocol.UNKNOWN

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value}, {self.role.name})"


@dataclass(frozen=True, repr=False)
class APCO25Talkgroup(TalkgroupIdentifier):
    protocol: ClassVar[Protocol] = Protocol.APCO25

    @classmethod
    def create(cls, talkgroup: int) -> APCO25Talkgroup:
        return cls(talkgroup, IdentifierRole.TO)


@dataclass(frozen=True, repr=False)
class PassportTalkgroup(TalkgroupIdentifier):
    protocol: ClassVar[Protocol] = Protocol.PASSPORT

    @classmethod
    def create(cls, talkgroup: int) -> PassportTalkgroup:
        return cls(talkgroup, IdentifierRole.TO)


def encode_ltr(area: int, home: int, group: int) -> int:
    """Pack LTR area, home repeater and group into a single talkgroup code.

    Layout: area in bit 13, home channel in bits 8-12, group in bits 0-7.
    Each field is truncated to its width.
    """
    return ((area & 0x1) << 13) + ((home & 0x1F) << 8) + (group & 0xFF)


@dataclass(frozen=True, repr=False)
class LTRTalkgroup(TalkgroupIdentifier):
    """LTR talkgroup carried as a packed area/home/group code."""
    protocol: ClassVar[Protocol] = Protocol.LTR

    @classmethod
    def encode(cls, code: int) -> LTRTalkgroup:
        """Wrap a packed code (see encode_ltr) as an LTR talkgroup."""
        return cls(code, IdentifierRole.TO)

    @property
    def area(self) -> int:
        return (self.value & LTR_AREA_MASK) >> 13

    @property
    def home_channel(self) -> int:
        return (self.value & LTR_HOME_MASK) >> 8

    @property
    def talkgroup(self) -> int:
        return self.value & LTR_GROUP_MASK


@dataclass(frozen=True, repr=False)
class MPT1327Talkgroup(TalkgroupIdentifier):
    """MPT-1327 talkgroup carried as a packed prefix/ident value."""
    protocol: ClassVar[Protocol] = Protocol.MPT1327

    @classmethod
    def create_to(cls, prefix: int, ident: int) -> MPT1327Talkgroup:
        return cls((prefix << 13) + ident, IdentifierRole.TO)

    @property
    def prefix(self) -> int:
        return (self.value & MPT1327_PREFIX_MASK) >> 13

    @property
    def ident(self) -> int:
        return self.value & MPT1327_IDENT_MASK
