"""Talkgroup display formatting driven by user preferences.

A TalkgroupFormatPolicy renders each protocol's talkgroup identifier in the
integer format the user selected for that protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .identifiers import (
    APCO25Talkgroup,
    LTRTalkgroup,
    MPT1327Talkgroup,
    PassportTalkgroup,
    TalkgroupIdentifier,
)
from .protocol import Protocol


class IntegerFormat(str, Enum):
    """Display radix / grouping for talkgroup values."""
    DECIMAL = "decimal"
    FORMATTED = "formatted"
    HEXADECIMAL = "hexadecimal"

    @classmethod
    def parse(cls, value: str | IntegerFormat, default: IntegerFormat) -> IntegerFormat:
        if isinstance(value, IntegerFormat):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default


DECIMAL_WIDTH = {
    Protocol.APCO25: 5,
    Protocol.LTR: 5,
    Protocol.MPT1327: 6,
    Protocol.PASSPORT: 5,
}

HEX_WIDTH = 4


@dataclass(frozen=True)
class TalkgroupFormatPolicy:
    """Per-protocol talkgroup display preferences.

    Attributes:
        apco25: Integer format for APCO-25 talkgroups
        ltr: Integer format for LTR talkgroups
        mpt1327: Integer format for MPT-1327 talkgroups
        passport: Integer format for Passport talkgroups
        fixed_width: Zero-pad decimal and hexadecimal values to a fixed width
    """
    apco25: IntegerFormat = IntegerFormat.DECIMAL
    ltr: IntegerFormat = IntegerFormat.FORMATTED
    mpt1327: IntegerFormat = IntegerFormat.FORMATTED
    passport: IntegerFormat = IntegerFormat.DECIMAL
    fixed_width: bool = False

    def format(self, identifier: TalkgroupIdentifier) -> str:
        """Render a talkgroup identifier as a display string."""
        if isinstance(identifier, LTRTalkgroup):
            return self.format_ltr(identifier)
        if isinstance(identifier, MPT1327Talkgroup):
            return self.format_mpt1327(identifier)
        if isinstance(identifier, APCO25Talkgroup):
            return self._format_integer(identifier.value, self.apco25, Protocol.APCO25)
        if isinstance(identifier, PassportTalkgroup):
            return self._format_integer(identifier.value, self.passport, Protocol.PASSPORT)
        return str(identifier.value)

    def format_ltr(self, identifier: LTRTalkgroup) -> str:
        if self.ltr == IntegerFormat.FORMATTED:
            return f"{identifier.area}-{identifier.home_channel:02d}-{identifier.talkgroup:03d}"
        return self._format_integer(identifier.value, self.ltr, Protocol.LTR)

    def format_mpt1327(self, identifier: MPT1327Talkgroup) -> str:
        if self.mpt1327 == IntegerFormat.FORMATTED:
            return f"{identifier.prefix:03d}-{identifier.ident:04d}"
        return self._format_integer(identifier.value, self.mpt1327, Protocol.MPT1327)

    def _format_integer(self, value: int, fmt: IntegerFormat, protocol: Protocol) -> str:
        if fmt == IntegerFormat.HEXADECIMAL:
            if self.fixed_width:
                return f"{value:0{HEX_WIDTH}X}"
            return f"{value:X}"
        # FORMATTED has no grouping for plain integer identifiers
        if self.fixed_width:
            return f"{value:0{DECIMAL_WIDTH[protocol]}d}"
        return str(value)
