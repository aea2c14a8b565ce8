"""Protocol and decoder enumerations plus closed catalog-name variants.

RadioReference describes a trunked system with free-form Type, Flavor and Voice
names. Those names are translated once into the closed variants below so the
classifier can dispatch on enum members instead of raw strings.
"""

from __future__ import annotations

from enum import Enum


class Protocol(str, Enum):
    """Air-interface / trunking protocols known to the decoder stack."""
    APCO25 = "APCO-25"
    DMR = "DMR"
    FLEETSYNC = "Fleetsync"
    LTR = "LTR"
    LTR_NET = "LTR-Net"
    MDC1200 = "MDC-1200"
    MPT1327 = "MPT-1327"
    NBFM = "NBFM"
    PASSPORT = "Passport"
    TAIT1200 = "Tait 1200"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        return self.value


class DecoderType(str, Enum):
    """Concrete decoder implementations that can be assigned to a system."""
    AM = "am"
    NBFM = "nbfm"
    LTR_STANDARD = "ltr_standard"
    LTR_NET = "ltr_net"
    PASSPORT = "passport"
    MPT1327 = "mpt1327"
    P25_PHASE1 = "p25_phase1"
    P25_PHASE2 = "p25_phase2"
    FLEETSYNC2 = "fleetsync2"
    MDC1200 = "mdc1200"
    TAIT_1200 = "tait_1200"

    @property
    def label(self) -> str:
        return _DECODER_LABELS[self]


_DECODER_LABELS: dict[DecoderType, str] = {
    DecoderType.AM: "AM",
    DecoderType.NBFM: "NBFM",
    DecoderType.LTR_STANDARD: "LTR-Standard",
    DecoderType.LTR_NET: "LTR-Net",
    DecoderType.PASSPORT: "Passport",
    DecoderType.MPT1327: "MPT1327",
    DecoderType.P25_PHASE1: "P25 Phase 1",
    DecoderType.P25_PHASE2: "P25 Phase 2",
    DecoderType.FLEETSYNC2: "Fleetsync II",
    DecoderType.MDC1200: "MDC1200",
    DecoderType.TAIT_1200: "Tait 1200",
}


class SystemKind(str, Enum):
    """RadioReference system Type names."""
    LTR = "LTR"
    MPT1327 = "MPT-1327"
    PROJECT_25 = "Project 25"
    MOTOROLA = "Motorola"
    DMR = "DMR"
    NXDN = "NXDN"
    EDACS = "EDACS"
    TETRA = "TETRA"
    MIDLAND_CMS = "Midland CMS"
    OPENSKY = "OpenSky"
    IDEN = "iDEN"
    SMARTRUNK = "SmarTrunk"
    OTHER = "Other"
    UNRECOGNIZED = ""

    @classmethod
    def from_name(cls, name: str | None) -> SystemKind:
        if not name:
            return cls.UNRECOGNIZED
        try:
            return cls(name)
        except ValueError:
            return cls.UNRECOGNIZED


class FlavorKind(str, Enum):
    """RadioReference system Flavor names that affect classification."""
    STANDARD = "Standard"
    NET = "Net"
    PASSPORT = "Passport"
    PHASE_I = "Phase I"
    PHASE_II = "Phase II"
    OTHER = ""

    @classmethod
    def from_name(cls, name: str | None) -> FlavorKind:
        if not name:
            return cls.OTHER
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER


class VoiceKind(str, Enum):
    """RadioReference system Voice names that affect classification."""
    ANALOG_AND_APCO25 = "Analog and APCO-25 Common Air Interface"
    APCO25_EXCLUSIVE = "APCO-25 Common Air Interface Exclusive"
    OTHER = ""

    @classmethod
    def from_name(cls, name: str | None) -> VoiceKind:
        if not name:
            return cls.OTHER
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER

    @property
    def is_apco25(self) -> bool:
        return self in (VoiceKind.ANALOG_AND_APCO25, VoiceKind.APCO25_EXCLUSIVE)
