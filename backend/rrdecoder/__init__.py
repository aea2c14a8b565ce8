"""Classify RadioReference systems and format their talkgroups."""

from .catalog import (
    Catalog,
    CatalogError,
    Flavor,
    System,
    SystemType,
    Tag,
    Talkgroup,
    Voice,
    load_catalog,
)
from .classifier import ProtocolClassifier, SystemClassification
from .formatting import IntegerFormat, TalkgroupFormatPolicy
from .protocol import DecoderType, Protocol

__all__ = [
    "Catalog",
    "CatalogError",
    "DecoderType",
    "Flavor",
    "IntegerFormat",
    "Protocol",
    "ProtocolClassifier",
    "System",
    "SystemClassification",
    "SystemType",
    "Tag",
    "Talkgroup",
    "TalkgroupFormatPolicy",
    "Voice",
    "__version__",
    "load_catalog",
]

__version__ = "0.1.0"
