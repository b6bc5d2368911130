"""Translation models for the i18n system.

Defines the data structures passed between the store, the key resolvers
and the formatter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Union

# A table entry is either a leaf string or a nested node of further entries.
TranslationEntry = Union[str, Mapping[str, "TranslationEntry"]]
TranslationTable = Dict[str, TranslationEntry]


class KeyMode(str, Enum):
    """Lookup semantics used when resolving a key against a table.

    FLAT matches the key literally against the table's keys. NAMESPACED
    splits the key on a delimiter and descends into nested tables.
    """

    FLAT = "flat"
    NAMESPACED = "namespaced"


class ResolutionStatus(str, Enum):
    """Which stage of the fallback chain produced a template."""

    RESOLVED = "resolved"
    FALLBACK_USED = "fallback_used"
    KEY_ECHOED = "key_echoed"


@dataclass(frozen=True)
class Lookup:
    """Outcome of looking a key up in a single table.

    Attributes:
        found: True when the key addressed a non-empty string leaf.
        value: The leaf string, or None on a miss.
    """

    found: bool
    value: Optional[str] = None

    @classmethod
    def hit(cls, value: str) -> "Lookup":
        return cls(found=True, value=value)

    @classmethod
    def miss(cls) -> "Lookup":
        return cls(found=False)


@dataclass(frozen=True)
class Resolution:
    """Raw template produced by the key resolver, before formatting.

    Attributes:
        key: The requested key.
        template: Template string (the key itself when echoed).
        status: Fallback stage that produced the template.
        language: Code of the table the template came from, None when echoed.
    """

    key: str
    template: str
    status: ResolutionStatus
    language: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status != ResolutionStatus.KEY_ECHOED


@dataclass(frozen=True)
class Translation:
    """Formatted translation together with how it was resolved."""

    text: str
    status: ResolutionStatus
    language: Optional[str] = None

    def __str__(self) -> str:
        return self.text
