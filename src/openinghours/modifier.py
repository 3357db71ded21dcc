"""
Rule modifier node: the open/closed/off/unknown state of a rule plus an
optional free-text comment.

Example (rendered):
* `closed`
* `"by appointment"`
* `open "see notice"`
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from i18n import tr
from openinghours.element import Element


class InvalidModifierError(ValueError):
    """Raised when a token is not one of the canonical modifier spellings."""

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(message if message is not None else tr("invalid_modifier", token))


class ModifierKind(Enum):
    """Rule modifier keywords, in declaration order."""

    OPEN = "open"
    CLOSED = "closed"
    OFF = "off"
    UNKNOWN = "unknown"

    @classmethod
    def from_text(cls, token: str) -> "ModifierKind":
        """Parse a modifier keyword. Matching is exact and case-sensitive."""
        for kind in cls:
            if kind.value == token:
                return kind
        raise InvalidModifierError(token)

    @classmethod
    def all_spellings(cls) -> List[str]:
        return [kind.value for kind in cls]

    def to_text(self) -> str:
        return self.value

    def __str__(self):
        return self.value


@dataclass(init=False)
class RuleModifier(Element):
    """
    Modifier attached to a rule.

    Both fields are optional and independent; None means the source text
    did not specify it. An empty comment is still a comment.
    """

    kind: Optional[ModifierKind]
    comment: Optional[str]

    def __init__(self, kind: Optional[ModifierKind] = None, comment: Optional[str] = None):
        self.kind = None
        self.comment = None
        self.set_kind(kind)
        self.set_comment(comment)

    @classmethod
    def from_other(cls, other: "RuleModifier") -> "RuleModifier":
        """Construct a new RuleModifier with the same contents."""
        # str and enum members are immutable, so field values can be shared
        return cls(kind=other.kind, comment=other.comment)

    def get_kind(self) -> Optional[ModifierKind]:
        return self.kind

    def get_comment(self) -> Optional[str]:
        return self.comment

    def set_kind(self, kind: Union[ModifierKind, str, None]) -> None:
        """Set the modifier.

        Accepts a ModifierKind or its spelling. None or an empty string unset
        the modifier. An unknown spelling raises InvalidModifierError and
        leaves the current value in place.
        """
        if kind is None or isinstance(kind, ModifierKind):
            self.kind = kind
        elif isinstance(kind, str):
            self.kind = ModifierKind.from_text(kind) if kind else None
        else:
            raise TypeError(f"modifier must be ModifierKind, str or None, not {type(kind).__name__}")

    def set_comment(self, comment: Optional[str]) -> None:
        self.comment = comment

    def render(self) -> str:
        parts = []
        if self.kind is not None:
            parts.append(self.kind.value)
        if self.comment is not None:
            parts.append('"' + self.comment + '"')
        return " ".join(parts)

    def __str__(self):
        return self.render()

    def __hash__(self):
        return hash((self.kind, self.comment))

    def copy(self) -> "RuleModifier":
        return RuleModifier.from_other(self)
