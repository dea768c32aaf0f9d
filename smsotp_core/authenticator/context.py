"""
Authentication Context
======================
What the flow engine hands to the authenticator for one attempt.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Protocol


class SessionNotes(Protocol):
    """Key-value notes scoped to one authentication attempt."""

    def get_note(self, key: str) -> Optional[str]: ...

    def set_note(self, key: str, value: str) -> None: ...

    def remove_note(self, key: str) -> None: ...


class InMemorySessionNotes:
    """Dict-backed session notes."""

    def __init__(self, notes: Optional[Dict[str, str]] = None):
        self._notes: Dict[str, str] = dict(notes or {})

    def get_note(self, key: str) -> Optional[str]:
        return self._notes.get(key)

    def set_note(self, key: str, value: str) -> None:
        self._notes[key] = value

    def remove_note(self, key: str) -> None:
        self._notes.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._notes


class ExecutionRequirement(str, Enum):
    REQUIRED = "required"
    CONDITIONAL = "conditional"
    ALTERNATIVE = "alternative"

    @property
    def is_required(self) -> bool:
        return self is ExecutionRequirement.REQUIRED

    @property
    def is_optional(self) -> bool:
        return self in (ExecutionRequirement.CONDITIONAL, ExecutionRequirement.ALTERNATIVE)


@dataclass
class UserRecord:
    username: str
    attributes: Dict[str, List[str]] = field(default_factory=dict)

    def first_attribute(self, name: str) -> Optional[str]:
        values = self.attributes.get(name) or []
        return values[0] if values else None


@dataclass
class RealmInfo:
    name: str
    display_name: Optional[str] = None

    @property
    def label(self) -> str:
        """Human-readable realm name."""
        return self.display_name or self.name


@dataclass
class AuthenticationContext:
    """Inputs for one authenticate/verify call."""
    user: UserRecord
    config: Mapping[str, Any]
    notes: SessionNotes
    realm: RealmInfo
    requirement: ExecutionRequirement = ExecutionRequirement.REQUIRED
    locale: Optional[str] = None
    theme: str = "base"
