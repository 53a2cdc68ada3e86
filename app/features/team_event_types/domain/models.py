"""
Domain models for team event type resolution.

Plain dataclasses shared by repositories and services. The resolved event
type is handed to the persistence layer as-is; nothing here writes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchedulingType(str, Enum):
    ROUND_ROBIN = "ROUND_ROBIN"
    COLLECTIVE = "COLLECTIVE"
    MANAGED = "MANAGED"


class HostPriority(str, Enum):
    """Symbolic host priority, ordered lowest to highest."""

    LOWEST = "lowest"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    HIGHEST = "highest"


@dataclass(slots=True, frozen=True)
class HostAssignment:
    """A team member attached to an event type as a host."""

    member_id: int
    is_fixed: bool
    priority: int  # 0 (lowest) .. 4 (highest)

    def to_payload(self) -> dict[str, Any]:
        return {"userId": self.member_id, "isFixed": self.is_fixed, "priority": self.priority}


@dataclass(slots=True)
class ChildOwner:
    id: int
    name: str
    email: str
    # Slugs of the member's own (non managed-child) event types
    event_type_slugs: list[str]


@dataclass(slots=True)
class ChildOwnerStub:
    """One per-member instantiation of a managed event type."""

    owner: ChildOwner
    hidden: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {
            "hidden": self.hidden,
            "owner": {
                "id": self.owner.id,
                "name": self.owner.name,
                "email": self.owner.email,
                "eventTypeSlugs": list(self.owner.event_type_slugs),
            },
        }


@dataclass(slots=True)
class Team:
    id: int
    name: str | None = None
    created_by_oauth_client_id: str | None = None

    @property
    def is_platform_created(self) -> bool:
        return bool(self.created_by_oauth_client_id)


@dataclass(slots=True)
class TeamEventTypeRecord:
    """Persisted team event type, as much of it as resolution needs."""

    id: int
    team_id: int
    slug: str
    scheduling_type: SchedulingType | None
    child_owner_ids: list[int | None] = field(default_factory=list)

    @property
    def is_managed(self) -> bool:
        return self.scheduling_type == SchedulingType.MANAGED


@dataclass(slots=True)
class OwnedEventType:
    slug: str
    parent_id: int | None = None


@dataclass(slots=True)
class MemberProfile:
    id: int
    name: str | None
    email: str
    event_types: list[OwnedEventType] = field(default_factory=list)


class OwnershipKind(str, Enum):
    UNSET = "unset"
    CLEAR = "clear"
    SET = "set"


@dataclass(slots=True, frozen=True)
class OwnershipChange:
    """
    What a request says about managed event type ownership.

    UNSET leaves the persisted owners untouched, CLEAR removes every owner,
    SET replaces them with ``member_ids``.
    """

    kind: OwnershipKind
    member_ids: tuple[int, ...] = ()

    @classmethod
    def from_hosts(cls, hosts: list | None) -> "OwnershipChange":
        if hosts is None:
            return cls(OwnershipKind.UNSET)
        if not hosts:
            return cls(OwnershipKind.CLEAR)
        return cls(OwnershipKind.SET, tuple(host.user_id for host in hosts))

    @property
    def is_unset(self) -> bool:
        return self.kind == OwnershipKind.UNSET


@dataclass(slots=True)
class ResolvedTeamEventType:
    """
    Fully resolved team event type configuration.

    ``children`` is None when the event type is not managed (an empty list
    would remove every existing owner). ``hosts`` is None for managed event
    types and for updates that leave hosts untouched.
    """

    event_type: dict[str, Any]
    hosts: list[HostAssignment] | None
    assign_all_team_members: bool | None
    children: list[ChildOwnerStub] | None
    locations: list[dict[str, Any]] | None
    metadata: dict[str, Any] | None = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.event_type.get(key, default)

    def to_payload(self) -> dict[str, Any]:
        payload = dict(self.event_type)
        payload["hosts"] = (
            [host.to_payload() for host in self.hosts] if self.hosts is not None else None
        )
        payload["assignAllTeamMembers"] = self.assign_all_team_members
        payload["children"] = (
            [child.to_payload() for child in self.children] if self.children is not None else None
        )
        payload["locations"] = self.locations
        if self.metadata is not None:
            payload["metadata"] = self.metadata
        return payload
