"""
Domain subpackage for team event types.
"""

from .errors import (
    BadInput,
    DuplicateSlug,
    EventTypeNotFound,
    InvalidDestinationCalendar,
    InvalidEventTypeConfiguration,
    InvalidHosts,
    InvalidLocations,
    InvalidPriorityLabel,
    InvariantViolation,
    MissingHostStrategy,
    NotFound,
    TeamEventTypeError,
    TeamNotFound,
)
from .inputs import (
    CreateTeamEventTypeInput,
    DestinationCalendarInput,
    HostInput,
    UpdateTeamEventTypeInput,
)
from .models import (
    ChildOwner,
    ChildOwnerStub,
    HostAssignment,
    HostPriority,
    MemberProfile,
    OwnedEventType,
    OwnershipChange,
    OwnershipKind,
    ResolvedTeamEventType,
    SchedulingType,
    Team,
    TeamEventTypeRecord,
)

__all__ = [
    "BadInput",
    "ChildOwner",
    "ChildOwnerStub",
    "CreateTeamEventTypeInput",
    "DestinationCalendarInput",
    "DuplicateSlug",
    "EventTypeNotFound",
    "HostAssignment",
    "HostInput",
    "HostPriority",
    "InvalidDestinationCalendar",
    "InvalidEventTypeConfiguration",
    "InvalidHosts",
    "InvalidLocations",
    "InvalidPriorityLabel",
    "InvariantViolation",
    "MemberProfile",
    "MissingHostStrategy",
    "NotFound",
    "OwnedEventType",
    "OwnershipChange",
    "OwnershipKind",
    "ResolvedTeamEventType",
    "SchedulingType",
    "Team",
    "TeamEventTypeError",
    "TeamEventTypeRecord",
    "TeamNotFound",
    "UpdateTeamEventTypeInput",
]
