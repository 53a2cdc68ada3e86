"""
Errors raised while resolving team event type drafts.

Every error carries a stable ``error_code``, the HTTP status a transport
layer should answer with, and the context needed to report it verbatim.
"""

from typing import Any


class TeamEventTypeError(Exception):
    """Base exception for team event type resolution."""

    status_code = 400
    default_code = "team_event_type_error"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_code, "message": self.message, **self.context}


# =================================================================
# BAD INPUT (client-correctable)
# =================================================================


class BadInput(TeamEventTypeError):
    status_code = 400
    default_code = "bad_input"


class MissingHostStrategy(BadInput):
    default_code = "missing_host_strategy"

    def __init__(self):
        super().__init__("Either hosts must be provided or assignAllTeamMembers must be true")


class DuplicateSlug(BadInput):
    default_code = "duplicate_slug"

    def __init__(self, team_id: int, slug: str):
        super().__init__(
            f"Team event type with slug '{slug}' already exists in team {team_id}",
            context={"team_id": team_id, "slug": slug},
        )
        self.team_id = team_id
        self.slug = slug


class InvalidLocations(BadInput):
    default_code = "invalid_locations"

    def __init__(self, team_id: int, failures: dict[str, str]):
        integrations = ", ".join(failures)
        super().__init__(
            f"Conferencing integrations not available for team {team_id}: {integrations}",
            context={"team_id": team_id, "integrations": failures},
        )
        self.team_id = team_id
        self.failures = failures


class InvalidEventTypeConfiguration(BadInput):
    default_code = "invalid_event_type_configuration"

    def __init__(self, message: str, field: str):
        super().__init__(message, context={"field": field})
        self.field = field


class InvalidDestinationCalendar(BadInput):
    default_code = "invalid_destination_calendar"


# =================================================================
# NOT FOUND
# =================================================================


class NotFound(TeamEventTypeError):
    status_code = 404
    default_code = "not_found"


class EventTypeNotFound(NotFound):
    default_code = "event_type_not_found"

    def __init__(self, team_id: int, event_type_id: int):
        super().__init__(
            f"Event type {event_type_id} not found in team {team_id}",
            context={"team_id": team_id, "event_type_id": event_type_id},
        )


class TeamNotFound(NotFound):
    default_code = "team_not_found"

    def __init__(self, team_id: int):
        super().__init__(f"Team {team_id} not found", context={"team_id": team_id})


# =================================================================
# HOSTS
# =================================================================


class InvalidHosts(TeamEventTypeError):
    """Proposed hosts that are not members of the team."""

    status_code = 404
    default_code = "invalid_hosts"

    def __init__(self, team_id: int, invalid_ids: list[int]):
        ids = ", ".join(str(member_id) for member_id in invalid_ids)
        super().__init__(
            f"Invalid hosts: {ids} are not members of team with id {team_id}.",
            context={"team_id": team_id, "invalid_ids": list(invalid_ids)},
        )
        self.team_id = team_id
        self.invalid_ids = list(invalid_ids)


# =================================================================
# INVARIANT VIOLATIONS (programmer errors)
# =================================================================


class InvariantViolation(TeamEventTypeError):
    status_code = 500
    default_code = "invariant_violation"


class InvalidPriorityLabel(InvariantViolation):
    default_code = "invalid_priority_label"

    def __init__(self, label: object):
        super().__init__(f"Invalid HostPriority label: {label!r}", context={"label": str(label)})
        self.label = label
