"""
Collaborator contracts used by team event type resolution.

The Postgres repositories satisfy these with classmethods; tests pass
in-memory fakes.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from app.features.team_event_types.domain import (
    DestinationCalendarInput,
    MemberProfile,
    Team,
    TeamEventTypeRecord,
)


class TeamStore(Protocol):
    async def get_by_id(self, team_id: int) -> Team | None: ...

    async def get_member_ids(self, team_id: int) -> list[int]: ...

    async def get_managed_member_ids(self, team_id: int) -> list[int]: ...


class EventTypeStore(Protocol):
    async def find_by_slug(self, team_id: int, slug: str) -> TeamEventTypeRecord | None: ...

    async def get_by_id(self, team_id: int, event_type_id: int) -> TeamEventTypeRecord | None: ...


class MemberProfileStore(Protocol):
    async def find_by_ids_with_event_types(self, user_ids: Iterable[int]) -> list[MemberProfile]: ...


class ConferencingValidator(Protocol):
    async def check_integration_connected(self, team_id: int, integration: str) -> None: ...


class DestinationCalendarStore(Protocol):
    async def has_connected_calendar(
        self, user_id: int, integration: str, external_id: str
    ) -> bool: ...

    async def get_user_destination_calendar(self, user_id: int) -> dict | None: ...


class GenericEventTypeTransformer(Protocol):
    """Shared (non team-specific) event type field handling."""

    def transform_create(self, fields: dict[str, Any]) -> dict[str, Any]: ...

    def transform_update(self, fields: dict[str, Any], event_type_id: int) -> dict[str, Any]: ...

    def validate_cross_fields(
        self,
        *,
        seats_per_time_slot: int | None,
        locations: list[dict[str, Any]] | None,
        requires_confirmation: bool | None,
        event_name: str | None,
        booking_fields: list[dict[str, Any]] | None = None,
        event_type_id: int | None = None,
    ) -> None: ...

    async def validate_destination_calendar(
        self, user_id: int, destination_calendar: DestinationCalendarInput | dict
    ) -> None: ...

    async def validate_use_destination_calendar_email(self, user_id: int) -> None: ...
