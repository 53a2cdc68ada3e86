"""
Team event type input resolution.

Turns a create or update request for a team event type into a validated
configuration: hosts or managed children, locations, metadata and the
generic event type fields. Every gate fails fast; nothing is written here.
"""

from typing import Any

from structlog.contextvars import bound_contextvars

from app.features.team_event_types.domain import (
    CreateTeamEventTypeInput,
    DuplicateSlug,
    EventTypeNotFound,
    HostAssignment,
    HostInput,
    InvariantViolation,
    MissingHostStrategy,
    ResolvedTeamEventType,
    SchedulingType,
    TeamEventTypeError,
    UpdateTeamEventTypeInput,
)
from app.features.team_event_types.domain.inputs import TEAM_ONLY_FIELDS
from app.features.team_event_types.repository import (
    TeamEventTypesRepository,
    TeamsRepository,
    UsersRepository,
)
from app.infrastructure.observability.logging import get_logger, log_validation_failure

from .conferencing_service import conferencing_service
from .generic_input_service import input_event_types_service
from .hosts import HostValidator, hosts_for_members, transform_hosts
from .interfaces import (
    ConferencingValidator,
    EventTypeStore,
    GenericEventTypeTransformer,
    MemberProfileStore,
    TeamStore,
)
from .locations import LocationResolver, default_locations, transform_locations
from .managed_children import ManagedChildPropagator
from .membership import TeamMembershipResolver

logger = get_logger(__name__)


class TeamEventTypeInputService:
    """
    Resolves team event type drafts.

    Collaborators are injected; the defaults read from Postgres.
    """

    def __init__(
        self,
        *,
        team_store: TeamStore = TeamsRepository,
        event_type_store: EventTypeStore = TeamEventTypesRepository,
        profile_store: MemberProfileStore = UsersRepository,
        conferencing: ConferencingValidator = conferencing_service,
        generic: GenericEventTypeTransformer = input_event_types_service,
    ):
        self.event_type_store = event_type_store
        self.generic = generic
        self.membership = TeamMembershipResolver(team_store)
        self.host_validator = HostValidator(self.membership)
        self.children = ManagedChildPropagator(self.membership, profile_store)
        self.locations = LocationResolver(conferencing)

    # =================================================================
    # CREATE
    # =================================================================

    async def transform_and_validate_create(
        self, user_id: int, team_id: int, draft: CreateTeamEventTypeInput
    ) -> ResolvedTeamEventType:
        with bound_contextvars(team_id=team_id, operation="create_team_event_type"):
            try:
                await self.locations.validate(team_id, draft.locations)
                await self.host_validator.validate(team_id, draft.hosts)
                await self.validate_slug(team_id, draft.slug)

                resolved = await self.transform_create(team_id, draft)
                await self._validate_resolved(user_id, resolved)

            except TeamEventTypeError as e:
                self._log_failure("create", e, slug=draft.slug)
                raise

            logger.info(
                "Team event type create resolved",
                slug=draft.slug,
                scheduling_type=draft.scheduling_type.value,
                hosts=len(resolved.hosts) if resolved.hosts is not None else None,
                children=len(resolved.children) if resolved.children is not None else None,
            )
            return resolved

    async def transform_create(
        self, team_id: int, draft: CreateTeamEventTypeInput
    ) -> ResolvedTeamEventType:
        has_hosts = bool(draft.hosts)
        has_assign_all = draft.assign_all_team_members is True
        if not has_hosts and not has_assign_all:
            raise MissingHostStrategy()

        fields = draft.model_dump(exclude=TEAM_ONLY_FIELDS)
        event_type = self.generic.transform_create(fields)

        children = await self.children.children_for_create(team_id, draft)

        is_managed = draft.scheduling_type == SchedulingType.MANAGED
        # Managed event types express hosts through their children only
        hosts = (
            None
            if is_managed
            else await self._resolve_hosts(
                team_id, draft.hosts, draft.assign_all_team_members, draft.scheduling_type
            )
        )

        metadata = event_type.pop("metadata", None) or {}
        if is_managed:
            metadata = {"managedEventConfig": {}, **metadata}

        return ResolvedTeamEventType(
            event_type=event_type,
            hosts=hosts,
            assign_all_team_members=draft.assign_all_team_members,
            children=children,
            locations=transform_locations(draft.locations or default_locations()),
            metadata=metadata,
        )

    # =================================================================
    # UPDATE
    # =================================================================

    async def transform_and_validate_update(
        self,
        user_id: int,
        event_type_id: int,
        team_id: int,
        draft: UpdateTeamEventTypeInput,
    ) -> ResolvedTeamEventType:
        with bound_contextvars(
            team_id=team_id, event_type_id=event_type_id, operation="update_team_event_type"
        ):
            try:
                await self.locations.validate(team_id, draft.locations)
                await self.host_validator.validate(team_id, draft.hosts)
                if draft.slug:
                    await self.validate_slug(team_id, draft.slug, event_type_id=event_type_id)

                resolved = await self.transform_update(event_type_id, team_id, draft)
                await self._validate_resolved(user_id, resolved, event_type_id=event_type_id)

            except TeamEventTypeError as e:
                self._log_failure("update", e, slug=draft.slug)
                raise

            logger.info(
                "Team event type update resolved",
                hosts=len(resolved.hosts) if resolved.hosts is not None else None,
                children=len(resolved.children) if resolved.children is not None else None,
            )
            return resolved

    async def transform_update(
        self, event_type_id: int, team_id: int, draft: UpdateTeamEventTypeInput
    ) -> ResolvedTeamEventType:
        existing = await self.event_type_store.get_by_id(team_id, event_type_id)
        if existing is None:
            raise EventTypeNotFound(team_id, event_type_id)

        fields = draft.model_dump(exclude=TEAM_ONLY_FIELDS, exclude_unset=True)
        event_type = self.generic.transform_update(fields, event_type_id)

        children = await self.children.children_for_update(team_id, existing, draft)
        hosts = (
            None
            if children is not None
            else await self._resolve_hosts(
                team_id, draft.hosts, draft.assign_all_team_members, existing.scheduling_type
            )
        )

        return ResolvedTeamEventType(
            event_type=event_type,
            hosts=hosts,
            assign_all_team_members=draft.assign_all_team_members,
            children=children,
            locations=transform_locations(draft.locations) if draft.locations is not None else None,
            metadata=event_type.pop("metadata", None),
        )

    # =================================================================
    # SHARED GATES
    # =================================================================

    async def validate_slug(self, team_id: int, slug: str, event_type_id: int | None = None) -> None:
        """
        Raises:
            DuplicateSlug: another event type of the team already uses the slug
        """
        existing = await self.event_type_store.find_by_slug(team_id, slug)
        if existing is not None and existing.id != event_type_id:
            raise DuplicateSlug(team_id, slug)

    async def _resolve_hosts(
        self,
        team_id: int,
        hosts: list[HostInput] | None,
        assign_all_team_members: bool | None,
        scheduling_type: SchedulingType | None,
    ) -> list[HostAssignment] | None:
        if assign_all_team_members:
            member_ids = await self.membership.all_member_ids(team_id)
            return hosts_for_members(member_ids, scheduling_type)
        return transform_hosts(hosts, scheduling_type)

    async def _validate_resolved(
        self, user_id: int, resolved: ResolvedTeamEventType, event_type_id: int | None = None
    ) -> None:
        self.generic.validate_cross_fields(
            seats_per_time_slot=resolved.get("seatsPerTimeSlot"),
            locations=resolved.locations,
            requires_confirmation=resolved.get("requiresConfirmation"),
            event_name=resolved.get("eventName"),
            booking_fields=resolved.get("bookingFields"),
            event_type_id=event_type_id,
        )

        destination_calendar = resolved.get("destinationCalendar")
        if destination_calendar:
            await self.generic.validate_destination_calendar(user_id, destination_calendar)

        if resolved.get("useEventTypeDestinationCalendarEmail"):
            await self.generic.validate_use_destination_calendar_email(user_id)

    @staticmethod
    def _log_failure(operation: str, error: TeamEventTypeError, **context: Any) -> None:
        if isinstance(error, InvariantViolation):
            logger.error(
                "Team event type resolution hit an invariant violation",
                operation=operation,
                error=str(error),
                error_code=error.error_code,
            )
            return
        log_validation_failure(operation, error, **context)


team_event_type_input_service = TeamEventTypeInputService()
