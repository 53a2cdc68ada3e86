"""
Children of managed event types.

A managed event type is instantiated once per owning team member. The
owners are recomputed from scratch on every create and update.
"""

from app.features.team_event_types.domain import (
    ChildOwner,
    ChildOwnerStub,
    CreateTeamEventTypeInput,
    MemberProfile,
    OwnershipChange,
    SchedulingType,
    TeamEventTypeRecord,
    UpdateTeamEventTypeInput,
)
from app.infrastructure.observability.logging import get_logger

from .interfaces import MemberProfileStore
from .membership import TeamMembershipResolver

logger = get_logger(__name__)


class ManagedChildPropagator:
    def __init__(self, membership: TeamMembershipResolver, profile_store: MemberProfileStore):
        self.membership = membership
        self.profile_store = profile_store

    async def children_for_create(
        self, team_id: int, draft: CreateTeamEventTypeInput
    ) -> list[ChildOwnerStub] | None:
        """Children for a new event type, or None when it is not managed."""
        if draft.scheduling_type != SchedulingType.MANAGED:
            return None

        if draft.assign_all_team_members:
            owner_ids = await self.membership.all_member_ids(team_id)
        else:
            owner_ids = [host.user_id for host in draft.hosts or []]

        return await self._build_children(owner_ids)

    async def children_for_update(
        self,
        team_id: int,
        existing: TeamEventTypeRecord,
        draft: UpdateTeamEventTypeInput,
    ) -> list[ChildOwnerStub] | None:
        """
        Children for an updated event type, or None when it is not managed.

        Owners come from "assign all", then from explicitly supplied hosts,
        and otherwise stay the owners of the persisted children.
        """
        if not existing.is_managed:
            return None

        owner_ids = await self._update_owner_ids(team_id, existing, draft)
        return await self._build_children(owner_ids)

    async def _update_owner_ids(
        self,
        team_id: int,
        existing: TeamEventTypeRecord,
        draft: UpdateTeamEventTypeInput,
    ) -> list[int]:
        if draft.assign_all_team_members:
            return await self.membership.all_member_ids(team_id)

        change = OwnershipChange.from_hosts(draft.hosts)
        if change.is_unset:
            # hosts not part of this request: keep the current owners
            return [owner_id for owner_id in existing.child_owner_ids if owner_id]

        return list(change.member_ids)

    async def _build_children(self, owner_ids: list[int]) -> list[ChildOwnerStub]:
        if not owner_ids:
            return []

        profiles = await self.profile_store.find_by_ids_with_event_types(owner_ids)
        by_id = {profile.id: profile for profile in profiles}

        children = []
        seen: set[int] = set()
        for owner_id in owner_ids:
            profile = by_id.get(owner_id)
            if profile is None or owner_id in seen:
                continue
            seen.add(owner_id)
            children.append(ChildOwnerStub(owner=to_child_owner(profile), hidden=False))

        logger.debug(
            "Built managed event type children",
            requested_owners=len(owner_ids),
            children=len(children),
        )
        return children


def to_child_owner(profile: MemberProfile) -> ChildOwner:
    # Slugs of managed children are left out so the orphan cleanup that runs
    # on save does not delete the member's own event type with the same slug.
    return ChildOwner(
        id=profile.id,
        name=profile.name or profile.email,
        email=profile.email,
        event_type_slugs=[
            event_type.slug for event_type in profile.event_types if not event_type.parent_id
        ],
    )
