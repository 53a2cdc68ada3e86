import pytest

from app.features.team_event_types.domain import (
    CreateTeamEventTypeInput,
    HostInput,
    OwnershipChange,
    OwnershipKind,
    SchedulingType,
    TeamEventTypeRecord,
    UpdateTeamEventTypeInput,
)
from app.features.team_event_types.services.managed_children import ManagedChildPropagator
from app.features.team_event_types.services.membership import TeamMembershipResolver

TEAM_ID = 10


def _create_draft(**overrides) -> CreateTeamEventTypeInput:
    payload = {
        "title": "Onboarding",
        "slug": "onboarding",
        "length_in_minutes": 30,
        "scheduling_type": SchedulingType.MANAGED,
    }
    payload.update(overrides)
    return CreateTeamEventTypeInput(**payload)


def _managed_record(child_owner_ids) -> TeamEventTypeRecord:
    return TeamEventTypeRecord(
        id=50,
        team_id=TEAM_ID,
        slug="onboarding",
        scheduling_type=SchedulingType.MANAGED,
        child_owner_ids=list(child_owner_ids),
    )


@pytest.fixture
def propagator(team_store, profile_store):
    return ManagedChildPropagator(TeamMembershipResolver(team_store), profile_store)


def _owner_ids(children):
    return [child.owner.id for child in children]


@pytest.mark.asyncio
async def test_create_uses_explicit_hosts(propagator):
    draft = _create_draft(hosts=[HostInput(user_id=2), HostInput(user_id=1)])

    children = await propagator.children_for_create(TEAM_ID, draft)

    assert _owner_ids(children) == [2, 1]
    assert all(child.hidden is False for child in children)


@pytest.mark.asyncio
async def test_create_assign_all_uses_team_members(propagator):
    draft = _create_draft(assign_all_team_members=True, hosts=[HostInput(user_id=1)])

    children = await propagator.children_for_create(TEAM_ID, draft)

    assert _owner_ids(children) == [1, 2, 3]


@pytest.mark.asyncio
async def test_create_non_managed_has_no_children(propagator):
    draft = _create_draft(
        scheduling_type=SchedulingType.COLLECTIVE, hosts=[HostInput(user_id=1)]
    )

    assert await propagator.children_for_create(TEAM_ID, draft) is None


@pytest.mark.asyncio
async def test_update_without_hosts_keeps_persisted_owners(propagator):
    existing = _managed_record([3, 9])

    children = await propagator.children_for_update(
        TEAM_ID, existing, UpdateTeamEventTypeInput(title="Renamed")
    )

    assert _owner_ids(children) == [3, 9]


@pytest.mark.asyncio
async def test_update_drops_children_without_owner(propagator):
    existing = _managed_record([3, None, 9])

    children = await propagator.children_for_update(TEAM_ID, existing, UpdateTeamEventTypeInput())

    assert _owner_ids(children) == [3, 9]


@pytest.mark.asyncio
async def test_update_assign_all_overrides_persisted_owners(propagator):
    existing = _managed_record([3, 9])

    children = await propagator.children_for_update(
        TEAM_ID, existing, UpdateTeamEventTypeInput(assign_all_team_members=True)
    )

    assert _owner_ids(children) == [1, 2, 3]


@pytest.mark.asyncio
async def test_update_explicit_hosts_replace_owners(propagator):
    existing = _managed_record([3, 9])

    children = await propagator.children_for_update(
        TEAM_ID, existing, UpdateTeamEventTypeInput(hosts=[HostInput(user_id=1)])
    )

    assert _owner_ids(children) == [1]


@pytest.mark.asyncio
async def test_update_empty_hosts_clears_owners(propagator, profile_store):
    existing = _managed_record([3, 9])

    children = await propagator.children_for_update(
        TEAM_ID, existing, UpdateTeamEventTypeInput(hosts=[])
    )

    assert children == []
    assert profile_store.requested == []


@pytest.mark.asyncio
async def test_update_non_managed_returns_none(propagator):
    existing = TeamEventTypeRecord(
        id=51, team_id=TEAM_ID, slug="sync", scheduling_type=SchedulingType.ROUND_ROBIN
    )

    children = await propagator.children_for_update(
        TEAM_ID, existing, UpdateTeamEventTypeInput(hosts=[HostInput(user_id=1)])
    )

    assert children is None


@pytest.mark.asyncio
async def test_owner_slugs_exclude_managed_children(propagator, profile_store):
    profile_store.add(2, name=None, slugs=[("30min", None), ("onboarding", 50), ("demo", None)])
    draft = _create_draft(hosts=[HostInput(user_id=2)])

    [child] = await propagator.children_for_create(TEAM_ID, draft)

    assert child.owner.event_type_slugs == ["30min", "demo"]
    assert child.owner.name == "user2@example.com"
    assert child.to_payload()["owner"]["eventTypeSlugs"] == ["30min", "demo"]


@pytest.mark.asyncio
async def test_profiles_are_loaded_in_one_call(propagator, profile_store):
    draft = _create_draft(assign_all_team_members=True)

    await propagator.children_for_create(TEAM_ID, draft)

    assert profile_store.requested == [[1, 2, 3]]


def test_ownership_change_states():
    assert OwnershipChange.from_hosts(None).is_unset
    assert OwnershipChange.from_hosts([]).kind == OwnershipKind.CLEAR

    change = OwnershipChange.from_hosts([HostInput(user_id=4), HostInput(user_id=6)])
    assert change.kind == OwnershipKind.SET
    assert change.member_ids == (4, 6)
