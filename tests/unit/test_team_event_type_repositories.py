import pytest

from app.features.team_event_types.domain import SchedulingType
from app.features.team_event_types.repository import (
    DestinationCalendarsRepository,
    TeamEventTypesRepository,
    TeamsRepository,
    UsersRepository,
)


@pytest.mark.asyncio
async def test_team_row_maps_platform_creator(monkeypatch):
    async def fake_fetch_one(_query, params):
        assert params == (10,)
        return {"id": 10, "name": "Platform", "created_by_oauth_client_id": "client-1"}

    monkeypatch.setattr(
        "app.features.team_event_types.repository.teams_repository.fetch_one", fake_fetch_one
    )

    team = await TeamsRepository.get_by_id(10)

    assert team.is_platform_created is True


@pytest.mark.asyncio
async def test_missing_team_returns_none(monkeypatch):
    async def fake_fetch_one(_query, _params):
        return None

    monkeypatch.setattr(
        "app.features.team_event_types.repository.teams_repository.fetch_one", fake_fetch_one
    )

    assert await TeamsRepository.get_by_id(10) is None


@pytest.mark.asyncio
async def test_member_ids_queries(monkeypatch):
    queries = []

    async def fake_fetch_all(query, _params):
        queries.append(query)
        return [{"user_id": 4}, {"user_id": 6}]

    monkeypatch.setattr(
        "app.features.team_event_types.repository.teams_repository.fetch_all", fake_fetch_all
    )

    assert await TeamsRepository.get_member_ids(10) == [4, 6]
    assert await TeamsRepository.get_managed_member_ids(10) == [4, 6]
    assert "isPlatformManaged" not in queries[0]
    assert "isPlatformManaged" in queries[1]


@pytest.mark.asyncio
async def test_event_type_row_maps_children(monkeypatch):
    async def fake_fetch_one(_query, params):
        assert params == (10, 70)
        return {
            "id": 70,
            "team_id": 10,
            "slug": "onboarding",
            "scheduling_type": "MANAGED",
            "child_owner_ids": [3, None, 9],
        }

    monkeypatch.setattr(
        "app.features.team_event_types.repository.event_types_repository.fetch_one",
        fake_fetch_one,
    )

    record = await TeamEventTypesRepository.get_by_id(10, 70)

    assert record.scheduling_type == SchedulingType.MANAGED
    assert record.is_managed
    assert record.child_owner_ids == [3, None, 9]


@pytest.mark.asyncio
async def test_event_type_without_scheduling_type(monkeypatch):
    async def fake_fetch_one(_query, _params):
        return {"id": 5, "team_id": 10, "slug": "intro", "scheduling_type": None}

    monkeypatch.setattr(
        "app.features.team_event_types.repository.event_types_repository.fetch_one",
        fake_fetch_one,
    )

    record = await TeamEventTypesRepository.find_by_slug(10, "intro")

    assert record.scheduling_type is None
    assert record.child_owner_ids == []


@pytest.mark.asyncio
async def test_users_loaded_with_owned_event_types(monkeypatch):
    results = iter(
        [
            [{"id": 3, "name": None, "email": "three@example.com"}, {"id": 9, "name": "Nine", "email": "nine@example.com"}],
            [
                {"user_id": 3, "slug": "30min", "parent_id": None},
                {"user_id": 3, "slug": "onboarding", "parent_id": 70},
            ],
        ]
    )

    async def fake_fetch_all(_query, params):
        assert params == ([3, 9],)
        return next(results)

    monkeypatch.setattr(
        "app.features.team_event_types.repository.users_repository.fetch_all", fake_fetch_all
    )

    profiles = await UsersRepository.find_by_ids_with_event_types([3, 9])

    assert [profile.id for profile in profiles] == [3, 9]
    assert [event_type.slug for event_type in profiles[0].event_types] == ["30min", "onboarding"]
    assert profiles[0].event_types[1].parent_id == 70
    assert profiles[1].event_types == []


@pytest.mark.asyncio
async def test_users_lookup_skips_empty_ids(monkeypatch):
    async def fake_fetch_all(_query, _params):
        raise AssertionError("no query expected")

    monkeypatch.setattr(
        "app.features.team_event_types.repository.users_repository.fetch_all", fake_fetch_all
    )

    assert await UsersRepository.find_by_ids_with_event_types([]) == []


@pytest.mark.asyncio
async def test_connected_calendar_check(monkeypatch):
    async def fake_fetch_val(_query, params):
        return params == (1, "google_calendar", "me@example.com")

    monkeypatch.setattr(
        "app.features.team_event_types.repository.calendars_repository.fetch_val", fake_fetch_val
    )

    assert await DestinationCalendarsRepository.has_connected_calendar(
        1, "google_calendar", "me@example.com"
    )
    assert not await DestinationCalendarsRepository.has_connected_calendar(
        2, "google_calendar", "me@example.com"
    )
