import pytest

from app.features.team_event_types.domain import (
    MemberProfile,
    OwnedEventType,
    Team,
    TeamEventTypeRecord,
)
from app.features.team_event_types.services.conferencing_service import (
    ConferencingAppUnavailable,
)
from app.features.team_event_types.services.generic_input_service import InputEventTypesService
from app.features.team_event_types.services.input_service import TeamEventTypeInputService

TEAM_ID = 10
USER_ID = 1


class FakeTeamStore:
    def __init__(self):
        self.teams: dict[int, Team] = {}
        self.members: dict[int, list[int]] = {}
        self.managed_members: dict[int, list[int]] = {}

    def add_team(self, team_id: int, members: list[int], *, creator: int | None = None):
        self.teams[team_id] = Team(
            id=team_id, name=f"team-{team_id}", created_by_oauth_client_id="client" if creator else None
        )
        self.members[team_id] = list(members)
        self.managed_members[team_id] = [member for member in members if member != creator]

    async def get_by_id(self, team_id: int) -> Team | None:
        return self.teams.get(team_id)

    async def get_member_ids(self, team_id: int) -> list[int]:
        return self.members.get(team_id, [])

    async def get_managed_member_ids(self, team_id: int) -> list[int]:
        return self.managed_members.get(team_id, [])


class FakeEventTypeStore:
    def __init__(self):
        self.records: dict[int, TeamEventTypeRecord] = {}

    def add(self, record: TeamEventTypeRecord) -> TeamEventTypeRecord:
        self.records[record.id] = record
        return record

    async def find_by_slug(self, team_id: int, slug: str) -> TeamEventTypeRecord | None:
        for record in self.records.values():
            if record.team_id == team_id and record.slug == slug:
                return record
        return None

    async def get_by_id(self, team_id: int, event_type_id: int) -> TeamEventTypeRecord | None:
        record = self.records.get(event_type_id)
        if record and record.team_id == team_id:
            return record
        return None


class FakeProfileStore:
    def __init__(self):
        self.profiles: dict[int, MemberProfile] = {}
        self.requested: list[list[int]] = []

    def add(self, user_id: int, name: str | None = None, slugs: list[tuple[str, int | None]] = ()):
        self.profiles[user_id] = MemberProfile(
            id=user_id,
            name=name,
            email=f"user{user_id}@example.com",
            event_types=[OwnedEventType(slug=slug, parent_id=parent) for slug, parent in slugs],
        )

    async def find_by_ids_with_event_types(self, user_ids) -> list[MemberProfile]:
        ids = list(user_ids)
        self.requested.append(ids)
        return [self.profiles[user_id] for user_id in sorted(set(ids)) if user_id in self.profiles]


class FakeConferencing:
    def __init__(self):
        self.connected: set[str] = set()
        self.checked: list[str] = []

    async def check_integration_connected(self, team_id: int, integration: str) -> None:
        self.checked.append(integration)
        if integration not in self.connected:
            raise ConferencingAppUnavailable(team_id, integration, "is not connected")


class FakeCalendarStore:
    def __init__(self):
        self.calendars: set[tuple[int, str, str]] = set()
        self.destination: dict[int, dict] = {}

    async def has_connected_calendar(self, user_id: int, integration: str, external_id: str) -> bool:
        return (user_id, integration, external_id) in self.calendars

    async def get_user_destination_calendar(self, user_id: int) -> dict | None:
        return self.destination.get(user_id)


@pytest.fixture
def team_store():
    store = FakeTeamStore()
    store.add_team(TEAM_ID, [1, 2, 3])
    return store


@pytest.fixture
def event_type_store():
    return FakeEventTypeStore()


@pytest.fixture
def profile_store():
    store = FakeProfileStore()
    for user_id in (1, 2, 3, 5, 7, 9):
        store.add(user_id, name=f"User {user_id}")
    return store


@pytest.fixture
def conferencing():
    return FakeConferencing()


@pytest.fixture
def calendar_store():
    return FakeCalendarStore()


@pytest.fixture
def service(team_store, event_type_store, profile_store, conferencing, calendar_store):
    return TeamEventTypeInputService(
        team_store=team_store,
        event_type_store=event_type_store,
        profile_store=profile_store,
        conferencing=conferencing,
        generic=InputEventTypesService(calendar_store=calendar_store),
    )
