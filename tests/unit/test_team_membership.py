import pytest

from app.features.team_event_types.domain import HostInput, InvalidHosts, TeamNotFound
from app.features.team_event_types.services.hosts import HostValidator
from app.features.team_event_types.services.membership import TeamMembershipResolver

TEAM_ID = 10


@pytest.mark.asyncio
async def test_all_member_ids_for_regular_team(team_store):
    resolver = TeamMembershipResolver(team_store)

    assert await resolver.all_member_ids(TEAM_ID) == [1, 2, 3]


@pytest.mark.asyncio
async def test_platform_team_excludes_creator(team_store):
    team_store.add_team(30, [100, 101, 102], creator=100)
    resolver = TeamMembershipResolver(team_store)

    assert await resolver.all_member_ids(30) == [101, 102]


@pytest.mark.asyncio
async def test_unknown_team_raises_not_found(team_store):
    resolver = TeamMembershipResolver(team_store)

    with pytest.raises(TeamNotFound) as exc_info:
        await resolver.all_member_ids(999)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_validator_names_non_members(team_store):
    team_store.add_team(20, [5])
    validator = HostValidator(TeamMembershipResolver(team_store))

    with pytest.raises(InvalidHosts) as exc_info:
        await validator.validate(20, [HostInput(user_id=5), HostInput(user_id=7)])

    assert exc_info.value.invalid_ids == [7]
    assert "7 are not members of team with id 20" in str(exc_info.value)
    assert exc_info.value.to_dict() == {
        "error": "invalid_hosts",
        "message": "Invalid hosts: 7 are not members of team with id 20.",
        "team_id": 20,
        "invalid_ids": [7],
    }



@pytest.mark.asyncio
async def test_validator_keeps_request_order(team_store):
    validator = HostValidator(TeamMembershipResolver(team_store))

    with pytest.raises(InvalidHosts) as exc_info:
        await validator.validate(
            TEAM_ID, [HostInput(user_id=9), HostInput(user_id=1), HostInput(user_id=4)]
        )

    assert exc_info.value.invalid_ids == [9, 4]


@pytest.mark.asyncio
@pytest.mark.parametrize("hosts", [None, []])
async def test_validator_skips_missing_hosts(hosts):
    class ExplodingStore:
        async def get_by_id(self, team_id):
            raise AssertionError("membership should not be loaded")

    validator = HostValidator(TeamMembershipResolver(ExplodingStore()))

    await validator.validate(TEAM_ID, hosts)
