"""
Team event type locations: conferencing checks and API -> internal shape.
"""

import asyncio
from typing import Any

from app.config import settings
from app.features.team_event_types.domain import InvalidLocations, TeamEventTypeError
from app.features.team_event_types.domain.inputs import (
    INTEGRATION_LOCATION_TYPES,
    AddressLocation,
    AttendeeAddressLocation,
    AttendeeDefinedLocation,
    AttendeePhoneLocation,
    IntegrationLocation,
    LinkLocation,
    OrganizersDefaultAppLocation,
    PhoneLocation,
)
from app.infrastructure.observability.logging import get_logger

from .interfaces import ConferencingValidator

logger = get_logger(__name__)


def default_locations() -> list[IntegrationLocation]:
    return [IntegrationLocation(integration=settings.DEFAULT_CONFERENCING_APP)]


def transform_location(location) -> dict[str, Any]:
    if isinstance(location, IntegrationLocation):
        return {"type": INTEGRATION_LOCATION_TYPES[location.integration]}
    if isinstance(location, AddressLocation):
        return {
            "type": "inPerson",
            "address": location.address,
            "displayLocationPublicly": location.public,
        }
    if isinstance(location, LinkLocation):
        return {"type": "link", "link": location.link, "displayLocationPublicly": location.public}
    if isinstance(location, PhoneLocation):
        return {
            "type": "userPhone",
            "hostPhoneNumber": location.phone,
            "displayLocationPublicly": location.public,
        }
    if isinstance(location, AttendeeAddressLocation):
        return {"type": "attendeeInPerson"}
    if isinstance(location, AttendeePhoneLocation):
        return {"type": "phone"}
    if isinstance(location, AttendeeDefinedLocation):
        return {"type": "somewhereElse"}
    if isinstance(location, OrganizersDefaultAppLocation):
        return {"type": "conferencing"}

    raise TypeError(f"Unsupported location type: {type(location).__name__}")


def transform_locations(locations: list) -> list[dict[str, Any]]:
    return [transform_location(location) for location in locations]


class LocationResolver:
    def __init__(self, conferencing: ConferencingValidator):
        self.conferencing = conferencing

    async def validate(self, team_id: int, locations: list | None) -> None:
        """
        Check every conferencing integration location concurrently.

        Raises:
            InvalidLocations: one or more integrations are unavailable, naming all of them
        """
        integrations = [
            location.integration
            for location in locations or []
            if isinstance(location, IntegrationLocation)
            and location.integration not in settings.GLOBAL_CONFERENCING_APPS
        ]
        if not integrations:
            return

        results = await asyncio.gather(
            *(
                self.conferencing.check_integration_connected(team_id, integration)
                for integration in integrations
            ),
            return_exceptions=True,
        )

        failures: dict[str, str] = {}
        unexpected: list[BaseException] = []
        for integration, result in zip(integrations, results):
            if isinstance(result, TeamEventTypeError):
                failures[integration] = result.message
            elif isinstance(result, BaseException):
                unexpected.append(result)

        if unexpected:
            error = unexpected[0]
            for other in unexpected[1:]:
                logger.error(
                    "Conferencing check failed",
                    team_id=team_id,
                    error=str(other),
                    error_type=type(other).__name__,
                )
            if failures:
                logger.warning(
                    "Unavailable conferencing integrations",
                    team_id=team_id,
                    integrations=failures,
                )
                for integration, reason in failures.items():
                    error.add_note(f"Conferencing integration {integration}: {reason}")
            raise error

        if failures:
            raise InvalidLocations(team_id, failures)
