"""
Conferencing app checks for team event type locations.
"""

from app.config import settings
from app.features.team_event_types.domain import BadInput
from app.features.team_event_types.repository import ConferencingRepository
from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

# Public integration key -> installed app slug
CONFERENCING_APP_SLUGS: dict[str, str] = {
    "google-meet": "google-meet",
    "zoom": "zoom",
    "office365-video": "msteams",
    "whereby-video": "whereby",
    "webex-video": "webex",
    "jitsi": "jitsi",
    "huddle": "huddle01",
    "tandem": "tandem",
    "facetime-video": "facetime",
    "discord-video": "discord",
    "whatsapp-video": "whatsapp",
}


class ConferencingAppUnavailable(BadInput):
    default_code = "conferencing_app_unavailable"

    def __init__(self, team_id: int, integration: str, reason: str):
        super().__init__(
            f"Conferencing app '{integration}' {reason} for team {team_id}",
            context={"team_id": team_id, "integration": integration, "reason": reason},
        )
        self.team_id = team_id
        self.integration = integration
        self.reason = reason


class ConferencingService:
    """Checks that a team can use a conferencing integration as a location."""

    def __init__(self, repository=ConferencingRepository):
        self.repository = repository

    async def check_integration_connected(self, team_id: int, integration: str) -> None:
        """
        Raises:
            ConferencingAppUnavailable: app unknown, disabled or not installed for the team
        """
        if integration in settings.GLOBAL_CONFERENCING_APPS:
            return

        app_slug = CONFERENCING_APP_SLUGS.get(integration)
        if app_slug is None:
            raise ConferencingAppUnavailable(team_id, integration, "is not supported")

        app = await self.repository.get_app(app_slug)
        if not app or not app.get("enabled"):
            raise ConferencingAppUnavailable(team_id, integration, "is not enabled")

        credential = await self.repository.get_team_credential(team_id, app_slug)
        if not credential:
            raise ConferencingAppUnavailable(team_id, integration, "is not connected")
        if credential.get("invalid"):
            raise ConferencingAppUnavailable(team_id, integration, "has an invalid credential")

        logger.debug("Conferencing app connected", team_id=team_id, integration=integration)


conferencing_service = ConferencingService()
