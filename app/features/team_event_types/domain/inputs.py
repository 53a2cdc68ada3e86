"""
Team event type request models.

Field names are snake_case; camelCase aliases accept the public API payload
shape (``lengthInMinutes``, ``assignAllTeamMembers`` ...).
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import HostPriority, SchedulingType

# Public conferencing app keys mapped to the internal location type
INTEGRATION_LOCATION_TYPES: dict[str, str] = {
    "cal-video": "integrations:daily",
    "google-meet": "integrations:google:meet",
    "zoom": "integrations:zoom",
    "office365-video": "integrations:office365_video",
    "whereby-video": "integrations:whereby_video",
    "webex-video": "integrations:webex_video",
    "jitsi": "integrations:jitsi",
    "huddle": "integrations:huddle01",
    "tandem": "integrations:tandem",
    "facetime-video": "integrations:facetime_video",
    "discord-video": "integrations:discord_video",
    "whatsapp-video": "integrations:whatsapp_video",
}


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =================================================================
# LOCATIONS
# =================================================================


class AddressLocation(ApiModel):
    type: Literal["address"] = "address"
    address: str = Field(..., min_length=1)
    public: bool = False


class LinkLocation(ApiModel):
    type: Literal["link"] = "link"
    link: str = Field(..., min_length=1)
    public: bool = False


class PhoneLocation(ApiModel):
    type: Literal["phone"] = "phone"
    phone: str = Field(..., min_length=1)
    public: bool = False


class IntegrationLocation(ApiModel):
    type: Literal["integration"] = "integration"
    integration: str

    @field_validator("integration")
    @classmethod
    def known_integration(cls, value: str) -> str:
        if value not in INTEGRATION_LOCATION_TYPES:
            raise ValueError(f"Unsupported conferencing integration: {value}")
        return value


class AttendeeAddressLocation(ApiModel):
    type: Literal["attendeeAddress"] = "attendeeAddress"


class AttendeePhoneLocation(ApiModel):
    type: Literal["attendeePhone"] = "attendeePhone"


class AttendeeDefinedLocation(ApiModel):
    type: Literal["attendeeDefined"] = "attendeeDefined"


class OrganizersDefaultAppLocation(ApiModel):
    type: Literal["organizersDefaultApp"] = "organizersDefaultApp"


TeamLocation = Annotated[
    AddressLocation
    | LinkLocation
    | PhoneLocation
    | IntegrationLocation
    | AttendeeAddressLocation
    | AttendeePhoneLocation
    | AttendeeDefinedLocation
    | OrganizersDefaultAppLocation,
    Field(discriminator="type"),
]


# =================================================================
# HOSTS, SEATS, CALENDARS
# =================================================================


class HostInput(ApiModel):
    """A team member proposed as host."""

    user_id: int
    mandatory: bool | None = None
    priority: HostPriority | None = None


class SeatsInput(ApiModel):
    seats_per_time_slot: int = Field(..., ge=1)
    show_attendee_info: bool = False
    show_availability_count: bool = True


class DestinationCalendarInput(ApiModel):
    integration: str = Field(..., min_length=1)
    external_id: str = Field(..., min_length=1)


class BookingFieldInput(ApiModel):
    type: str
    slug: str = Field(..., min_length=1)
    label: str | None = None
    required: bool = False


# =================================================================
# EVENT TYPE DRAFTS
# =================================================================


class _TeamEventTypeFields(ApiModel):
    description: str | None = None
    locations: list[TeamLocation] | None = None
    hosts: list[HostInput] | None = None
    assign_all_team_members: bool | None = None
    length_in_minutes_options: list[int] | None = None
    booking_fields: list[BookingFieldInput] | None = None
    hidden: bool | None = None
    minimum_booking_notice: int | None = Field(None, ge=0)
    before_event_buffer: int | None = Field(None, ge=0)
    after_event_buffer: int | None = Field(None, ge=0)
    slot_interval: int | None = Field(None, ge=1)
    schedule_id: int | None = None
    requires_confirmation: bool | None = None
    seats: SeatsInput | None = None
    custom_name: str | None = None
    destination_calendar: DestinationCalendarInput | None = None
    use_destination_calendar_email: bool | None = None


class CreateTeamEventTypeInput(_TeamEventTypeFields):
    """Request body for creating a team event type."""

    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    length_in_minutes: int = Field(..., ge=1)
    scheduling_type: SchedulingType


class UpdateTeamEventTypeInput(_TeamEventTypeFields):
    """
    Request body for updating a team event type.

    Every field is optional; the scheduling type of an existing event type
    cannot be changed.
    """

    title: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1)
    length_in_minutes: int | None = Field(None, ge=1)


# Fields owned by team-specific resolution, never passed to the generic transformer
TEAM_ONLY_FIELDS = {"hosts", "assign_all_team_members", "locations"}
