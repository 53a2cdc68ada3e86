"""
Generic event type input handling shared by personal and team event types.

Maps API field names to internal ones and checks combinations of fields
that cannot be validated one field at a time.
"""

import re
from typing import Any

from app.features.team_event_types.domain import (
    DestinationCalendarInput,
    InvalidDestinationCalendar,
    InvalidEventTypeConfiguration,
)
from app.features.team_event_types.repository import DestinationCalendarsRepository
from app.infrastructure.observability.logging import get_logger

from .interfaces import DestinationCalendarStore

logger = get_logger(__name__)

# API name -> internal name for fields copied as-is
SCALAR_FIELDS: dict[str, str] = {
    "title": "title",
    "slug": "slug",
    "length_in_minutes": "length",
    "description": "description",
    "hidden": "hidden",
    "minimum_booking_notice": "minimumBookingNotice",
    "before_event_buffer": "beforeEventBuffer",
    "after_event_buffer": "afterEventBuffer",
    "slot_interval": "slotInterval",
    "schedule_id": "scheduleId",
    "requires_confirmation": "requiresConfirmation",
    "custom_name": "eventName",
    "use_destination_calendar_email": "useEventTypeDestinationCalendarEmail",
    "scheduling_type": "schedulingType",
}

EVENT_NAME_VARIABLES = frozenset(
    {
        "event type title",
        "event duration",
        "event date",
        "event time",
        "organiser",
        "organiser first name",
        "scheduler",
        "scheduler first name",
        "scheduler last name",
        "location",
        "timezone",
    }
)

EVENT_NAME_VARIABLE_PATTERN = re.compile(r"\{([^{}]*)\}")


class InputEventTypesService:
    """Default generic transformer backed by the calendar repository."""

    def __init__(self, calendar_store: DestinationCalendarStore = DestinationCalendarsRepository):
        self.calendar_store = calendar_store

    def transform_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        event_type = self._transform_fields(fields)
        event_type.setdefault("metadata", {})
        return event_type

    def transform_update(self, fields: dict[str, Any], event_type_id: int) -> dict[str, Any]:
        event_type = self._transform_fields(fields)
        logger.debug(
            "Transformed event type update", event_type_id=event_type_id, fields=sorted(event_type)
        )
        return event_type

    def _transform_fields(self, fields: dict[str, Any]) -> dict[str, Any]:
        event_type: dict[str, Any] = {}

        for api_name, internal_name in SCALAR_FIELDS.items():
            if api_name in fields:
                value = fields[api_name]
                event_type[internal_name] = getattr(value, "value", value)

        if "seats" in fields:
            event_type.update(self._transform_seats(fields["seats"]))

        if fields.get("destination_calendar"):
            calendar = fields["destination_calendar"]
            event_type["destinationCalendar"] = {
                "integration": calendar["integration"],
                "externalId": calendar["external_id"],
            }

        if fields.get("booking_fields") is not None:
            event_type["bookingFields"] = [
                {
                    "type": booking_field["type"],
                    "name": booking_field["slug"],
                    "label": booking_field.get("label"),
                    "required": booking_field.get("required", False),
                }
                for booking_field in fields["booking_fields"]
            ]

        options = fields.get("length_in_minutes_options")
        if options:
            length = fields.get("length_in_minutes")
            if length is not None and length not in options:
                raise InvalidEventTypeConfiguration(
                    "lengthInMinutes must be one of lengthInMinutesOptions",
                    field="length_in_minutes_options",
                )
            event_type["metadata"] = {"multipleDuration": list(options)}

        return event_type

    @staticmethod
    def _transform_seats(seats: dict[str, Any] | None) -> dict[str, Any]:
        if not seats:
            return {
                "seatsPerTimeSlot": None,
                "seatsShowAttendees": False,
                "seatsShowAvailabilityCount": False,
            }
        return {
            "seatsPerTimeSlot": seats["seats_per_time_slot"],
            "seatsShowAttendees": seats.get("show_attendee_info", False),
            "seatsShowAvailabilityCount": seats.get("show_availability_count", True),
        }

    def validate_cross_fields(
        self,
        *,
        seats_per_time_slot: int | None,
        locations: list[dict[str, Any]] | None,
        requires_confirmation: bool | None,
        event_name: str | None,
        booking_fields: list[dict[str, Any]] | None = None,
        event_type_id: int | None = None,
    ) -> None:
        """
        Raises:
            InvalidEventTypeConfiguration: naming the offending field
        """
        if seats_per_time_slot and requires_confirmation:
            raise InvalidEventTypeConfiguration(
                "Seats and requires confirmation cannot be enabled at the same time",
                field="seats",
            )

        if seats_per_time_slot and locations and len(locations) > 1:
            raise InvalidEventTypeConfiguration(
                "Seats are only supported with a single location", field="locations"
            )

        if event_name:
            self._validate_event_name(event_name, booking_fields)

    @staticmethod
    def _validate_event_name(event_name: str, booking_fields: list[dict[str, Any]] | None) -> None:
        allowed = set(EVENT_NAME_VARIABLES)
        allowed.update(field["name"].lower() for field in booking_fields or [])

        for variable in EVENT_NAME_VARIABLE_PATTERN.findall(event_name):
            if variable.strip().lower() not in allowed:
                raise InvalidEventTypeConfiguration(
                    f"Event name contains invalid variable: {{{variable}}}", field="custom_name"
                )

    async def validate_destination_calendar(
        self, user_id: int, destination_calendar: DestinationCalendarInput | dict
    ) -> None:
        if isinstance(destination_calendar, DestinationCalendarInput):
            integration = destination_calendar.integration
            external_id = destination_calendar.external_id
        else:
            integration = destination_calendar["integration"]
            external_id = destination_calendar["externalId"]

        connected = await self.calendar_store.has_connected_calendar(
            user_id, integration, external_id
        )
        if not connected:
            raise InvalidDestinationCalendar(
                f"Destination calendar {integration}/{external_id} is not connected for user {user_id}",
                context={"integration": integration, "external_id": external_id},
            )

    async def validate_use_destination_calendar_email(self, user_id: int) -> None:
        destination_calendar = await self.calendar_store.get_user_destination_calendar(user_id)
        if not destination_calendar:
            raise InvalidDestinationCalendar(
                "useDestinationCalendarEmail requires a destination calendar",
                context={"user_id": user_id},
            )


input_event_types_service = InputEventTypesService()
