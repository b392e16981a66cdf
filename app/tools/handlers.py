"""
Tool handlers for the Vapi calendar tools.

Each handler takes (calendar client, calendar id, arguments), makes exactly one
remote call and returns the `result` mapping for the ToolResult.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict

from app.domain.errors import ToolArgumentError
from app.services.calendar_service import CalendarClient

logger = logging.getLogger("tools.handlers")


class ToolName(str, Enum):
    CANCEL_APPOINTMENT = "cancel_appointment"
    RESCHEDULE_APPOINTMENT = "reschedule_appointment"


def cancel_appointment(calendar: CalendarClient, calendar_id: str, args: Dict[str, Any]) -> Dict[str, Any]:
    """Delete the event identified by args["eventId"]."""
    event_id = args.get("eventId")
    if not event_id:
        raise ToolArgumentError("cancel_appointment requires eventId")

    calendar.delete_event(calendar_id, event_id)
    return {"ok": True, "action": "cancelled", "eventId": event_id}


def reschedule_appointment(calendar: CalendarClient, calendar_id: str, args: Dict[str, Any]) -> Dict[str, Any]:
    """
    Move an event to new start/end times.

    start/end are RFC3339 strings with offsets (e.g. 2026-03-05T15:00:00-05:00).
    They go to Google as-is; Google validates them.
    """
    event_id, start, end = args.get("eventId"), args.get("start"), args.get("end")
    if not event_id or not start or not end:
        raise ToolArgumentError("reschedule_appointment requires eventId, start, end")

    patch = {
        "start": {"dateTime": start},
        "end": {"dateTime": end},
    }
    updated = calendar.patch_event(calendar_id, event_id, patch)
    return {
        "ok": True,
        "action": "rescheduled",
        "eventId": event_id,
        "htmlLink": updated.get("htmlLink"),
    }


ToolHandler = Callable[[CalendarClient, str, Dict[str, Any]], Dict[str, Any]]

TOOL_REGISTRY: Dict[ToolName, ToolHandler] = {
    ToolName.CANCEL_APPOINTMENT: cancel_appointment,
    ToolName.RESCHEDULE_APPOINTMENT: reschedule_appointment,
}
