import logging
from typing import Dict, Any
from googleapiclient.discovery import build
from app.services.google_auth import GoogleAuth
from app.config import Settings

logger = logging.getLogger("services.calendar")

class CalendarClient:
    def __init__(self, auth: GoogleAuth):
        """
        Google Calendar API client wrapper.
        Inputs:
            auth: GoogleAuth instance used to build credentials.
        """
        self._auth = auth
        self._service = None

    def _svc(self):
        """
        Build (once) and return a Calendar API service object.
        The service and its credentials are shared by every call made through
        this client, so one client == one authorized session.
        Returns:
            googleapiclient Calendar API service instance.
        """
        if self._service is None:
            self._service = build("calendar", "v3", credentials=self._auth.creds(),
                                  cache_discovery=False)
        return self._service

    def delete_event(self, calendar_id: str, event_id: str) -> None:
        """
        Delete an event. Provider errors (HttpError, RefreshError, transport) propagate.
        """
        logger.info(f"[Calendar] delete calendarId={calendar_id} eventId={event_id}")
        self._svc().events().delete(calendarId=calendar_id, eventId=event_id).execute()

    def patch_event(self, calendar_id: str, event_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Partially update an event.
        Inputs:
            body: fields to change, e.g. {"start": {"dateTime": ...}, "end": {"dateTime": ...}}.
        Returns:
            the updated event resource as returned by Google (includes htmlLink).
        """
        logger.info(f"[Calendar] patch calendarId={calendar_id} eventId={event_id}")
        logger.debug(f"[Calendar] patch body={body}")
        return self._svc().events().patch(
            calendarId=calendar_id, eventId=event_id, body=body
        ).execute()

    def calendar_info(self, calendar_id: str) -> Dict[str, Any]:
        """Fetch the calendarList entry for calendar_id (used by the credential check script)."""
        return self._svc().calendarList().get(calendarId=calendar_id).execute()


def make_calendar_client(s: Settings) -> CalendarClient:
    """Client factory: one authorized CalendarClient from settings. No remote call is made here."""
    return CalendarClient(GoogleAuth.from_settings(s))
