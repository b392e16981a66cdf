from __future__ import annotations
from typing import List
from app.config import Settings
from google.oauth2.credentials import Credentials

# Only Calendar is needed to delete/patch events
CALENDAR_SCOPES: List[str] = (
    "https://www.googleapis.com/auth/calendar",
)
TOKEN_URI = "https://oauth2.googleapis.com/token"

class GoogleAuth:
    def __init__(self, client_id: str, client_secret: str, refresh_token: str,
                 scopes: List[str] = CALENDAR_SCOPES):
        """
        Initialize the GoogleAuth helper from long-lived OAuth2 credentials.
        Inputs:
            client_id / client_secret: OAuth client of the Google Cloud project.
            refresh_token: offline token minted once (see scripts/get_refresh_token.py).
            scopes: list of Google API scope URLs.
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.refresh_token = refresh_token
        self.scopes = scopes

    @classmethod
    def from_settings(cls, s: Settings) -> "GoogleAuth":
        return cls(s.client_id, s.client_secret, s.refresh_token)

    def creds(self) -> Credentials:
        """
        Build OAuth2 credentials with no access token yet.
        The google client refreshes on the first request, so invalid or revoked
        credentials only fail when a calendar call executes.
        Returns:
            google.oauth2.credentials.Credentials object.
        """
        return Credentials(
            token=None,
            refresh_token=self.refresh_token,
            client_id=self.client_id,
            client_secret=self.client_secret,
            token_uri=TOKEN_URI,
            scopes=list(self.scopes),
        )
