from google_auth_oauthlib.flow import InstalledAppFlow
from app.config import settings
from app.services.google_auth import CALENDAR_SCOPES, TOKEN_URI

# One-off: mint the GOOGLE_REFRESH_TOKEN the webhook runs with.
# Needs GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET of a "Desktop app" OAuth client.
if __name__ == "__main__":
    client_config = {
        "installed": {
            "client_id": settings.client_id,
            "client_secret": settings.client_secret,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": TOKEN_URI,
            "redirect_uris": ["http://localhost"],
        }
    }
    flow = InstalledAppFlow.from_client_config(client_config, list(CALENDAR_SCOPES))
    # For headless: copy the printed URL into a browser on another machine
    creds = flow.run_local_server(port=0, access_type="offline", prompt="consent")
    print("GOOGLE_REFRESH_TOKEN=" + (creds.refresh_token or ""))


# From root directory:
# python3 -m scripts.get_refresh_token
