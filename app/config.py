from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str = ""):
    return field(default_factory=lambda: os.getenv(name, default))


# carries .env values, read when a Settings is built. Empty shared_secret disables auth.
@dataclass(frozen=True)
class Settings:
    client_id: str = _env("GOOGLE_CLIENT_ID")
    client_secret: str = _env("GOOGLE_CLIENT_SECRET")
    refresh_token: str = _env("GOOGLE_REFRESH_TOKEN")
    calendar_id: str = _env("GOOGLE_CALENDAR_ID", "primary")
    shared_secret: str = _env("VAPI_SHARED_SECRET")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    log_level: str = _env("LOG_LEVEL", "INFO")

settings = Settings()
