from app.config import settings
from app.services.calendar_service import make_calendar_client

#Run to check if the refresh token + calendar id in .env work.
if __name__ == "__main__":
    cal = make_calendar_client(settings)
    info = cal.calendar_info(settings.calendar_id)
    print("Calendar:", info.get("summary"), "| tz:", info.get("timeZone"))


# From root directory:
# python3 -m scripts.check_calendar
