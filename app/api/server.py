### --- standard + typing utilities --- ###
import logging
from typing import Any, Callable

### --- third-party libraries --- ###
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from googleapiclient.errors import HttpError
from starlette.concurrency import run_in_threadpool

### --- project imports --- ###
from app.api.auth import get_settings, require_shared_secret
from app.config import Settings, settings
from app.domain.errors import AdapterError
from app.domain.schemas import ToolCallsResponse
from app.services.calendar_service import CalendarClient, make_calendar_client
from app.tools.dispatcher import parse_tool_calls, run_tool_calls

def resolve_log_level(name: str) -> int:
    """LOG_LEVEL name -> logging level; unknown names fall back to INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO

logging.basicConfig(
    level=resolve_log_level(settings.log_level),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("api.server")

# FastAPI app init
app = FastAPI(title="Vapi Tools: Google Calendar adapter")

### -------------------------- Dependencies / errors --------------------------------- ###

CalendarFactory = Callable[[Settings], CalendarClient]

def get_calendar_factory() -> CalendarFactory:
    """Client factory dependency (overridden in tests)."""
    return make_calendar_client

def _error_message(exc: Exception) -> str:
    """Provider message for HttpError, str(exc) otherwise."""
    if isinstance(exc, HttpError) and exc.reason:
        return exc.reason
    return str(exc) or "Server error"

@app.exception_handler(AdapterError)
async def adapter_error_handler(_req: Request, exc: AdapterError):
    """Render AdapterError subclasses as {"error": msg} with their status."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

### ------------------------------- Endpoints ---------------------------------------- ###

@app.get("/")
@app.get("/healthz")
def healthz():
    """Liveness probe (no auth)."""
    return {"ok": True}

@app.post("/vapi/tools", dependencies=[Depends(require_shared_secret)])
async def vapi_tools(
    request: Request,
    s: Settings = Depends(get_settings),
    make_client: CalendarFactory = Depends(get_calendar_factory),
):
    """
    Single endpoint for Vapi tool-calls.
    Vapi expects: {"results": [{"toolCallId": ..., "result": {...}}]}
    """
    try:
        body: Any = await request.json()
    except ValueError:
        body = None

    try:
        message = parse_tool_calls(body)
    except AdapterError as e:
        logger.warning(f"[Vapi] rejected payload: {e.message}")
        raise

    calendar = make_client(s)
    try:
        results = await run_in_threadpool(run_tool_calls, message, calendar, s.calendar_id)
    except AdapterError as e:
        logger.error(f"[Vapi] batch aborted: {e.message}")
        raise
    except Exception as e:
        logger.exception("[Vapi] batch aborted by calendar error")
        return JSONResponse(status_code=500, content={"error": _error_message(e)})

    return ToolCallsResponse(results=results).model_dump()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Listening on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)

### ---------------------- curl examples ---------------------------- ###
"""
# Health
curl -s localhost:3000/

# Cancel
curl -sX POST localhost:3000/vapi/tools -H "content-type: application/json" -H "x-vapi-secret: $VAPI_SHARED_SECRET" \
  -d '{"message":{"type":"tool-calls","toolCallList":[{"id":"a1","function":{"name":"cancel_appointment","arguments":{"eventId":"evt123"}}}]}}'

# Reschedule
curl -sX POST localhost:3000/vapi/tools -H "content-type: application/json" -H "x-vapi-secret: $VAPI_SHARED_SECRET" \
  -d '{"message":{"type":"tool-calls","toolCallList":[{"id":"b1","function":{"name":"reschedule_appointment","arguments":{"eventId":"evt123","start":"2026-03-05T15:00:00-05:00","end":"2026-03-05T15:30:00-05:00"}}}]}}'
"""
