"""
Envelope parsing + sequential dispatch of Vapi tool calls.
"""

import logging
from typing import Any, List

from app.domain.errors import BadRequestError
from app.domain.schemas import TOOL_CALLS_TYPE, ToolCallsMessage, ToolResult
from app.services.calendar_service import CalendarClient
from app.tools.handlers import TOOL_REGISTRY, ToolName

logger = logging.getLogger("tools.dispatcher")

INVALID_PAYLOAD = "Invalid payload: expected tool-calls"


def parse_tool_calls(body: Any) -> ToolCallsMessage:
    """
    Pull the tool-calls message out of a webhook body.
    Raises BadRequestError only if body.message is missing, not an object,
    or not of type "tool-calls". Malformed entries are kept and fail one by one.
    """
    message = body.get("message") if isinstance(body, dict) else None
    if not isinstance(message, dict) or message.get("type") != TOOL_CALLS_TYPE:
        raise BadRequestError(INVALID_PAYLOAD)
    return ToolCallsMessage.model_validate(message)


def run_tool_calls(message: ToolCallsMessage, calendar: CalendarClient, calendar_id: str) -> List[ToolResult]:
    """
    Run every tool call in order against one calendar client.

    Unknown tool names produce an ok=False result. Any other failure
    (missing arguments, Google errors) propagates and aborts the batch;
    results already computed are dropped with it.
    """
    results: List[ToolResult] = []
    for call in message.toolCallList:
        name = call.function.name
        args = call.function.arguments

        try:
            tool = ToolName(name)
        except ValueError:
            logger.warning(f"[Dispatch] unknown tool {name!r} (toolCallId={call.id})")
            results.append(ToolResult(
                toolCallId=call.id,
                result={"ok": False, "error": f"Unknown tool function: {name}"},
            ))
            continue

        logger.info(f"[Dispatch] {tool.value} toolCallId={call.id} eventId={args.get('eventId')}")
        logger.debug(f"[Dispatch] {tool.value} args={args}")
        result = TOOL_REGISTRY[tool](calendar, calendar_id, args)
        results.append(ToolResult(toolCallId=call.id, result=result))
    return results
