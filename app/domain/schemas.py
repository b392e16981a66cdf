from typing import Any, Dict, List
from pydantic import BaseModel, Field, field_validator

TOOL_CALLS_TYPE = "tool-calls"

class ToolFunction(BaseModel):
    """Name + arguments of a single tool call. Anything odd is left for dispatch to reject."""
    name: Any = None
    arguments: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _object_arguments(cls, v):
        return v if isinstance(v, dict) else {}

class ToolCall(BaseModel):
    """One tool invocation. id is opaque and echoed back untouched."""
    id: Any = None
    function: ToolFunction = Field(default_factory=ToolFunction)

    @field_validator("function", mode="before")
    @classmethod
    def _object_function(cls, v):
        return v if isinstance(v, dict) else {}

class ToolCallsMessage(BaseModel):
    """The `message` object of a Vapi tool-calls webhook (type checked by the dispatcher)."""
    type: str
    toolCallList: List[ToolCall] = []

    @field_validator("toolCallList", mode="before")
    @classmethod
    def _object_entries(cls, v):
        # non-object entries still get a (failed) result of their own
        if not isinstance(v, list):
            return []
        return [e if isinstance(e, dict) else {} for e in v]

class ToolResult(BaseModel):
    """Result for one tool call, correlated by toolCallId."""
    toolCallId: Any = None
    result: Dict[str, Any]

class ToolCallsResponse(BaseModel):
    """Response envelope Vapi expects: {"results": [...]}."""
    results: List[ToolResult]
