"""LangChain integration for echoshim.

Exposes the responder as a LangChain StructuredTool so an agent can run a
liveness check or echo request in-process.

Installation:
    pip install echoshim[langchain]
"""

import json
from typing import Any, Dict, Optional

# Import guards for optional dependencies
try:
    from langchain_core.tools import StructuredTool, ToolException
    from pydantic import BaseModel, Field
except ImportError as e:
    raise ImportError(
        "LangChain integration requires additional dependencies. "
        "Install with: pip install echoshim[langchain]"
    ) from e

from echoshim.core.exceptions import EchoShimError
from echoshim.core.responder import Responder

TOOL_NAME = "echoshim.respond"
TOOL_DESCRIPTION = (
    "Send a request to the echo responder. Set ping=true for a liveness check "
    "(optionally with a timestamp), or pass a message to have it echoed back."
)


class ResponderToolInput(BaseModel):
    """Pydantic schema for responder tool input.

    Fields:
        - message: Text to echo back
        - ping: Liveness-check flag
        - timestamp: Time quoted in the pong response
    """

    message: Optional[str] = Field(default=None, description="Text to echo back")
    ping: Optional[bool] = Field(default=None, description="Set true for a liveness check")
    timestamp: Optional[str] = Field(
        default=None, description="Timestamp quoted in the pong response"
    )


def create_responder_tool(responder: Optional[Responder] = None) -> StructuredTool:
    """Create a StructuredTool that runs the responder in-process.

    Only fields the caller sets are sent, so the ``input`` echoed in the
    result matches what the agent asked for.

    Args:
        responder: Responder to use (default: a new Responder)

    Returns:
        StructuredTool with sync and async support

    Example:
        >>> tool = create_responder_tool()
        >>> tool.invoke({"message": "hello"})
        '{"ok":true,"input":{"message":"hello"},"response":"Echo: hello"}'
    """
    if responder is None:
        responder = Responder()

    def invoke_responder(
        message: Optional[str] = None,
        ping: Optional[bool] = None,
        timestamp: Optional[str] = None,
    ) -> str:
        request: Dict[str, Any] = {
            key: value
            for key, value in (("message", message), ("ping", ping), ("timestamp", timestamp))
            if value is not None
        }
        try:
            return responder.respond(json.dumps(request).encode("utf-8")).rstrip("\n")
        except EchoShimError as e:
            raise ToolException(f"Responder error: {e}") from e

    async def ainvoke_responder(
        message: Optional[str] = None,
        ping: Optional[bool] = None,
        timestamp: Optional[str] = None,
    ) -> str:
        # Responder never blocks on I/O here, so the sync path is reused
        return invoke_responder(message=message, ping=ping, timestamp=timestamp)

    return StructuredTool(
        name=TOOL_NAME,
        description=TOOL_DESCRIPTION,
        args_schema=ResponderToolInput,
        func=invoke_responder,
        coroutine=ainvoke_responder,
    )
