"""Core module for echoshim.

Framework-agnostic responder, proxy and models (stdlib + pydantic only).
"""

from echoshim.core.exceptions import (
    BodySizeError,
    EchoShimError,
    IoError,
    ParseError,
    ProxyError,
    ResponderError,
    ResponderLaunchError,
    SerializeError,
)
from echoshim.core.models import (
    InputPayload,
    OutputPayload,
    ProxyResponse,
    ResponderRunResult,
)
from echoshim.core.proxy import ResponderProxy
from echoshim.core.responder import (
    Responder,
    build_response,
    parse_input,
    parse_payload,
    serialize_output,
)

__all__ = [
    "Responder",
    "ResponderProxy",
    "parse_input",
    "parse_payload",
    "build_response",
    "serialize_output",
    "InputPayload",
    "OutputPayload",
    "ProxyResponse",
    "ResponderRunResult",
    "EchoShimError",
    "ResponderError",
    "IoError",
    "ParseError",
    "SerializeError",
    "ProxyError",
    "ResponderLaunchError",
    "BodySizeError",
]
