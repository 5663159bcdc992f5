"""echoshim: single-shot JSON echo/ping responder.

Reads one JSON document from stdin and writes one line of JSON describing how
it was interpreted. Intended as a health-check or smoke-test shim invoked by a
parent process.
"""

import logging

# Add NullHandler to prevent "No handlers found" warnings (Python library standard)
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API exports
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
from echoshim.core.responder import Responder

__version__ = "0.1.0"

__all__ = [
    # Core classes
    "Responder",
    "ResponderProxy",
    # Models
    "InputPayload",
    "OutputPayload",
    "ProxyResponse",
    "ResponderRunResult",
    # Base exceptions
    "EchoShimError",
    "ResponderError",
    "ProxyError",
    # Responder exceptions
    "IoError",
    "ParseError",
    "SerializeError",
    # Proxy exceptions
    "ResponderLaunchError",
    "BodySizeError",
]
