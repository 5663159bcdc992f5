"""Data models for echoshim.

Request/response payloads are pydantic models so that optional fields keep
the absent/present distinction and type mismatches are rejected rather than
coerced. Proxy results are plain frozen dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr


class InputPayload(BaseModel):
    """Recognized fields of a responder request.

    All fields are optional. JSON ``null`` is treated the same as an absent
    field. Unknown fields are ignored.

    Attributes:
        message: Text to echo back
        ping: Liveness-check flag; only ``True`` triggers a pong
        timestamp: Caller-supplied time quoted in the pong response
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: Optional[StrictStr] = None
    ping: Optional[StrictBool] = None
    timestamp: Optional[StrictStr] = None


class OutputPayload(BaseModel):
    """Response record written to stdout.

    Attributes:
        ok: Always True on the success path
        input: The original parsed JSON value, echoed unchanged
        response: Response text
        pong: True for ping requests, otherwise unset and omitted on output
    """

    model_config = ConfigDict(frozen=True)

    ok: bool = True
    input: Any = None
    response: Optional[str] = None
    pong: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class ResponderRunResult:
    """Result of running the responder as a child process.

    Attributes:
        stdout: Captured standard output (decoded as UTF-8)
        stderr: Captured standard error (decoded as UTF-8)
        exit_code: Process exit code (124 on timeout)
        execution_time_ms: Wall-clock duration in milliseconds
    """

    stdout: str
    stderr: str
    exit_code: int
    execution_time_ms: float

    @property
    def success(self) -> bool:
        """True if the responder exited with status 0."""
        return self.exit_code == 0

    @property
    def timeout(self) -> bool:
        """True if the responder was killed for exceeding the timeout."""
        return self.exit_code == 124 and 'Timeout' in self.stderr


@dataclass(frozen=True, slots=True)
class ProxyResponse:
    """HTTP-style response produced by ResponderProxy.handle().

    Attributes:
        status_code: 200 on success, 500 on any failure
        body: Response body text
        headers: Response headers (lower-case names)
    """

    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)
