"""Stdin-to-stdout JSON responder.

Reads one JSON document, decides how to answer it, and writes one line of
JSON describing the interpretation.

Usage:
    responder = Responder()
    line = responder.respond(b'{"message": "hello"}')
    # '{"ok":true,"input":{"message":"hello"},"response":"Echo: hello"}\\n'

Branch precedence (first match wins):
    1. ``ping`` is true   -> pong response quoting ``timestamp``
    2. ``message`` is set -> echo response
    3. otherwise          -> default response
"""

import json
import logging
import time
import math
from typing import Any, BinaryIO

from pydantic import ValidationError

from echoshim.core.exceptions import IoError, ParseError, SerializeError
from echoshim.core.models import InputPayload, OutputPayload

logger = logging.getLogger(__name__)

PING_RESPONSE_PREFIX = "Pong! Rust binary is alive. Received at: "
ECHO_PREFIX = "Echo: "
DEFAULT_RESPONSE = "No specific message provided"
UNKNOWN_TIMESTAMP = "unknown"

# Positional order used when the request is a JSON array
POSITIONAL_FIELDS = ("message", "ping", "timestamp")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON token {name!r}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_input(text: str) -> Any:
    """Parse request text into a JSON value.

    Empty or whitespace-only text is treated as an empty object.

    Args:
        text: Decoded request text

    Returns:
        The parsed JSON value (any shape)

    Raises:
        ParseError: If the text is not valid JSON
    """
    if not text.strip():
        return {}

    try:
        return json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except ValueError as e:
        raise ParseError(f"Invalid JSON input: {e}") from e


def parse_payload(value: Any) -> InputPayload:
    """Interpret a parsed JSON value as an InputPayload.

    Objects are matched by field name. An array of exactly three elements is
    read positionally as ``[message, ping, timestamp]``.

    Raises:
        ParseError: If the value has the wrong shape or a field has the wrong type
    """
    if isinstance(value, list) and len(value) == len(POSITIONAL_FIELDS):
        value = dict(zip(POSITIONAL_FIELDS, value))

    try:
        return InputPayload.model_validate(value)
    except ValidationError as e:
        errors = e.errors()
        field_name = None
        if errors and errors[0].get("loc"):
            field_name = str(errors[0]["loc"][0])
        detail = errors[0]["msg"] if errors else str(e)
        if field_name:
            message = f"Invalid type for field '{field_name}': {detail}"
        else:
            message = f"Invalid input payload: {detail}"
        raise ParseError(message, field_name=field_name) from e


def build_response(value: Any, payload: InputPayload) -> OutputPayload:
    """Decide the response for a request.

    Args:
        value: The original parsed JSON value, echoed back as ``input``
        payload: The recognized fields of that value

    Returns:
        OutputPayload ready for serialization
    """
    if payload.ping is True:
        timestamp = payload.timestamp if payload.timestamp is not None else UNKNOWN_TIMESTAMP
        logger.debug(f"Ping request (timestamp={timestamp})")
        return OutputPayload(
            ok=True,
            input=value,
            response=PING_RESPONSE_PREFIX + timestamp,
            pong=True,
        )
    elif payload.message is not None:
        logger.debug(f"Echo request ({len(payload.message)} chars)")
        return OutputPayload(ok=True, input=value, response=ECHO_PREFIX + payload.message)
    else:
        logger.debug("Request without ping or message")
        return OutputPayload(ok=True, input=value, response=DEFAULT_RESPONSE)


def serialize_output(output: OutputPayload) -> str:
    """Serialize an OutputPayload to a single line of compact JSON.

    ``pong`` is omitted when unset. Non-ASCII text is written as-is.

    Raises:
        SerializeError: If the record cannot be encoded
    """
    exclude = {"pong"} if output.pong is None else None
    data = output.model_dump(exclude=exclude)

    try:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializeError(f"Cannot serialize response: {e}") from e


class Responder:
    """Single-shot JSON request/response pipeline.

    Every step either succeeds or raises a ResponderError subclass; no error
    is recovered and nothing is written until the full line is ready.
    """

    def respond(self, raw: bytes) -> str:
        """Run the full pipeline on raw request bytes.

        Args:
            raw: Request body as read from stdin

        Returns:
            One line of JSON, terminated by a newline

        Raises:
            IoError: If the bytes are not valid UTF-8
            ParseError: If the text is not valid JSON or has mistyped fields
            SerializeError: If the response cannot be encoded
        """
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise IoError(f"Input is not valid UTF-8: {e}") from e

        value = parse_input(text)
        payload = parse_payload(value)
        output = build_response(value, payload)
        return serialize_output(output) + "\n"

    def run(self, stdin: BinaryIO, stdout: BinaryIO) -> None:
        """Read stdin to end-of-stream, answer, and write the line to stdout.

        The line is always encoded as UTF-8, whatever the locale.

        Raises:
            IoError: If stdin cannot be read or stdout cannot be written
            ParseError: See respond()
            SerializeError: See respond()
        """
        start_time = time.perf_counter()

        try:
            raw = stdin.read()
        except OSError as e:
            raise IoError(f"Failed to read standard input: {e}") from e

        line = self.respond(raw)

        try:
            stdout.write(line.encode("utf-8"))
            stdout.flush()
        except OSError as e:
            raise IoError(f"Failed to write standard output: {e}") from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"Answered {len(raw)} byte request (took {elapsed_ms:.1f}ms)")
