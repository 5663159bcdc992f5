"""Run the responder as a child process on behalf of an HTTP-style caller.

The proxy writes a request body to the responder's stdin and maps the
outcome to a status code and body:

    exit 0      -> 200, responder stdout verbatim (application/json)
    exit != 0   -> 500, {"error": "responder failed", "code": ..., "stderr": ...}
    any failure -> 500, {"error": "proxy error", "message": ...}

Usage:
    proxy = ResponderProxy(timeout=10)
    response = proxy.handle(b'{"ping": true}')
    response.status_code  # 200
"""

import json
import logging
import subprocess
import sys
import time
from typing import List, Optional

from echoshim.core.exceptions import BodySizeError, ResponderLaunchError
from echoshim.core.models import ProxyResponse, ResponderRunResult

DEFAULT_TIMEOUT = 30
DEFAULT_MAX_BODY_SIZE = 1_000_000
TIMEOUT_EXIT_CODE = 124

JSON_HEADERS = {"content-type": "application/json"}

logger = logging.getLogger(__name__)


def default_command() -> List[str]:
    """Command that runs the bundled responder with the current interpreter."""
    return [sys.executable, "-m", "echoshim"]


class ResponderProxy:
    """Spawn the responder once per request and translate its result.

    Attributes:
        command: Command line used to start the responder
        timeout: Maximum execution time in seconds
        max_body_size: Maximum request body size in bytes
    """

    def __init__(
        self,
        command: Optional[List[str]] = None,
        timeout: int = DEFAULT_TIMEOUT,
        max_body_size: int = DEFAULT_MAX_BODY_SIZE,
    ):
        """Initialize the proxy.

        Args:
            command: Responder command line (default: ``python -m echoshim``)
            timeout: Maximum execution time in seconds (default: 30)
            max_body_size: Maximum request body size in bytes (default: 1MB)
        """
        self.command = list(command) if command else default_command()
        self.timeout = timeout
        self.max_body_size = max_body_size

    def run(self, body: bytes | str) -> ResponderRunResult:
        """Run the responder with ``body`` on its stdin.

        Args:
            body: Request body; text is encoded as UTF-8

        Returns:
            ResponderRunResult with captured output and exit code

        Raises:
            BodySizeError: If the body exceeds max_body_size
            ResponderLaunchError: If the responder cannot be started
        """
        data = body.encode("utf-8") if isinstance(body, str) else body

        if len(data) > self.max_body_size:
            raise BodySizeError(
                f"Request body too large: {len(data)} bytes (max {self.max_body_size})",
                size_bytes=len(data),
                max_bytes=self.max_body_size,
            )

        start_time = time.perf_counter()

        try:
            process = subprocess.Popen(
                self.command,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise ResponderLaunchError(
                f"Failed to start responder {self.command[0]}: {e}",
                command=self.command,
            ) from e

        try:
            stdout, stderr = process.communicate(input=data, timeout=self.timeout)
            exit_code = process.returncode
        except subprocess.TimeoutExpired:
            process.kill()
            stdout, stderr = process.communicate()
            exit_code = TIMEOUT_EXIT_CODE
            stderr = stderr + b"\nTimeout"
            logger.warning(f"Responder timed out after {self.timeout}s")

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"Responder exited with {exit_code} (took {elapsed_ms:.1f}ms)")

        return ResponderRunResult(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            exit_code=exit_code,
            execution_time_ms=elapsed_ms,
        )

    def handle(self, body: bytes | str) -> ProxyResponse:
        """Answer a request body with an HTTP-style response."""
        try:
            result = self.run(body)
        except Exception as e:
            logger.warning(f"Proxy error: {e}")
            return ProxyResponse(
                status_code=500,
                body=json.dumps({"error": "proxy error", "message": str(e)}),
                headers=dict(JSON_HEADERS),
            )

        if not result.success:
            logger.warning(f"Responder failed with exit code {result.exit_code}")
            return ProxyResponse(
                status_code=500,
                body=json.dumps(
                    {
                        "error": "responder failed",
                        "code": result.exit_code,
                        "stderr": result.stderr,
                    }
                ),
                headers=dict(JSON_HEADERS),
            )

        return ProxyResponse(
            status_code=200,
            body=result.stdout,
            headers=dict(JSON_HEADERS),
        )
