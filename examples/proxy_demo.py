"""Proxy Example for echoshim

This example demonstrates:
1. Echo and ping requests through ResponderProxy
2. Status mapping for malformed requests
3. Calling the responder in-process

Prerequisites:
    - echoshim installed (pip install -e .)
    - Python 3.10+

Usage:
    python examples/proxy_demo.py
"""

import json
from datetime import datetime, timezone

from echoshim import Responder, ResponderProxy


def show(title, response):
    print("-" * 80)
    print(title)
    print("-" * 80)
    print(f"Status: {response.status_code}")
    print(json.dumps(json.loads(response.body), indent=2))
    print()


def main():
    """Run proxy examples."""
    proxy = ResponderProxy(timeout=10)

    # Example 1: Echo
    show("Example 1: Echo", proxy.handle(json.dumps({"message": "Hello from Python!"})))

    # Example 2: Ping (ping wins over message)
    ping = {
        "ping": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "message": "Are you alive?",
    }
    show("Example 2: Ping", proxy.handle(json.dumps(ping)))

    # Example 3: Malformed request
    show("Example 3: Malformed request", proxy.handle('{"ping": }'))

    # Example 4: In-process, no child process
    print("-" * 80)
    print("Example 4: In-process responder")
    print("-" * 80)
    print(Responder().respond(b"").rstrip())


if __name__ == "__main__":
    main()
