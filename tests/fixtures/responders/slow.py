#!/usr/bin/env python3
"""Stand-in responder that never answers within a short timeout."""
import time

while True:
    time.sleep(0.1)
