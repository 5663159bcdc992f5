"""Framework integrations for echoshim (optional dependencies)."""
