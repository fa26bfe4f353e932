from __future__ import annotations

# Relay fixtures come from the shipped pytest plugin module.
from streamjob.testing import diagnostic_relay, relay, relay_context

__all__ = ["relay", "diagnostic_relay", "relay_context"]
