"""Type definitions for HTTP responses."""

from typing import Any, TypeAlias


# Beacon and JSON-RPC envelopes are always objects
JsonObject: TypeAlias = dict[str, Any]

__all__ = ["JsonObject"]
