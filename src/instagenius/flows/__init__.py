"""Gemini generation flows, one per visual style.

Importing this package registers every flow with :data:`flow_registry`.
"""

from .base import FlowInput, GenerationError, GenerationFlow, flow_registry

# Register flows
from . import business, illustrative, minimal  # noqa: F401, E402

__all__ = ["FlowInput", "GenerationError", "GenerationFlow", "flow_registry"]
