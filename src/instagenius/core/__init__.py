"""Core functionality for style selection, validation and dispatch.

This package holds everything that does not depend on the web layer:

- **InstageniusConfig / config**: Pydantic Settings configuration
  (``INSTAGENIUS_`` environment prefix, ``.env`` support)
- **style_registry**: Immutable style id -> ``StyleDescriptor`` lookup table
- **validate / apply_style_defaults**: Per-style form validation and the
  field reset performed when the selected style changes
- **StyleDispatcher**: Maps a validated form onto exactly one backend
  generation operation and wraps its outcome in a result object
- **GenerationSession**: Per-session form state and submission state machine
- **GeminiClient**: The single outbound integration with the Gemini API

Architecture Overview
---------------------
1. **Configuration Layer** (config.py)
2. **Style Table** (styles.py): one frozen descriptor per visual style,
   driving validation, defaults and dispatch generically
3. **Validator / Dispatcher** (validation.py, dispatch.py)
4. **Session** (session.py): state machine around a single submission
5. **Backend Client** (gemini.py): used by the flows in ``instagenius.flows``
"""

from .config import InstageniusConfig, config
from .dispatch import StyleDispatcher
from .models import (
    FormState,
    GenerationFailure,
    GenerationSuccess,
    SubmissionState,
    ValidationFailure,
)
from .session import GenerationSession, SubmissionInProgressError
from .styles import StyleDescriptor, UnsupportedStyleError, style_registry
from .validation import apply_style_defaults, validate

__all__ = [
    "FormState",
    "GenerationFailure",
    "GenerationSession",
    "GenerationSuccess",
    "InstageniusConfig",
    "StyleDescriptor",
    "StyleDispatcher",
    "SubmissionInProgressError",
    "SubmissionState",
    "UnsupportedStyleError",
    "ValidationFailure",
    "apply_style_defaults",
    "config",
    "style_registry",
    "validate",
]
