"""Data models for form state and generation outcomes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Post idea length limits shared by validation and the front end
POST_IDEA_MIN_LENGTH = 10
POST_IDEA_MAX_LENGTH = 500

DEFAULT_STYLE = "bold-minimalist"

# Messages surfaced to the user
UNSUPPORTED_STYLE_MESSAGE = "Selected style is not supported yet."
NO_IMAGE_MESSAGE = "Failed to generate image. The AI did not return an image."
GENERIC_GENERATION_MESSAGE = "An error occurred while generating the image."


@dataclass
class FormState:
    """Current values of every input field in one interactive session.

    ``post_idea`` and ``style`` are common to all styles.  ``values`` holds the
    style-specific fields keyed by their form field name (``colorPalette``,
    ``humanSubject``, ...).  Fields of inactive styles may still be present
    here; only the active style's fields are ever validated or dispatched.
    """

    post_idea: str = ""
    style: str = DEFAULT_STYLE
    values: dict[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        """Return a field value, with ``postIdea`` and ``style`` resolved too."""
        if name == "postIdea":
            return self.post_idea
        if name == "style":
            return self.style
        return self.values.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the same shape the front end posts."""
        return {"postIdea": self.post_idea, "style": self.style, "values": dict(self.values)}


class SubmissionState(str, Enum):
    """States a single submission moves through."""

    IDLE = "idle"
    VALIDATING = "validating"
    VALIDATION_FAILED = "validation_failed"
    DISPATCHING = "dispatching"
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def is_terminal(self) -> bool:
        return self in (
            SubmissionState.VALIDATION_FAILED,
            SubmissionState.SUCCESS,
            SubmissionState.FAILURE,
        )


@dataclass(frozen=True)
class GenerationSuccess:
    """The backend returned an image (an opaque, usually data URI, string)."""

    image: str
    ok = True


@dataclass(frozen=True)
class GenerationFailure:
    """The submission could not produce an image.

    Attributes:
        message: User-facing explanation
        reason: ``"unsupported_style"`` or ``"generation_error"``
    """

    message: str
    reason: str = "generation_error"
    ok = False


@dataclass(frozen=True)
class ValidationFailure:
    """Validation rejected the form; no backend call was made."""

    errors: dict[str, str]
    ok = False


GenerationResult = GenerationSuccess | GenerationFailure
SubmissionResult = GenerationSuccess | GenerationFailure | ValidationFailure
