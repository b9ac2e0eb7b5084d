"""Session state for one interactive user.

A :class:`GenerationSession` owns the form values and the outcome of the most
recent submission.  Nothing in it is shared between sessions or persisted.

State Machine
-------------
::

    IDLE -> VALIDATING -> VALIDATION_FAILED
                       -> DISPATCHING -> SUCCESS
                                      -> FAILURE

``VALIDATION_FAILED``, ``SUCCESS`` and ``FAILURE`` are terminal; the next
submission starts again from ``IDLE``.  Selecting a style resets the form
fields and returns the session to ``IDLE``.  Neither a submission nor a style
change is accepted while a submission is ``DISPATCHING``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .dispatch import StyleDispatcher
from .models import (
    GENERIC_GENERATION_MESSAGE,
    FormState,
    GenerationFailure,
    GenerationSuccess,
    SubmissionResult,
    SubmissionState,
    ValidationFailure,
)
from .styles import StyleRegistry, style_registry
from .validation import apply_style_defaults, validate

logger = logging.getLogger(__name__)


class SubmissionInProgressError(RuntimeError):
    """Raised when the session is asked to act while a request is in flight."""


@dataclass
class GenerationSession:
    """Form values, submission state and last result for one user.

    Attributes
    ----------
    form_state : FormState
        Current field values
    state : SubmissionState
        Where the current submission is in its lifecycle
    last_result : SubmissionResult | None
        Outcome of the most recent submission, cleared on style change
    """

    form_state: FormState = field(default_factory=FormState)
    state: SubmissionState = SubmissionState.IDLE
    last_result: SubmissionResult | None = None
    registry: StyleRegistry = field(default=style_registry, repr=False)

    @classmethod
    def start(
        cls, style_id: str | None = None, registry: StyleRegistry = style_registry
    ) -> GenerationSession:
        """Create a session with a style selected and its defaults applied."""
        session = cls(registry=registry)
        session.select_style(style_id or session.form_state.style)
        return session

    @property
    def is_busy(self) -> bool:
        return self.state is SubmissionState.DISPATCHING

    def _ensure_not_busy(self) -> None:
        if self.is_busy:
            raise SubmissionInProgressError("A generation request is already in progress.")

    def select_style(self, style_id: str) -> FormState:
        """Switch the active style, resetting style fields to its defaults.

        Raises:
            UnsupportedStyleError: If the style is not in the table
            SubmissionInProgressError: If a submission is being dispatched
        """
        self._ensure_not_busy()
        self.form_state = apply_style_defaults(style_id, self.form_state, self.registry)
        self.state = SubmissionState.IDLE
        self.last_result = None
        return self.form_state

    def update(self, post_idea: str | None = None, **values) -> FormState:
        """Set the post idea and/or style-specific field values."""
        self._ensure_not_busy()
        if post_idea is not None:
            self.form_state.post_idea = post_idea
        self.form_state.values.update(values)
        return self.form_state

    async def submit(self, dispatcher: StyleDispatcher) -> SubmissionResult:
        """Run one submission of the current form through ``dispatcher``.

        Raises:
            SubmissionInProgressError: If a submission is already dispatching
        """
        self._ensure_not_busy()
        style_id = self.form_state.style
        self.last_result = None

        self.state = SubmissionState.VALIDATING
        if not dispatcher.supports(style_id):
            # Unsupported styles fail without validation or a backend call
            return self._finish(style_id, await dispatcher.dispatch(style_id, self.form_state))

        errors = validate(style_id, self.form_state, self.registry)
        if errors:
            return self._finish(style_id, ValidationFailure(errors))

        self.state = SubmissionState.DISPATCHING
        try:
            result = await dispatcher.dispatch(style_id, self.form_state)
        except Exception as e:
            logger.error(f"Dispatch raised for style '{style_id}': {e}", exc_info=True)
            result = GenerationFailure(str(e) or GENERIC_GENERATION_MESSAGE)
        finally:
            # Cancellation leaves no result; the session must not stay busy
            if self.state is SubmissionState.DISPATCHING:
                self.state = SubmissionState.IDLE
        return self._finish(style_id, result)

    def _finish(self, style_id: str, result: SubmissionResult) -> SubmissionResult:
        self.last_result = result
        if isinstance(result, ValidationFailure):
            self.state = SubmissionState.VALIDATION_FAILED
        elif isinstance(result, GenerationSuccess):
            self.state = SubmissionState.SUCCESS
        else:
            self.state = SubmissionState.FAILURE

        logger.info(f"Submission for style '{style_id}' finished: {self.state.value}")
        return result
