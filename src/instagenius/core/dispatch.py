"""Style dispatch: turn a validated form into exactly one backend call.

The dispatcher owns a mapping of operation name -> generation operation.  An
operation is anything with an async ``generate(inputs)`` method returning a
mapping with an ``image`` key; in production these are the flows registered
in ``instagenius.flows``, in tests they are simple fakes.

Outcome Mapping
---------------
=======================================  =====================================
Situation                                Result
=======================================  =====================================
Style id not in the style table          ``GenerationFailure`` (unsupported),
                                         no backend call
Operation returns a non-empty image      ``GenerationSuccess(image)``
Operation returns no / empty image       ``GenerationFailure`` (no image)
Operation raises                         ``GenerationFailure`` with the
                                         error's message, or a generic one
=======================================  =====================================

Each call performs at most one outbound call.  There are no retries, no fan
out and no timeout: the await lasts as long as the backend takes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from .models import (
    GENERIC_GENERATION_MESSAGE,
    NO_IMAGE_MESSAGE,
    UNSUPPORTED_STYLE_MESSAGE,
    FormState,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
    SubmissionResult,
    ValidationFailure,
)
from .styles import StyleDescriptor, StyleRegistry, style_registry
from .validation import is_blank, validate

if TYPE_CHECKING:
    from .config import InstageniusConfig

logger = logging.getLogger(__name__)


class GenerationOperation(Protocol):
    """Capability shared by every backend generation operation."""

    async def generate(self, inputs: dict[str, Any]) -> Mapping[str, Any]: ...


def build_operation_inputs(style: StyleDescriptor, form_state: FormState) -> dict[str, Any]:
    """Extract exactly the inputs a style's operation expects.

    The post idea is always sent.  Each of the style's fields is sent under
    its operation input name (see ``StyleDescriptor.field_map``).  Toggles
    are always sent as booleans; blank optional text fields are left out.
    Fields belonging to other styles are never included.

    Args:
        style: Descriptor of the selected style
        form_state: Current (validated) form values

    Returns:
        Input mapping for the style's operation
    """
    inputs: dict[str, Any] = {"postIdea": form_state.post_idea.strip()}
    for spec in style.fields:
        value = form_state.values.get(spec.name)
        if spec.kind == "toggle":
            inputs[style.input_name(spec.name)] = bool(value)
        elif not is_blank(value):
            inputs[style.input_name(spec.name)] = value.strip() if isinstance(value, str) else value
    return inputs


def _unsupported(style_id: str) -> GenerationFailure:
    logger.warning(f"Rejected unsupported style '{style_id}'")
    return GenerationFailure(UNSUPPORTED_STYLE_MESSAGE, reason="unsupported_style")


class StyleDispatcher:
    """Validate and dispatch form submissions to per-style operations.

    Attributes:
        registry: Style table used to resolve style ids
    """

    def __init__(
        self,
        operations: Mapping[str, GenerationOperation],
        registry: StyleRegistry = style_registry,
    ) -> None:
        self._operations = dict(operations)
        self.registry = registry

    @classmethod
    def from_flows(cls, config: InstageniusConfig) -> StyleDispatcher:
        """Build a dispatcher wired to the registered Gemini flows."""
        from instagenius.core.gemini import GeminiClient
        from instagenius.flows import flow_registry

        client = GeminiClient(config)
        operations = {
            name: flow_registry.instantiate(name, client) for name in flow_registry.list_available()
        }
        return cls(operations)

    @property
    def operations(self) -> Mapping[str, GenerationOperation]:
        return self._operations

    def supports(self, style_id: str) -> bool:
        """Check that a style exists and has an operation wired to it."""
        if style_id not in self.registry:
            return False
        return self.registry.get(style_id).operation in self._operations

    async def dispatch(self, style_id: str, form_state: FormState) -> GenerationResult:
        """Invoke the operation for ``style_id`` once and wrap its outcome.

        Callers are expected to have validated ``form_state`` first (see
        :meth:`submit`).

        Args:
            style_id: Selected style
            form_state: Validated form values

        Returns:
            GenerationSuccess or GenerationFailure
        """
        if not self.supports(style_id):
            return _unsupported(style_id)

        style = self.registry.get(style_id)
        operation = self._operations[style.operation]
        inputs = build_operation_inputs(style, form_state)

        logger.info(f"Dispatching style '{style_id}' to operation '{style.operation}'")
        try:
            output = await operation.generate(inputs)
        except Exception as e:
            logger.error(f"Generation failed for style '{style_id}': {e}", exc_info=True)
            return GenerationFailure(str(e) or GENERIC_GENERATION_MESSAGE)

        image = output.get("image") if isinstance(output, Mapping) else None
        if not isinstance(image, str) or not image:
            logger.error(f"Operation '{style.operation}' returned no image")
            return GenerationFailure(NO_IMAGE_MESSAGE)

        logger.info(f"Generated image for style '{style_id}' ({len(image)} chars)")
        return GenerationSuccess(image)

    async def submit(self, style_id: str, form_state: FormState) -> SubmissionResult:
        """Validate, then dispatch.

        Returns:
            ValidationFailure when required fields are missing, otherwise the
            result of :meth:`dispatch`
        """
        if not self.supports(style_id):
            return _unsupported(style_id)

        errors = validate(style_id, form_state, self.registry)
        if errors:
            return ValidationFailure(errors)

        return await self.dispatch(style_id, form_state)
