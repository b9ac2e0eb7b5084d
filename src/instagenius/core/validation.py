"""Validation and default handling for style-specific form fields."""

import logging
from dataclasses import replace
from typing import Any

from .models import POST_IDEA_MAX_LENGTH, POST_IDEA_MIN_LENGTH, FormState
from .styles import StyleRegistry, style_registry

logger = logging.getLogger(__name__)


def is_blank(value: Any) -> bool:
    """Check whether a field value counts as missing.

    ``None`` and empty or whitespace-only strings are blank.  ``False`` is a
    real value for toggles, so only strings and ``None`` are ever blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_post_idea(post_idea: str) -> str | None:
    """Validate the post idea shared by every style.

    Length is measured after stripping surrounding whitespace, the same text
    the dispatcher sends to the backend.  An idea padded with blanks to reach
    the minimum is therefore rejected.

    Args:
        post_idea: Free-text description of the post

    Returns:
        An error message, or None if the idea is acceptable
    """
    length = len((post_idea or "").strip())
    if length < POST_IDEA_MIN_LENGTH:
        return (
            "Please share a bit more about your idea "
            f"(min. {POST_IDEA_MIN_LENGTH} characters)."
        )
    if length > POST_IDEA_MAX_LENGTH:
        return f"Idea is too long (max. {POST_IDEA_MAX_LENGTH} characters)."
    return None


def validate(
    style_id: str, form_state: FormState, registry: StyleRegistry = style_registry
) -> dict[str, str]:
    """Validate a form against the required fields of one style.

    Only the given style's fields are inspected, so values left over from a
    previously selected style can never produce (or hide) an error.  The
    post idea is checked too, on its stripped length (see
    :func:`validate_post_idea`).  The function reads ``form_state`` and never
    modifies it.

    Args:
        style_id: Style to validate against
        form_state: Current form values
        registry: Style table to look the style up in

    Returns:
        Mapping of field name -> user-facing message; empty when valid

    Raises:
        UnsupportedStyleError: If ``style_id`` is not in the style table
    """
    style = registry.get(style_id)
    errors: dict[str, str] = {}

    post_idea_error = validate_post_idea(form_state.post_idea)
    if post_idea_error:
        errors["postIdea"] = post_idea_error

    for spec in style.fields:
        if spec.required and is_blank(form_state.values.get(spec.name)):
            errors[spec.name] = spec.error_message

    if errors:
        logger.debug(f"Validation failed for style '{style_id}': {sorted(errors)}")
    return errors


def apply_style_defaults(
    style_id: str, form_state: FormState, registry: StyleRegistry = style_registry
) -> FormState:
    """Select a style: reset every style-specific field, then apply defaults.

    All style-specific fields known to the table are reset to their unset
    value (``None`` for text and choice fields, ``False`` for toggles) before
    the new style's defaults are applied.  The post idea is carried over
    unchanged.

    Args:
        style_id: Newly selected style
        form_state: Form values before the change (left untouched)
        registry: Style table to look the style up in

    Returns:
        A new FormState with ``style`` set to ``style_id``

    Raises:
        UnsupportedStyleError: If ``style_id`` is not in the style table
    """
    style = registry.get(style_id)

    values = {name: spec.unset_value for name, spec in registry.all_field_specs().items()}
    values.update(style.defaults)

    logger.info(f"Style changed from '{form_state.style}' to '{style_id}'")
    return replace(form_state, style=style_id, values=values)
