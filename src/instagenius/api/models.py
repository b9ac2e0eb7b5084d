"""Pydantic request and response models for the InstaGenius API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
FormRequest
    Form state posted by the front end to ``/api/validate`` and
    ``/api/generate``.
SelectStyleRequest
    Payload for ``POST /api/styles/{style_id}/select``.
ValidationResponse
    Result of ``POST /api/validate``.
GenerateResponse
    Successful result of ``POST /api/generate``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from instagenius.core.models import DEFAULT_STYLE, FormState


class FormRequest(BaseModel):
    """The whole form as the front end holds it.

    The style-specific values are passed through untouched; the style table
    decides which of them matter.

    Attributes:
        post_idea: Free-text idea for the post (``postIdea`` on the wire).
        style: Selected style id.
        values: Style-specific field values keyed by form field name.
    """

    model_config = ConfigDict(populate_by_name=True)

    post_idea: str = Field(default="", alias="postIdea")
    style: str = Field(default=DEFAULT_STYLE)
    values: dict[str, Any] = Field(default_factory=dict)

    def to_form_state(self) -> FormState:
        return FormState(post_idea=self.post_idea, style=self.style, values=dict(self.values))


class SelectStyleRequest(BaseModel):
    """Current form values to carry across a style change."""

    model_config = ConfigDict(populate_by_name=True)

    post_idea: str = Field(default="", alias="postIdea")
    values: dict[str, Any] = Field(default_factory=dict)


class ValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)


class GenerateResponse(BaseModel):
    """Successful generation.

    Attributes:
        success: Always ``True``.
        image: Data URI of the generated image.
        filename: Suggested file name for downloads.
    """

    success: bool = True
    image: str
    filename: str
