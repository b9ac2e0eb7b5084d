"""Base classes and registry for generation flows.

A flow is the backend operation behind one visual style.  Every flow has the
same shape: it accepts the style's inputs, optionally asks the text model for
marketing copy, composes an image prompt and asks the image model for a
picture.  The style dispatcher only ever sees the common interface::

    await flow.generate({"postIdea": "...", ...})  ->  {"image": "data:..."}

Flow Anatomy
------------
Each subclass declares:

- ``name``: operation name referenced by ``StyleDescriptor.operation``
- ``input_model``: Pydantic model of the accepted inputs (camelCase keys)
- ``copy_model``: Pydantic model of the copy to request, or None to skip
  the copywriting step
- ``build_copy_prompt()`` / ``build_image_prompt()``: the prompt text

Usage Example
-------------
    >>> from instagenius.flows import flow_registry
    >>> flow = flow_registry.instantiate("joyful-grid", client)
    >>> result = await flow.generate(inputs)
    >>> result["image"][:22]
    'data:image/png;base64,'
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from instagenius.core.gemini import GeminiClient, GenerationError

logger = logging.getLogger(__name__)

__all__ = [
    "FlowInput",
    "FlowRegistry",
    "GenerationError",
    "GenerationFlow",
    "HeadlineCopy",
    "flow_registry",
]


class FlowInput(BaseModel):
    """Base for flow input models.

    Fields are declared in snake_case and accepted under their camelCase form
    names.  Unknown keys are rejected so a flow never silently receives
    fields that belong to another style.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    post_idea: str = Field(..., min_length=1, description="The idea for the social media post.")


class HeadlineCopy(BaseModel):
    """Headline, supporting line and call to action, shared by several flows."""

    headline: str = Field(..., description="A short, punchy headline.")
    supporting_text: str = Field(..., description="One supporting sentence.")
    cta_text: str = Field(..., description="A short call to action.")


class GenerationFlow(ABC):
    """Abstract base class for all generation flows.

    Attributes
    ----------
    name : str
        Operation name (matches ``StyleDescriptor.operation``)
    description : str
        One-line summary
    input_model : type[FlowInput]
        Accepted inputs
    copy_model : type[BaseModel] | None
        Copy requested from the text model before rendering, if any
    client : GeminiClient
        Backend client used for both steps
    """

    name: str = "base"
    description: str = "Base class for generation flows"
    input_model: type[FlowInput] = FlowInput
    copy_model: type[BaseModel] | None = None
    version: str = "0.1.0"

    def __init__(self, client: GeminiClient) -> None:
        self.client = client

    def build_copy_prompt(self, params: FlowInput) -> str:
        """Instructions for the copywriting step (only used with a copy_model)."""
        return (
            "You are an expert social media copywriter.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write concise, on-brand copy and answer in the requested JSON format."
        )

    @abstractmethod
    def build_image_prompt(self, params: FlowInput, copy: BaseModel | None) -> str:
        """Compose the full image prompt from inputs and generated copy."""
        pass

    async def generate(self, inputs: dict[str, Any]) -> dict[str, str]:
        """Run the flow.

        Args:
            inputs: Operation inputs keyed by camelCase name

        Returns:
            ``{"image": <data URI>}``

        Raises:
            GenerationError: If inputs are invalid or a backend step fails
        """
        try:
            params = self.input_model.model_validate(inputs)
        except ValidationError as e:
            raise GenerationError(
                f"Invalid input for {self.name}: {e.error_count()} error(s)"
            ) from e

        copy = None
        if self.copy_model is not None:
            copy = await self.client.generate_copy(self.build_copy_prompt(params), self.copy_model)
            logger.debug(f"{self.name}: copy generated")

        prompt = self.build_image_prompt(params, copy)
        logger.info(f"{self.name}: requesting image ({len(prompt)} chars of prompt)")
        return {"image": await self.client.generate_image(prompt)}

    def get_flow_info(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "inputs": sorted(
                field.alias or name for name, field in self.input_model.model_fields.items()
            ),
            "uses_copy": self.copy_model is not None,
        }


class FlowRegistry:
    """Registry mapping operation names to flow classes.

    Usage
    -----
        >>> flow_registry.register(MyFlow)
        >>> flow = flow_registry.instantiate("my-flow", client)
    """

    def __init__(self) -> None:
        self._flows: dict[str, type[GenerationFlow]] = {}

    def register(self, flow_class: type[GenerationFlow]) -> type[GenerationFlow]:
        """Register a flow class (usable as a class decorator)."""
        if flow_class.name in self._flows:
            logger.warning(f"Flow '{flow_class.name}' is already registered, overwriting")
        self._flows[flow_class.name] = flow_class
        logger.debug(f"Registered flow: {flow_class.name}")
        return flow_class

    def instantiate(self, flow_name: str, client: GeminiClient) -> GenerationFlow:
        """Create an instance of a registered flow.

        Raises
        ------
        KeyError
            If flow_name is not registered
        """
        if flow_name not in self._flows:
            available = ", ".join(self.list_available())
            raise KeyError(f"Flow '{flow_name}' not found. Available flows: {available}")
        return self._flows[flow_name](client)

    def get_flow_class(self, flow_name: str) -> type[GenerationFlow] | None:
        return self._flows.get(flow_name)

    def list_available(self) -> list[str]:
        return list(self._flows.keys())


# Global flow registry instance
flow_registry = FlowRegistry()
