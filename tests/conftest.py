"""Shared pytest fixtures for InstaGenius tests."""

import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generator

import pytest

from instagenius.core.config import InstageniusConfig
from instagenius.core.dispatch import StyleDispatcher
from instagenius.core.models import FormState
from instagenius.core.styles import StyleDescriptor, style_registry

SAMPLE_IMAGE = "data:image/png;base64,iVBORw0KGgo="
SAMPLE_POST_IDEA = "Launching our new AI-powered analytics dashboard"


class FakeOperation:
    """Stand-in for a generation flow that records every call.

    Args:
        output: Mapping returned by ``generate`` (ignored when ``error`` is set)
        error: Exception raised by ``generate`` instead of returning
    """

    def __init__(self, output: Any = None, error: Exception | None = None):
        self.output = {"image": SAMPLE_IMAGE} if output is None else output
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate(self, inputs: dict[str, Any]) -> Any:
        self.calls.append(inputs)
        if self.error is not None:
            raise self.error
        return self.output


def _sample_value(spec) -> Any:
    if spec.kind == "choice":
        return spec.options[0]
    if spec.kind == "toggle":
        return True
    return f"Sample {spec.label.lower()}"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> InstageniusConfig:
    """Create a test configuration that never reads the developer's .env.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        InstageniusConfig instance for testing
    """
    return InstageniusConfig(
        gemini_api_key="test-key",
        templates_dir=temp_dir,
        _env_file=None,
    )


@pytest.fixture
def fake_operation_factory() -> Callable[..., FakeOperation]:
    """Return the FakeOperation class so tests can build custom fakes."""
    return FakeOperation


@pytest.fixture
def fake_operations() -> dict[str, FakeOperation]:
    """One successful fake operation per style, keyed by operation name."""
    return {style.operation: FakeOperation() for style in style_registry}


@pytest.fixture
def dispatcher(fake_operations: dict[str, FakeOperation]) -> StyleDispatcher:
    """StyleDispatcher wired to the fake operations."""
    return StyleDispatcher(fake_operations)


@pytest.fixture
def make_valid_form() -> Callable[..., FormState]:
    """Build a form state that passes validation for a given style.

    Every field of the style gets a sample value (first option for choices,
    ``True`` for toggles); keyword arguments override individual values.
    """

    def _make(style_id: str, post_idea: str = SAMPLE_POST_IDEA, **overrides: Any) -> FormState:
        style: StyleDescriptor = style_registry.get(style_id)
        values = {spec.name: _sample_value(spec) for spec in style.fields}
        values.update(overrides)
        return FormState(post_idea=post_idea, style=style_id, values=values)

    return _make


@pytest.fixture
def valid_form_state(make_valid_form) -> FormState:
    """A valid bold-minimalist form.

    Returns:
        FormState with the post idea and both required fields set
    """
    return make_valid_form(
        "bold-minimalist", colorPalette="navy-orange", fontStyle="modern-sans-serif"
    )


@pytest.fixture
def test_client(dispatcher: StyleDispatcher):
    """FastAPI TestClient with the dispatcher replaced by fakes.

    The lifespan runs first (creating the real dispatcher), then the fake
    dispatcher is swapped in so no request reaches the Gemini API.
    """
    from fastapi.testclient import TestClient

    from instagenius.api.main import app

    with TestClient(app) as client:
        app.state.dispatcher = dispatcher
        yield client
