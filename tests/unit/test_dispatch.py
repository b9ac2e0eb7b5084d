"""Tests for instagenius.core.dispatch — style dispatch.

Tests cover:
- Input extraction: only the style's fields, renamed where mapped.
- Success and failure mapping of operation outcomes.
- Unsupported styles never reach a backend operation.
- ``submit`` validates before dispatching.
"""

from __future__ import annotations

import asyncio

import pytest

from instagenius.core.dispatch import StyleDispatcher, build_operation_inputs
from instagenius.core.models import (
    GENERIC_GENERATION_MESSAGE,
    NO_IMAGE_MESSAGE,
    UNSUPPORTED_STYLE_MESSAGE,
    FormState,
    GenerationFailure,
    GenerationSuccess,
    ValidationFailure,
)
from instagenius.core.styles import style_registry

ALL_STYLE_IDS = style_registry.list_available()


class TestBuildOperationInputs:
    """Test extraction of operation inputs from the form."""

    def test_bold_minimalist_inputs(self, valid_form_state: FormState):
        inputs = build_operation_inputs(style_registry.get("bold-minimalist"), valid_form_state)
        assert inputs == {
            "postIdea": valid_form_state.post_idea,
            "colorPalette": "navy-orange",
            "fontStyle": "modern-sans-serif",
        }

    def test_carousel_renames_color_palette(self, make_valid_form):
        form = make_valid_form("multi-slide-carousel", colorPalette="electric purple")
        inputs = build_operation_inputs(style_registry.get("multi-slide-carousel"), form)
        assert inputs["accentColor"] == "electric purple"
        assert "colorPalette" not in inputs

    def test_excludes_fields_of_other_styles(self, make_valid_form):
        form = make_valid_form("isometric-cityscape", humanSubject="leftover", website="x.com")
        inputs = build_operation_inputs(style_registry.get("isometric-cityscape"), form)
        assert set(inputs) == {"postIdea", "companyName"}

    def test_toggles_always_sent_as_bool(self):
        form = FormState(post_idea="A long enough idea", style="bold-typographic")
        inputs = build_operation_inputs(style_registry.get("bold-typographic"), form)
        assert inputs["highlightAccents"] is False
        assert inputs["backgroundText"] is False
        assert inputs["borderFrame"] is False

    def test_blank_optional_text_omitted(self, make_valid_form):
        form = make_valid_form("pixel-art", imageElements="  ")
        inputs = build_operation_inputs(style_registry.get("pixel-art"), form)
        assert "imageElements" not in inputs

    def test_values_are_stripped(self, make_valid_form):
        form = make_valid_form("retro-minimal", post_idea="  A retro poster idea  ")
        form.values["companyName"] = "  Acme  "
        inputs = build_operation_inputs(style_registry.get("retro-minimal"), form)
        assert inputs["postIdea"] == "A retro poster idea"
        assert inputs["companyName"] == "Acme"


class TestDispatch:
    """Test StyleDispatcher.dispatch outcome mapping."""

    def test_success(self, dispatcher, fake_operations, valid_form_state):
        result = asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert isinstance(result, GenerationSuccess)
        assert result.ok is True
        assert result.image.startswith("data:image/png;base64,")
        assert len(fake_operations["bold-minimalist"].calls) == 1

    @pytest.mark.parametrize("style_id", ALL_STYLE_IDS)
    def test_each_style_calls_only_its_operation(
        self, style_id, dispatcher, fake_operations, make_valid_form
    ):
        asyncio.run(dispatcher.dispatch(style_id, make_valid_form(style_id)))
        called = [name for name, op in fake_operations.items() if op.calls]
        assert called == [style_registry.get(style_id).operation]

    def test_unknown_style_makes_no_call(self, dispatcher, fake_operations, valid_form_state):
        result = asyncio.run(dispatcher.dispatch("watercolor", valid_form_state))
        assert result == GenerationFailure(UNSUPPORTED_STYLE_MESSAGE, reason="unsupported_style")
        assert all(not op.calls for op in fake_operations.values())

    def test_style_without_operation_is_unsupported(self, valid_form_state):
        dispatcher = StyleDispatcher({})
        result = asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert result.reason == "unsupported_style"
        assert dispatcher.supports("bold-minimalist") is False

    @pytest.mark.parametrize("output", [{}, {"image": ""}, {"image": None}, None])
    def test_missing_image_is_failure(self, output, fake_operation_factory, valid_form_state):
        operation = fake_operation_factory(output=output)
        if output is None:
            operation.output = None
        dispatcher = StyleDispatcher({"bold-minimalist": operation})
        result = asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert result == GenerationFailure(NO_IMAGE_MESSAGE)

    @pytest.mark.parametrize("output", ["data:image/png;base64,AAAA", ["image"], 42])
    def test_non_mapping_reply_is_no_image(
        self, output, fake_operation_factory, valid_form_state
    ):
        """A reply that is not a mapping counts as no image rather than raising."""
        operation = fake_operation_factory(output=output)
        dispatcher = StyleDispatcher({"bold-minimalist": operation})
        result = asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert result == GenerationFailure(NO_IMAGE_MESSAGE)

    def test_exception_message_is_used(self, fake_operation_factory, valid_form_state):
        operation = fake_operation_factory(error=RuntimeError("Quota exceeded"))
        dispatcher = StyleDispatcher({"bold-minimalist": operation})
        result = asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert result == GenerationFailure("Quota exceeded")
        assert len(operation.calls) == 1

    def test_exception_without_message_uses_fallback(
        self, fake_operation_factory, valid_form_state
    ):
        operation = fake_operation_factory(error=RuntimeError())
        dispatcher = StyleDispatcher({"bold-minimalist": operation})
        result = asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert result.message == GENERIC_GENERATION_MESSAGE

    def test_failure_is_logged(self, fake_operation_factory, valid_form_state, caplog):
        operation = fake_operation_factory(error=RuntimeError("boom"))
        dispatcher = StyleDispatcher({"bold-minimalist": operation})
        with caplog.at_level("ERROR", logger="instagenius.core.dispatch"):
            asyncio.run(dispatcher.dispatch("bold-minimalist", valid_form_state))
        assert "boom" in caplog.text


class TestSubmit:
    """Test StyleDispatcher.submit (validate, then dispatch)."""

    def test_validation_failure_makes_no_call(self, dispatcher, fake_operations, make_valid_form):
        form = make_valid_form("joyful-grid", website="")
        result = asyncio.run(dispatcher.submit("joyful-grid", form))
        assert isinstance(result, ValidationFailure)
        assert list(result.errors) == ["website"]
        assert not fake_operations["joyful-grid"].calls

    def test_valid_form_dispatches_once(self, dispatcher, fake_operations, valid_form_state):
        result = asyncio.run(dispatcher.submit("bold-minimalist", valid_form_state))
        assert isinstance(result, GenerationSuccess)
        assert len(fake_operations["bold-minimalist"].calls) == 1

    def test_unknown_style_is_failure_not_exception(self, dispatcher, valid_form_state):
        result = asyncio.run(dispatcher.submit("watercolor", valid_form_state))
        assert isinstance(result, GenerationFailure)
        assert result.message == UNSUPPORTED_STYLE_MESSAGE


class TestFromFlows:
    """Test wiring of the production dispatcher."""

    def test_every_style_has_a_flow(self, test_config):
        dispatcher = StyleDispatcher.from_flows(test_config)
        for style_id in ALL_STYLE_IDS:
            assert dispatcher.supports(style_id), style_id
