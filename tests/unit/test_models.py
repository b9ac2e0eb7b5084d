"""Tests for instagenius.core.models — form state and outcomes."""

from __future__ import annotations

import dataclasses

import pytest

from instagenius.core.models import (
    DEFAULT_STYLE,
    FormState,
    GenerationFailure,
    GenerationSuccess,
    SubmissionState,
    ValidationFailure,
)


class TestFormState:
    """Test FormState."""

    def test_defaults(self):
        form = FormState()
        assert form.post_idea == ""
        assert form.style == DEFAULT_STYLE
        assert form.values == {}

    def test_values_not_shared_between_instances(self):
        a, b = FormState(), FormState()
        a.values["x"] = 1
        assert b.values == {}

    def test_get_resolves_common_fields(self):
        form = FormState(post_idea="Idea", style="pixel-art", values={"colorPalette": "x"})
        assert form.get("postIdea") == "Idea"
        assert form.get("style") == "pixel-art"
        assert form.get("colorPalette") == "x"
        assert form.get("missing", "fallback") == "fallback"

    def test_to_dict_uses_wire_names(self):
        form = FormState(post_idea="Idea", values={"website": "x.com"})
        assert form.to_dict() == {
            "postIdea": "Idea",
            "style": DEFAULT_STYLE,
            "values": {"website": "x.com"},
        }


class TestSubmissionState:
    """Test the submission state enum."""

    @pytest.mark.parametrize(
        "state",
        [SubmissionState.VALIDATION_FAILED, SubmissionState.SUCCESS, SubmissionState.FAILURE],
    )
    def test_terminal_states(self, state):
        assert state.is_terminal

    @pytest.mark.parametrize(
        "state",
        [SubmissionState.IDLE, SubmissionState.VALIDATING, SubmissionState.DISPATCHING],
    )
    def test_non_terminal_states(self, state):
        assert not state.is_terminal

    def test_values_are_strings(self):
        assert SubmissionState.DISPATCHING == "dispatching"


class TestResults:
    """Test result value objects."""

    def test_ok_flags(self):
        assert GenerationSuccess("data:x").ok is True
        assert GenerationFailure("nope").ok is False
        assert ValidationFailure({"website": "required"}).ok is False

    def test_failure_default_reason(self):
        assert GenerationFailure("nope").reason == "generation_error"

    def test_results_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GenerationSuccess("data:x").image = "other"  # type: ignore[misc]
