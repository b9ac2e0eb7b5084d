"""Tests for instagenius.flows — the per-style Gemini flows.

A fake client stands in for :class:`~instagenius.core.gemini.GeminiClient`
so prompts can be inspected without network access.
"""

from __future__ import annotations

import asyncio

import pytest
from pydantic import BaseModel

from instagenius.core.dispatch import build_operation_inputs
from instagenius.core.styles import style_registry
from instagenius.flows import GenerationError, GenerationFlow, flow_registry
from instagenius.flows.business import CorporateCopy

ALL_STYLE_IDS = style_registry.list_available()
FAKE_IMAGE = "data:image/png;base64,ZmFrZQ=="


class FakeGeminiClient:
    """Records prompts and returns canned copy and a fixed image."""

    def __init__(self, image: str = FAKE_IMAGE):
        self.image = image
        self.copy_prompts: list[tuple[str, type[BaseModel]]] = []
        self.image_prompts: list[str] = []

    async def generate_copy(self, prompt: str, schema: type[BaseModel]) -> BaseModel:
        self.copy_prompts.append((prompt, schema))
        data = {}
        for name, field in schema.model_fields.items():
            if field.annotation == list[str]:
                data[name] = ["Fast setup", "Secure by default", "Scales with you"]
            else:
                data[name] = f"<{name}>"
        return schema.model_validate(data)

    async def generate_image(self, prompt: str) -> str:
        self.image_prompts.append(prompt)
        return self.image


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


def run_flow(style_id: str, form, client: FakeGeminiClient) -> dict:
    style = style_registry.get(style_id)
    flow = flow_registry.instantiate(style.operation, client)
    return asyncio.run(flow.generate(build_operation_inputs(style, form)))


class TestFlowRegistry:
    """Test the flow registry."""

    def test_one_flow_per_style(self):
        assert set(flow_registry.list_available()) == {s.operation for s in style_registry}

    def test_instantiate_unknown_flow(self, fake_client):
        with pytest.raises(KeyError, match="not found"):
            flow_registry.instantiate("watercolor", fake_client)

    def test_get_flow_class(self):
        flow_class = flow_registry.get_flow_class("joyful-grid")
        assert issubclass(flow_class, GenerationFlow)
        assert flow_registry.get_flow_class("watercolor") is None

    def test_flow_info(self, fake_client):
        info = flow_registry.instantiate("power-graphic", fake_client).get_flow_info()
        assert info["name"] == "power-graphic"
        assert info["uses_copy"] is True
        assert "includeQRCode" in info["inputs"]
        assert "organizationName" in info["inputs"]

    def test_bold_minimalist_skips_copy(self, fake_client):
        info = flow_registry.instantiate("bold-minimalist", fake_client).get_flow_info()
        assert info["uses_copy"] is False


class TestFlowsAcceptStyleInputs:
    """Every style's dispatched inputs are accepted by its flow."""

    @pytest.mark.parametrize("style_id", ALL_STYLE_IDS)
    def test_generate_returns_image(self, style_id, make_valid_form, fake_client):
        result = run_flow(style_id, make_valid_form(style_id), fake_client)
        assert result == {"image": FAKE_IMAGE}
        assert len(fake_client.image_prompts) == 1

    @pytest.mark.parametrize("style_id", ALL_STYLE_IDS)
    def test_post_idea_reaches_a_prompt(self, style_id, make_valid_form, fake_client):
        form = make_valid_form(style_id, post_idea="Our unique launch idea for March")
        run_flow(style_id, form, fake_client)
        prompts = [p for p, _ in fake_client.copy_prompts] + fake_client.image_prompts
        assert any("Our unique launch idea for March" in p for p in prompts)


class TestFlowPrompts:
    """Spot checks on prompt composition."""

    def test_bold_minimalist_single_step(self, valid_form_state, fake_client):
        run_flow("bold-minimalist", valid_form_state, fake_client)
        assert fake_client.copy_prompts == []
        prompt = fake_client.image_prompts[0]
        assert "#FF7A00" in prompt
        assert "sans-serif" in prompt

    def test_copy_is_used_in_image_prompt(self, make_valid_form, fake_client):
        run_flow("joyful-grid", make_valid_form("joyful-grid"), fake_client)
        prompt = fake_client.image_prompts[0]
        assert '"<headline>"' in prompt
        assert '"<tagline>"' in prompt

    def test_corporate_features_listed(self, make_valid_form, fake_client):
        run_flow("corporate-gradient", make_valid_form("corporate-gradient"), fake_client)
        assert fake_client.copy_prompts[0][1] is CorporateCopy
        assert "Secure by default" in fake_client.image_prompts[0]

    def test_qr_code_toggle(self, make_valid_form, fake_client):
        run_flow("power-graphic", make_valid_form("power-graphic", includeQRCode=True), fake_client)
        run_flow("power-graphic", make_valid_form("power-graphic", includeQRCode=False), fake_client)
        with_qr, without_qr = fake_client.image_prompts
        assert "SCAN TO CONNECT" in with_qr
        assert "SCAN TO CONNECT" not in without_qr

    def test_carousel_accent_color(self, make_valid_form, fake_client):
        form = make_valid_form("multi-slide-carousel", colorPalette="teal to lime")
        run_flow("multi-slide-carousel", form, fake_client)
        assert "teal to lime" in fake_client.image_prompts[0]

    def test_bold_typographic_toggles(self, fake_client, make_valid_form):
        form = make_valid_form(
            "bold-typographic",
            backgroundImageTheme="stormy sky",
            highlightAccents=False,
            backgroundText=True,
            borderFrame=False,
        )
        run_flow("bold-typographic", form, fake_client)
        prompt = fake_client.image_prompts[0]
        assert "stormy sky" in prompt
        assert "#111111" in prompt
        assert "border frame" not in prompt

    def test_modular_workflow_layout(self, make_valid_form, fake_client):
        form = make_valid_form("modular-workflow", layout="Vertical", launchIcon="rocket")
        run_flow("modular-workflow", form, fake_client)
        prompt = fake_client.image_prompts[0]
        assert "top to bottom" in prompt
        assert "rocket icon" in prompt


class TestFlowErrors:
    """Invalid inputs and backend failures surface as GenerationError."""

    def test_missing_required_input(self, fake_client):
        flow = flow_registry.instantiate("retro-minimal", fake_client)
        with pytest.raises(GenerationError, match="Invalid input for retro-minimal"):
            asyncio.run(flow.generate({"postIdea": "A valid idea", "colorPalette": "Terracotta"}))
        assert fake_client.image_prompts == []

    def test_unexpected_input_rejected(self, fake_client):
        flow = flow_registry.instantiate("isometric-cityscape", fake_client)
        with pytest.raises(GenerationError):
            asyncio.run(
                flow.generate(
                    {"postIdea": "A valid idea", "companyName": "Acme", "website": "x.com"}
                )
            )

    def test_backend_error_propagates(self, fake_client):
        async def failing(prompt: str) -> str:
            raise GenerationError("No image was generated.")

        fake_client.generate_image = failing
        flow = flow_registry.instantiate("handcrafted", fake_client)
        with pytest.raises(GenerationError, match="No image was generated."):
            asyncio.run(
                flow.generate({"postIdea": "A valid idea", "illustrativeMotifs": "leaves"})
            )
