"""Flows for typography-led and minimal styles.

- ``bold-minimalist``: single-step render, no copy
- ``pixel-art``: 8-bit retro-futurism
- ``textured-grain``: grain/noise overlay with a 2-4 colour palette
- ``retro-minimal``: editorial grid with a vintage photo
- ``bold-typographic``: four-line direct-question typography
"""

from pydantic import BaseModel, Field

from .base import FlowInput, GenerationFlow, HeadlineCopy, flow_registry

# ---------------------------------------------------------------------------
# Palette descriptions referenced by the prompts.
# ---------------------------------------------------------------------------

_BOLD_MINIMALIST_PALETTES = {
    "navy-orange": "deep navy (#0B1F3A) with a single vibrant orange (#FF7A00) accent",
    "black-white": "pure black (#000000) and white (#FFFFFF) only",
    "red-cream": "warm cream (#F5EFE0) with a bold signal red (#D7263D) accent",
    "forest-gold": "dark forest green (#1B3B2F) with a muted gold (#C9A227) accent",
}

_BOLD_MINIMALIST_FONTS = {
    "modern-sans-serif": "a clean, modern geometric sans-serif such as Inter or Poppins",
    "classic-serif": "an elegant high-contrast serif such as Playfair Display",
    "condensed-display": "a tall condensed display face such as Bebas Neue",
    "geometric": "a precise geometric typeface such as Futura",
}

_PIXEL_ART_PALETTES = {
    "Neon Pink & Electric Blue": (
        "a deep black (#000000) or midnight purple (#1A001A) background with neon pink "
        "(#FF00FF) and electric blue (#00FFFF) for text, borders and visual elements"
    ),
    "Bright Yellow & VHS Green": (
        "a dark retro background with bright yellow (#FFFF00) and VHS green (#00FF00) accents"
    ),
    "Electric Blue & Bright Yellow": (
        "a dark background with electric blue (#00FFFF) and bright yellow (#FFFF00) "
        "for high-contrast elements"
    ),
}

_GRAIN_PALETTES = {
    "muted-tones": "desaturated dusty rust, faded navy, parchment and deep charcoal",
    "bold-vintage": (
        "bold vintage colours softened by texture: tomato red, mustard yellow and cobalt blue"
    ),
}


def _describe(palettes: dict[str, str], value: str) -> str:
    """Expand a known palette key, or pass free text through unchanged."""
    return palettes.get(value, value)


# ---------------------------------------------------------------------------
# Bold minimalist
# ---------------------------------------------------------------------------


class BoldMinimalistInput(FlowInput):
    color_palette: str
    font_style: str


@flow_registry.register
class BoldMinimalistFlow(GenerationFlow):
    name = "bold-minimalist"
    description = "Simple, impactful minimalist image in a single render step"
    input_model = BoldMinimalistInput

    def build_image_prompt(self, params: BoldMinimalistInput, copy: None) -> str:
        return (
            "Generate a bold minimalist square (1:1) image for the following social media "
            f"post idea: {params.post_idea}.\n\n"
            f"- Colour palette: {_describe(_BOLD_MINIMALIST_PALETTES, params.color_palette)}.\n"
            f"- Typography: {_describe(_BOLD_MINIMALIST_FONTS, params.font_style)}; "
            "at most one short line of text.\n"
            "- One strong focal shape or object, generous negative space, flat colour fields.\n"
            "The image should be simple, impactful, and visually striking."
        )


# ---------------------------------------------------------------------------
# Pixel art
# ---------------------------------------------------------------------------


class PixelArtInput(FlowInput):
    color_palette: str
    image_elements: str | None = None


@flow_registry.register
class PixelArtFlow(GenerationFlow):
    name = "pixel-art"
    description = "8-bit retro-futurism with an arcade-style call to action"
    input_model = PixelArtInput
    copy_model = HeadlineCopy

    def build_copy_prompt(self, params: PixelArtInput) -> str:
        return (
            "You are a creative copywriter for a retro-themed arcade.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write a short ALL-CAPS headline, one supporting line and a 1-3 word call to "
            "action (e.g. \"PRESS START\"). Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: PixelArtInput, copy: HeadlineCopy) -> str:
        elements = params.image_elements or "a floppy disk and a joystick"
        return f"""Create a square (1:1) social media post image in a bold Pixel Art Retro-Futurism style.

Core Aesthetic:
- Pixelated 8-bit/16-bit visuals; a blend of arcade graphics and 80s futuristic UI.

Color Palette:
- Use {_describe(_PIXEL_ART_PALETTES, params.color_palette)}.
- Keep limited colour depth, true to pixel art restrictions.

Content:
- Headline (top): "{copy.headline}" in a large, bold, blocky pixel font.
- Supporting text (under the headline): "{copy.supporting_text}".
- CTA button (bottom-right): a rectangular pixel-style button reading "{copy.cta_text}".

Visual Enhancements:
- Subtle VHS static or CRT scanlines in the background.
- Small pixel icons like {elements} at about 30% opacity.
- Light neon glow or glitch edges.

Overall Vibe: 1980s arcade meets futuristic UI; energetic, bold and tech-savvy."""


# ---------------------------------------------------------------------------
# Textured grain
# ---------------------------------------------------------------------------


class TexturedGrainInput(FlowInput):
    color_palette: str
    image_elements: str | None = None


@flow_registry.register
class TexturedGrainFlow(GenerationFlow):
    name = "textured-grain"
    description = "Tactile grain overlay on a restrained palette"
    input_model = TexturedGrainInput
    copy_model = HeadlineCopy

    def build_copy_prompt(self, params: TexturedGrainInput) -> str:
        return (
            "You are a creative copywriter for a design studio that specializes in authentic, "
            "tactile branding.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write an uppercase headline, one supporting sentence and a short call to action. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: TexturedGrainInput, copy: HeadlineCopy) -> str:
        if params.image_elements:
            shapes = f"Include simple block shapes like: {params.image_elements}."
        else:
            shapes = "Do not include complex graphics; a rectangle frame or underline bar is fine."
        return f"""Create a square (1:1) social media post image in the "Textured Grains" design style.

Visual Style & Texture:
- A uniform, prominent grain overlay mimicking rough paper, silkscreen or aged print.
- Text and shapes absorb the texture for a printed, stamped look.

Color Palette (2-4 colours only):
- {_describe(_GRAIN_PALETTES, params.color_palette)}.
- Off-white, light beige or dusty paper background.

Content:
- Headline (top): "{copy.headline}" in a bold uppercase sans-serif.
- Supporting text (below): "{copy.supporting_text}".
- CTA (bottom): a textured pill button reading "{copy.cta_text}".

Layout:
- Minimal composition with ample negative space. {shapes}
- Slight misalignment or edge bleed for an analog feel.

Tone: authentic, grounded, imperfect and tactile."""


# ---------------------------------------------------------------------------
# Retro minimal
# ---------------------------------------------------------------------------


class RetroMinimalInput(FlowInput):
    color_palette: str
    company_name: str


class RetroMinimalCopy(BaseModel):
    headline: str = Field(..., description="A short, impactful headline.")
    secondary_text: str = Field(..., description="A brief uppercase info line.")


@flow_registry.register
class RetroMinimalFlow(GenerationFlow):
    name = "retro-minimal"
    description = "Editorial grid on a solid colour with a vintage photograph"
    input_model = RetroMinimalInput
    copy_model = RetroMinimalCopy

    def build_copy_prompt(self, params: RetroMinimalInput) -> str:
        return (
            "You are a minimalist designer with a love for retro aesthetics.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write a short headline and a brief secondary info line. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: RetroMinimalInput, copy: RetroMinimalCopy) -> str:
        return f"""Design a square (1:1) social media post in a retro-minimalist grid style.

Background:
- A solid, bold, saturated colour: "{params.color_palette}".
- A subtle evenly spaced grid of thin off-white lines.

Vintage Visual:
- A central vintage photograph with slight desaturation and film grain, integrated into the grid.

Typography:
- Clean bold sans-serif (Helvetica Neue, Futura or Montserrat).
- Headline: "{copy.headline}", large, in white or light beige.
- Secondary text: "{copy.secondary_text}", small and uppercase in a corner.

Branding:
- Company name "{params.company_name}" in small spaced-out caps at the bottom or a top corner.

Goals: clean, editorial, 1970s-1990s nostalgia that still feels premium."""


# ---------------------------------------------------------------------------
# Bold typographic
# ---------------------------------------------------------------------------


class BoldTypographicInput(FlowInput):
    background_image_theme: str | None = None
    highlight_accents: bool = False
    background_text: bool = False
    border_frame: bool = False


class TypographicCopy(BaseModel):
    line1: str = Field(..., description="Short opener, small and regular weight.")
    line2: str = Field(..., description="Provocative question, very large.")
    line3: str = Field(..., description="Bridging phrase, medium and light.")
    line4: str = Field(..., description="Punchline, huge and extra bold.")


@flow_registry.register
class BoldTypographicFlow(GenerationFlow):
    name = "bold-typographic"
    description = "Text-only direct-question post with dramatic weight contrast"
    input_model = BoldTypographicInput
    copy_model = TypographicCopy

    def build_copy_prompt(self, params: BoldTypographicInput) -> str:
        return (
            "You are a provocative marketing copywriter specializing in high-impact, "
            "direct-questioning ads.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write four short lines that build tension and end on a punchline. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: BoldTypographicInput, copy: TypographicCopy) -> str:
        lines = [
            "Create a high-impact, text-focused square (1:1) social media post in a "
            '"Bold Typographic Impact" direct-questioning style.',
            "",
            "Core Style:",
            "- Clean geometric sans-serif (Helvetica, Inter or Montserrat) with dramatic size "
            "and weight contrast.",
        ]
        theme = params.background_image_theme
        if theme and theme != "none":
            lines.append(
                f'- Background: a dark, subtle, atmospheric image with the theme "{theme}"; '
                "it must never overpower the text."
            )
        else:
            lines.append("- Background: solid deep black (#000000).")
        lines.append("- Primary text colour: pure white (#FFFFFF).")
        if params.highlight_accents:
            lines.append(
                "- Use off-white gray (#AAAAAA) for secondary lines and a soft glow on the most "
                "impactful words."
            )
        lines += [
            "",
            "Text Layout (use this exact text, centre-aligned):",
            f'- Line 1 (small, regular): "{copy.line1}"',
            f'- Line 2 (very large, extra bold): "{copy.line2}"',
            f'- Line 3 (medium, light): "{copy.line3}"',
            f'- Line 4 (huge, extra bold, wide letter spacing): "{copy.line4}"',
        ]
        if params.background_text:
            lines.append(
                "- Add a barely visible background layer repeating a relevant phrase "
                "diagonally in #111111."
            )
        if params.border_frame:
            lines.append("- Add a thin off-white border frame around the content.")
        lines += [
            "",
            "No icons or illustrations. Authoritative, urgent, minimal and modern.",
        ]
        return "\n".join(lines)
