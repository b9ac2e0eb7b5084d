"""Flows for business, tech and marketing styles.

All of these ask the text model for copy before rendering.  Several accept a
human subject, and most can reserve a corner for a QR code.
"""

from pydantic import BaseModel, Field

from .base import FlowInput, GenerationFlow, flow_registry

_QR_CODE_LINE = (
    'Reserve a clean bottom corner for a QR code placeholder labelled "SCAN TO CONNECT".'
)


def _qr_code(enabled: bool) -> str:
    return _QR_CODE_LINE if enabled else "Do not include a QR code."


# ---------------------------------------------------------------------------
# Corporate gradient
# ---------------------------------------------------------------------------

_CORPORATE_GRADIENTS = {
    "Deep blue to vibrant orange/yellow": "deep blue (#001F3F) to vibrant orange (#FF8C00)",
    "Royal purple to sky blue": "royal purple (#4B0082) to sky blue (#87CEEB)",
    "Cool teal to steel gray": "cool teal (#008080) to steel gray (#708090)",
}


class CorporateGradientInput(FlowInput):
    color_palette: str
    human_subject: str
    include_qr_code: bool = Field(default=False, alias="includeQRCode")


class CorporateCopy(BaseModel):
    headline: str = Field(..., description="A confident, benefit-led headline.")
    subheadline: str = Field(..., description="One line expanding on the headline.")
    features: list[str] = Field(..., description="Three to five short feature bullets.")
    cta_text: str = Field(..., description="A short call to action.")


@flow_registry.register
class CorporateGradientFlow(GenerationFlow):
    name = "corporate-gradient"
    description = "Polished corporate layout on a modern gradient"
    input_model = CorporateGradientInput
    copy_model = CorporateCopy

    def build_copy_prompt(self, params: CorporateGradientInput) -> str:
        return (
            "You are a B2B marketing copywriter for a modern technology company.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write a headline, a subheadline, three to five short feature bullets and a call "
            "to action. Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: CorporateGradientInput, copy: CorporateCopy) -> str:
        gradient = _CORPORATE_GRADIENTS.get(params.color_palette, params.color_palette)
        features = "\n".join(f"  - {feature}" for feature in copy.features)
        return f"""Design a polished, professional square (1:1) corporate social media post.

Background: a smooth diagonal gradient from {gradient} with soft abstract light shapes.

Subject: {params.human_subject}, photographed professionally, cut out cleanly and placed on the
right-hand side of the canvas.

Content (left-hand side, clean sans-serif, white text):
- Headline: "{copy.headline}"
- Subheadline: "{copy.subheadline}"
- Feature list with simple check icons:
{features}
- CTA button: "{copy.cta_text}"

{_qr_code(params.include_qr_code)}

Overall: trustworthy, modern and premium; generous spacing and a clear visual hierarchy."""


# ---------------------------------------------------------------------------
# Optimistic business
# ---------------------------------------------------------------------------


class OptimisticBusinessInput(FlowInput):
    color_palette: str
    human_subject: str


class OptimisticCopy(BaseModel):
    tagline: str = Field(..., description="A short uplifting tagline.")
    headline: str = Field(..., description="An action-oriented headline.")
    cta_text: str = Field(..., description="A short call to action.")


@flow_registry.register
class OptimisticBusinessFlow(GenerationFlow):
    name = "optimistic-business"
    description = "Bright, action-oriented growth imagery"
    input_model = OptimisticBusinessInput
    copy_model = OptimisticCopy

    def build_copy_prompt(self, params: OptimisticBusinessInput) -> str:
        return (
            "You are an upbeat marketing copywriter who writes about growth and success.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write a short tagline, an action-oriented headline and a call to action. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: OptimisticBusinessInput, copy: OptimisticCopy) -> str:
        return f"""Create a bright, optimistic square (1:1) social media post about business growth.

Background: a luminous gradient of {params.color_palette}, with a soft sunburst radiating from
behind the subject.

Subject: {params.human_subject}, smiling and in motion, conveying confidence and momentum.

Supporting graphics: upward arrows, rising bar charts and light geometric accents.

Content:
- Tagline (small, top): "{copy.tagline}"
- Headline (large, bold): "{copy.headline}"
- CTA in a rounded button: "{copy.cta_text}"

Tone: energetic, positive, forward-looking and clean."""


# ---------------------------------------------------------------------------
# Next-gen arena
# ---------------------------------------------------------------------------

_ARENA_ACCENTS = {
    "Electric Cyan": "electric cyan (#00FFFF)",
    "Neon Magenta": "neon magenta (#FF00FF)",
    "Lime Volt": "lime volt (#CCFF00)",
}


class NextGenArenaInput(FlowInput):
    color_palette: str
    human_subject: str
    include_icons: bool = False
    include_particles: bool = False
    include_qr_code: bool = Field(default=False, alias="includeQRCode")


class ArenaCopy(BaseModel):
    main_callout: str = Field(..., description="An explosive two to four word callout.")
    underline_text: str = Field(..., description="A short line under the callout.")
    website: str = Field(..., description="A plausible website address.")
    cta: str = Field(..., description="A gaming-style call to action.")
    brand_name: str = Field(..., description="A short brand name.")


@flow_registry.register
class NextGenArenaFlow(GenerationFlow):
    name = "next-gen-arena"
    description = "High-energy, game-inspired tech graphic"
    input_model = NextGenArenaInput
    copy_model = ArenaCopy

    def build_copy_prompt(self, params: NextGenArenaInput) -> str:
        return (
            "You are a copywriter for an esports and gaming-tech brand.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write a main callout, an underline text, a website, a call to action and a brand "
            "name. Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: NextGenArenaInput, copy: ArenaCopy) -> str:
        accent = _ARENA_ACCENTS.get(params.color_palette, params.color_palette)
        lines = [
            "Create a high-energy, game-inspired square (1:1) tech graphic.",
            "",
            "Background: near-black (#0E0E0E) with a subtle chevron pattern and diagonal speed "
            "lines.",
            f"Accent colour: {accent} for glows, outlines and highlights.",
            "",
            f"Subject: {params.human_subject}, dramatically lit with a rim light in the accent "
            "colour, in a dynamic pose.",
            "",
            "Typography: heavy, italic, wide display type with a slight bevel.",
            f'- Main callout: "{copy.main_callout}"',
            f'- Underline text: "{copy.underline_text}"',
            f'- CTA button: "{copy.cta}"',
            f'- Brand name (top-left): "{copy.brand_name}"',
            f'- Website (bottom): "{copy.website}"',
        ]
        if params.include_icons:
            lines.append("Add game icons and HUD overlays (health bars, crosshairs, score panels).")
        if params.include_particles:
            lines.append("Add glowing particles and light streaks in the accent colour.")
        lines += [_qr_code(params.include_qr_code), "", "Overall: bold, competitive and electric."]
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Power graphic
# ---------------------------------------------------------------------------

_POWER_THEMES = {
    "Red Alert": "deep red (#8B0000) paired with warm cream (#F5F0E1)",
    "Blue Wave": "dark ocean blue (#002B36) paired with soft gray (#D3D3D3)",
    "Green Earth": "forest green (#014421) paired with dusty peach (#F4C2A1)",
}


class PowerGraphicInput(FlowInput):
    color_theme: str
    human_subject: str
    organization_name: str
    include_qr_code: bool = Field(default=False, alias="includeQRCode")


class PowerCopy(BaseModel):
    headline: str = Field(..., description="A bold, urgent headline in capitals.")
    secondary_message: str = Field(..., description="A rallying secondary message.")
    subtext: str = Field(..., description="One line of supporting detail.")


@flow_registry.register
class PowerGraphicFlow(GenerationFlow):
    name = "power-graphic"
    description = "Bold activism poster with a dual-pane split layout"
    input_model = PowerGraphicInput
    copy_model = PowerCopy

    def build_copy_prompt(self, params: PowerGraphicInput) -> str:
        return (
            "You are a campaign copywriter for advocacy organisations.\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write an urgent headline, a rallying secondary message and one line of subtext. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: PowerGraphicInput, copy: PowerCopy) -> str:
        theme = _POWER_THEMES.get(params.color_theme, params.color_theme)
        return f"""Design a bold activism-style square (1:1) poster with a dual-pane split layout.

Colour theme: {theme}.

Left pane: {params.human_subject}, in a high-contrast duotone photo treatment with a determined
expression.

Right pane (solid colour block):
- Headline (huge, condensed, uppercase): "{copy.headline}"
- Secondary message: "{copy.secondary_message}"
- Subtext (small): "{copy.subtext}"

Branding: "{params.organization_name}" in the bottom-left corner.

{_qr_code(params.include_qr_code)}

Texture: subtle halftone and print grain. Tone: urgent, empowering, impossible to scroll past."""


# ---------------------------------------------------------------------------
# Joyful grid
# ---------------------------------------------------------------------------

_JOYFUL_THEMES = {
    "Blue & Orange Tech": "soft coral (#FAD2CF), light teal (#B2EBF2) and orange (#FFA500)",
    "Green & Yellow Growth": "mint green, light gray and marigold (#FFCD3C)",
    "Purple & Teal AI": "lavender, light blue and deep teal",
}

_JOYFUL_NICHE_BACKGROUNDS = {
    "Web Development": "blue and white",
    "Lead Generation": "green and yellow",
    "AI Solutions": "purple and gray",
}


class JoyfulGridInput(FlowInput):
    niche: str
    color_theme: str
    human_subject: str
    company_name: str
    website: str


class JoyfulCopy(BaseModel):
    headline: str = Field(..., description="A cheerful, short headline.")
    tagline: str = Field(..., description="A friendly tagline.")
    body_text: str = Field(..., description="One or two short sentences of body copy.")


@flow_registry.register
class JoyfulGridFlow(GenerationFlow):
    name = "joyful-grid"
    description = "Cheerful quadrant layout for tech brands"
    input_model = JoyfulGridInput
    copy_model = JoyfulCopy

    def build_copy_prompt(self, params: JoyfulGridInput) -> str:
        return (
            "You are a friendly social media copywriter for a tech agency.\n"
            f'Post Idea: "{params.post_idea}"\n'
            f'Niche: "{params.niche}"\n'
            "Write a headline, a tagline and short body text. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: JoyfulGridInput, copy: JoyfulCopy) -> str:
        theme = _JOYFUL_THEMES.get(params.color_theme, params.color_theme)
        background = _JOYFUL_NICHE_BACKGROUNDS.get(params.niche, "light and neutral")
        return f"""Create a cheerful, modern square (1:1) social media post on a four-quadrant grid.

Colour theme: {theme}. Use a {background} base to suit the {params.niche} niche.

Grid:
- Top-left: Headline "{copy.headline}" in a rounded, friendly bold sans-serif.
- Top-right: {params.human_subject}, smiling, cut out over a solid colour block.
- Bottom-left: simple flat icons for {params.niche}.
- Bottom-right: tagline "{copy.tagline}" and body text "{copy.body_text}".

Footer bar: "{params.company_name}" on the left and "{params.website}" on the right.

Tone: joyful, approachable and clean, with rounded corners and playful accents."""


# ---------------------------------------------------------------------------
# Modular workflow
# ---------------------------------------------------------------------------

_WORKFLOW_THEMES = {
    "Light Mode": (
        "pure white (#FFFFFF) background, cool grey (#C4C4C4) shapes, muted green (#00B894) "
        "connectors and highlights, charcoal (#333333) text"
    ),
    "Dark Gradient": (
        "dark gradient background from #121212 to #1E1E2F, semi-transparent grey (#444444) "
        "shapes with a subtle glow, neon green (#00FFB2) connectors and highlights, white text"
    ),
}


class ModularWorkflowInput(FlowInput):
    niche: str
    theme: str
    layout: str
    strategy_icon: str
    ideation_icon: str
    launch_icon: str


class WorkflowCopy(BaseModel):
    headline: str = Field(..., description="A short headline describing the process.")


@flow_registry.register
class ModularWorkflowFlow(GenerationFlow):
    name = "modular-workflow"
    description = "Minimal three-step workflow diagram, no human figures"
    input_model = ModularWorkflowInput
    copy_model = WorkflowCopy

    def build_copy_prompt(self, params: ModularWorkflowInput) -> str:
        return (
            "You are a B2B content strategist.\n"
            f'Post Idea: "{params.post_idea}"\n'
            f'Niche: "{params.niche}"\n'
            "Write one short headline for a three-step process diagram. "
            "Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: ModularWorkflowInput, copy: WorkflowCopy) -> str:
        theme = _WORKFLOW_THEMES.get(params.theme, params.theme)
        direction = "left to right" if params.layout == "Horizontal" else "top to bottom"
        return f"""Create a minimal, modular square (1:1) workflow diagram for the {params.niche} niche.

Theme: {theme}.

Headline (top): "{copy.headline}"

Diagram: three rounded modules connected {direction} by clean arrows.
1. STRATEGY, with a {params.strategy_icon} icon
2. IDEATION, with a {params.ideation_icon} icon
3. LAUNCH, with a {params.launch_icon} icon

Rules: flat line icons, consistent stroke width, no human figures, no photographs.

Overall: structured, calm and professional, like a slide from a product deck."""


# ---------------------------------------------------------------------------
# Multi-slide carousel
# ---------------------------------------------------------------------------

_CAROUSEL_SCENES = {
    "Web Development": (
        "a glitchy, broken website with error pop-ups",
        "a sleek, fast, modern UI on a laptop",
    ),
    "Lead Generation": (
        "a leaking sales funnel dripping lost leads",
        "a glowing, well-organised lead pipeline",
    ),
    "AI Solutions": (
        "chaotic manual data entry with paper stacks",
        "a clean AI dashboard surfacing insights",
    ),
}


class MultiSlideCarouselInput(FlowInput):
    niche: str
    accent_color: str


class CarouselCopy(BaseModel):
    hook: str = Field(..., description='A transformation hook, e.g. "FROM CHAOS TO CONVERSION".')
    subheading: str = Field(..., description="A subheading clarifying the value proposition.")


@flow_registry.register
class MultiSlideCarouselFlow(GenerationFlow):
    name = "multi-slide-carousel"
    description = "Before/after transformation opener for a carousel"
    input_model = MultiSlideCarouselInput
    copy_model = CarouselCopy

    def build_copy_prompt(self, params: MultiSlideCarouselInput) -> str:
        return (
            "You are a top-tier marketing strategist specializing in B2B tech.\n"
            f'Post Idea: "{params.post_idea}"\n'
            f'Niche: "{params.niche}"\n'
            "Write a bold hook describing a transformation from a negative state to a positive "
            "one, and a supporting subheading. Answer in the requested JSON format."
        )

    def build_image_prompt(self, params: MultiSlideCarouselInput, copy: CarouselCopy) -> str:
        before, after = _CAROUSEL_SCENES.get(
            params.niche, ("a frustrating, messy status quo", "a polished, successful outcome")
        )
        return f"""Design the first slide of an Instagram carousel, square (1:1), as a before/after split.

Left half (before): {before}, desaturated and slightly chaotic.
Right half (after): {after}, bright, crisp and confident.

Divider: a diagonal ribbon with a gradient in {params.accent_color}, cutting across the centre.

Typography:
- Hook (huge, bold, uppercase, over the ribbon): "{copy.hook}"
- Subheading (below): "{copy.subheading}"
- A small "SWIPE" arrow in the bottom-right corner.

Tone: authoritative and compelling, clearly the opener of a multi-slide story."""
