"""Flows for illustration-led and 3D styles.

The collage, handcrafted and maximalist flows ask for headline copy first;
the isometric cityscape and hyper-realistic phone flows render directly from
the inputs.
"""

from .base import FlowInput, GenerationFlow, HeadlineCopy, flow_registry


class _HeadlineCopyFlow(GenerationFlow):
    """Shared copy step for flows that use :class:`HeadlineCopy`."""

    copy_model = HeadlineCopy
    copywriter = "You are an expert social media copywriter."

    def build_copy_prompt(self, params: FlowInput) -> str:
        return (
            f"{self.copywriter}\n"
            f'Post Idea: "{params.post_idea}"\n'
            "Write a bold headline, one short supporting line and a short call to action. "
            "Answer in the requested JSON format."
        )


class AbstractCollageInput(FlowInput):
    emotive_theme: str


@flow_registry.register
class AbstractCollageFlow(_HeadlineCopyFlow):
    name = "abstract-collage"
    description = "Raw, expressive mixed-media collage"
    input_model = AbstractCollageInput
    copywriter = "You are an avant-garde artist creating copy for a zine cover."

    def build_image_prompt(self, params: AbstractCollageInput, copy: HeadlineCopy) -> str:
        return f"""Design a square (1:1) social media post in a raw, expressive mixed-media collage style.

Composition:
- Layered fragments of torn paper, newspaper clippings, painted shapes and cut-out facial forms.
- A highly abstracted face or figure built from paper shapes, asymmetric and surreal.

Color & Texture:
- Electric blue, mustard yellow, cherry red, burnt orange, forest green and stark black/white.
- Visible brushstrokes, charcoal scribbles, ink blots and crumpled paper.

Emotive Theme: the collage should convey "{params.emotive_theme}".

Content:
- Headline over a dark fragment: "{copy.headline}"
- Supporting line integrated into the paper: "{copy.supporting_text}"
- CTA on a faux-tape label: "{copy.cta_text}"

Overall: visually arresting, raw yet artful, like a printed zine cover."""


class HandcraftedInput(FlowInput):
    illustrative_motifs: str


@flow_registry.register
class HandcraftedFlow(_HeadlineCopyFlow):
    name = "handcrafted"
    description = "Organic, analog illustration with hand-made texture"
    input_model = HandcraftedInput
    copywriter = "You are a copywriter for an artisan brand that values handmade quality."

    def build_image_prompt(self, params: HandcraftedInput, copy: HeadlineCopy) -> str:
        return f"""Create a 1:1 square social media post in a handcrafted, organic analog graphic style.

Visual Style:
- Hand-drawn, sketchy illustrations with slightly wobbly ink or pencil lines.
- Natural paper texture (cotton, kraft or sketchbook) with light ink blotches.

Color Palette: clay orange, olive green, muted mustard, dusty rose and warm gray. No neon.

Typography: handwritten and letterpress-style type with small annotations and arrows.

Content:
- Headline: "{copy.headline}" in an all-caps brush or distressed serif.
- Supporting text: "{copy.supporting_text}"
- Call to action on a hand-drawn tag: "{copy.cta_text}"

Illustrative Motifs: {params.illustrative_motifs}.

Overall: warm, human-centred, like a page from an artist's journal."""


class MaximalistInput(FlowInput):
    scene_description: str


@flow_registry.register
class MaximalistFlow(_HeadlineCopyFlow):
    name = "maximalist"
    description = "Rich, detailed storybook illustration"
    input_model = MaximalistInput
    copywriter = "You are a whimsical storyteller and artist."

    def build_image_prompt(self, params: MaximalistInput, copy: HeadlineCopy) -> str:
        return f"""Design a square (1:1) social media post in a rich, detailed Maximalist Illustration style.

Composition:
- Centre the composition around this scene: {params.scene_description}.
- Fill the canvas with detail while keeping clear focal points; layered textures and visible linework.

Color Palette: jewel tones, rich pastels and natural tones in harmony. No flat monotones.

Typography: integrate text into the scene (a banner, a book cover, a sign), always legible.

Content:
- Headline: "{copy.headline}"
- Supporting text: "{copy.supporting_text}"
- Call to action (e.g. on a signpost): "{copy.cta_text}"

Tone: rich, expressive and full of wonder."""


class IsometricCityscapeInput(FlowInput):
    company_name: str


@flow_registry.register
class IsometricCityscapeFlow(GenerationFlow):
    name = "isometric-cityscape"
    description = "Isometric 3D smart city with the brand as a landmark"
    input_model = IsometricCityscapeInput

    def build_image_prompt(self, params: IsometricCityscapeInput, copy: None) -> str:
        return f"""Create an ultra-detailed, isometric 3D render of a futuristic smart city, square (1:1).

City: emerges from a cut-out landmass of a light cyan-blue world map (#B3E5FC). Sleek buildings in
soft grey (#B0BEC5) and white with neon blue highlights.

Tech: large 3D tech logos in the skyline (Node.js, React, HTML/CSS) and floating screens with code
snippets and blue-toned graphs. Glowing "SMART ROADS" with a monorail and autonomous cars.

Theme of the post: {params.post_idea}.

Brand: the company name "{params.company_name}" as a massive 3D architectural structure along the
central boulevard.

Finish: twilight navy (#1A237E) to black sky, cyan glow accents (#00B0FF), subtle bloom, isometric
camera at 30-45 degrees, crisp and high resolution."""


class HyperRealisticInput(FlowInput):
    company_name: str
    designer_name: str


@flow_registry.register
class HyperRealisticFlow(GenerationFlow):
    name = "hyper-realistic"
    description = "DSLR-quality smartphone mockup with a micro-world on screen"
    input_model = HyperRealisticInput

    def build_image_prompt(self, params: HyperRealisticInput, copy: None) -> str:
        return f"""Create a hyper-realistic DSLR-quality photo of a sleek smartphone on a reflective black glass
surface in a neon-lit workspace. Square (1:1) aspect ratio.

The screen shows a dynamic 3D micro-world representing: "{params.post_idea}". Floating UI mockups,
scrolling code snippets, dashboard widgets and orbiting icons for SEO, analytics and eCommerce.

The company name "{params.company_name}" is displayed in glowing 3D text within the micro-world.

Near the bottom bezel, in a minimal elegant font: "Designed by {params.designer_name}".

Lighting: neon blues, soft purples and ambient whites with holographic reflections on the glass."""
