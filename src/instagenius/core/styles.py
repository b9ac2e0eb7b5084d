"""Style descriptors and the process-wide style table.

Every visual style the user can pick is described by one frozen
:class:`StyleDescriptor`.  The descriptor lists the style's form fields
(which are required, their options and defaults) and names the backend
operation that renders the style, together with any renaming between form
field names and that operation's input names.

Validation, default handling and dispatch are all driven generically from this
table, so adding a style means adding one descriptor here and one flow in
``instagenius.flows``.

Usage Example
-------------
    >>> from instagenius.core.styles import style_registry
    >>> style = style_registry.get("joyful-grid")
    >>> sorted(style.required_fields)
    ['colorTheme', 'companyName', 'humanSubject', 'niche', 'website']
    >>> style_registry.get("unknown")
    Traceback (most recent call last):
    ...
    UnsupportedStyleError: Selected style is not supported yet.

Notes
-----
- The registry is built once at import time and exposes a read-only mapping
- Field names are shared across styles (``colorPalette`` is used by several);
  options and labels are per style because each style offers its own choices
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from .models import UNSUPPORTED_STYLE_MESSAGE

logger = logging.getLogger(__name__)

FieldKind = Literal["text", "choice", "toggle"]


class UnsupportedStyleError(KeyError):
    """Raised when a style id is not present in the style table."""

    def __init__(self, style_id: str):
        super().__init__(style_id)
        self.style_id = style_id

    def __str__(self) -> str:
        return UNSUPPORTED_STYLE_MESSAGE


@dataclass(frozen=True)
class FieldSpec:
    """One style-specific form field."""

    name: str
    label: str
    kind: FieldKind = "text"
    required: bool = False
    options: tuple[str, ...] = ()
    placeholder: str = ""
    required_message: str = ""

    def __post_init__(self) -> None:
        if self.kind == "toggle" and self.required:
            raise ValueError(f"Toggle field '{self.name}' cannot be required")
        if self.kind == "choice" and not self.options:
            raise ValueError(f"Choice field '{self.name}' needs at least one option")

    @property
    def unset_value(self) -> Any:
        """Value a field takes when it belongs to no selected style."""
        return False if self.kind == "toggle" else None

    @property
    def error_message(self) -> str:
        return self.required_message or f"{self.label} is required for this style."

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "kind": self.kind,
            "required": self.required,
            "options": list(self.options),
            "placeholder": self.placeholder,
        }


@dataclass(frozen=True)
class StyleDescriptor:
    """Everything the validator and dispatcher need to know about a style.

    Attributes
    ----------
    id : str
        Unique key, e.g. ``"bold-minimalist"``
    label : str
        Human-readable name shown in the style picker
    description : str
        One-line summary of the look
    fields : tuple[FieldSpec, ...]
        Style-specific form fields (``postIdea`` is common and not listed)
    defaults : Mapping[str, Any]
        Values applied when the style becomes selected
    operation : str
        Name of the backend flow that renders this style
    field_map : Mapping[str, str]
        Form field name -> operation input name, for renamed fields only
    """

    id: str
    label: str
    description: str
    operation: str
    fields: tuple[FieldSpec, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    field_map: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        names = {f.name for f in self.fields}
        unknown = (set(self.defaults) | set(self.field_map)) - names
        if unknown:
            raise ValueError(f"Style '{self.id}' references unknown fields: {sorted(unknown)}")
        # Freeze the mappings so descriptors cannot be edited after construction
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))
        object.__setattr__(self, "field_map", MappingProxyType(dict(self.field_map)))

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(f.name for f in self.fields)

    @property
    def required_fields(self) -> frozenset[str]:
        return frozenset(f.name for f in self.fields if f.required)

    def get_field(self, name: str) -> FieldSpec | None:
        return next((f for f in self.fields if f.name == name), None)

    def input_name(self, field_name: str) -> str:
        """Operation input name for a form field (renamed or unchanged)."""
        return self.field_map.get(field_name, field_name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields],
            "defaults": dict(self.defaults),
            "requiredFields": sorted(self.required_fields),
        }


class StyleRegistry:
    """Read-only lookup table of style descriptors.

    The registry is populated once from an iterable of descriptors and keeps
    them in a ``MappingProxyType`` so the table cannot change at runtime.
    Insertion order is preserved; it is the order of the style picker.
    """

    def __init__(self, styles: Iterable[StyleDescriptor]) -> None:
        table: dict[str, StyleDescriptor] = {}
        for style in styles:
            if style.id in table:
                raise ValueError(f"Style '{style.id}' is registered twice")
            table[style.id] = style
        self._styles: Mapping[str, StyleDescriptor] = MappingProxyType(table)
        logger.debug(f"Style table built with {len(table)} styles")

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __iter__(self):
        return iter(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)

    @property
    def styles(self) -> Mapping[str, StyleDescriptor]:
        return self._styles

    def get(self, style_id: str) -> StyleDescriptor:
        """Return the descriptor for ``style_id``.

        Raises
        ------
        UnsupportedStyleError
            If ``style_id`` is not in the table
        """
        try:
            return self._styles[style_id]
        except KeyError:
            raise UnsupportedStyleError(style_id) from None

    def list_available(self) -> list[str]:
        return list(self._styles.keys())

    def all_field_specs(self) -> dict[str, FieldSpec]:
        """Every style-specific field across the table, keyed by name.

        When several styles share a field name the first spec wins; callers
        only need the name and the unset value, which agree for shared names.
        """
        specs: dict[str, FieldSpec] = {}
        for style in self._styles.values():
            for spec in style.fields:
                specs.setdefault(spec.name, spec)
        return specs


# ---------------------------------------------------------------------------
# Shared field definitions.
# ---------------------------------------------------------------------------

NICHES = ("Web Development", "Lead Generation", "AI Solutions")

_HUMAN_SUBJECT = FieldSpec(
    "humanSubject",
    "Human subject",
    required=True,
    placeholder="e.g., A confident web developer with a laptop",
)
_COMPANY_NAME = FieldSpec(
    "companyName", "Company name", required=True, placeholder="e.g., Acme Digital"
)
_NICHE = FieldSpec("niche", "Niche", kind="choice", required=True, options=NICHES)
_INCLUDE_QR_CODE = FieldSpec("includeQRCode", "Include QR code area", kind="toggle")


def _palette(*options: str, label: str = "Color palette") -> FieldSpec:
    return FieldSpec("colorPalette", label, kind="choice", required=True, options=options)


def _color_theme(*options: str) -> FieldSpec:
    return FieldSpec("colorTheme", "Color theme", kind="choice", required=True, options=options)


def _image_elements(placeholder: str) -> FieldSpec:
    return FieldSpec("imageElements", "Image elements", placeholder=placeholder)


STYLES: tuple[StyleDescriptor, ...] = (
    StyleDescriptor(
        id="bold-minimalist",
        label="Bold Minimalist",
        description="Simple, impactful compositions with generous negative space.",
        operation="bold-minimalist",
        fields=(
            _palette("navy-orange", "black-white", "red-cream", "forest-gold"),
            FieldSpec(
                "fontStyle",
                "Font style",
                kind="choice",
                required=True,
                options=("modern-sans-serif", "classic-serif", "condensed-display", "geometric"),
            ),
        ),
        defaults={"colorPalette": "navy-orange", "fontStyle": "modern-sans-serif"},
    ),
    StyleDescriptor(
        id="pixel-art",
        label="Pixel Art Retro",
        description="8-bit retro-futurism with neon arcade colors.",
        operation="pixel-art",
        fields=(
            _palette(
                "Neon Pink & Electric Blue",
                "Bright Yellow & VHS Green",
                "Electric Blue & Bright Yellow",
            ),
            _image_elements('e.g., "joystick", "floppy disk"'),
        ),
        defaults={"colorPalette": "Neon Pink & Electric Blue"},
    ),
    StyleDescriptor(
        id="textured-grain",
        label="Textured Grain",
        description="Tactile, film-grain finish with analog warmth.",
        operation="textured-grain",
        fields=(
            _palette("muted-tones", "bold-vintage"),
            _image_elements('e.g., "rectangle frame", "underline bar"'),
        ),
        defaults={"colorPalette": "muted-tones"},
    ),
    StyleDescriptor(
        id="retro-minimal",
        label="Retro Minimal",
        description="Structured grid with vintage photography and a solid backdrop.",
        operation="retro-minimal",
        fields=(
            _palette(
                "Mustard Yellow",
                "Terracotta",
                "Sage Green",
                "Dusty Blue",
                label="Background color",
            ),
            _COMPANY_NAME,
        ),
        defaults={"colorPalette": "Mustard Yellow"},
    ),
    StyleDescriptor(
        id="bold-typographic",
        label="Bold Typographic",
        description="Text-first, high-contrast direct-question posts.",
        operation="bold-typographic",
        fields=(
            FieldSpec(
                "backgroundImageTheme",
                "Background image theme",
                kind="choice",
                options=("none", "city at night", "stormy sky", "abstract texture"),
            ),
            FieldSpec("highlightAccents", "Highlight keywords", kind="toggle"),
            FieldSpec("backgroundText", "Subtle background text layer", kind="toggle"),
            FieldSpec("borderFrame", "Thin border frame", kind="toggle"),
        ),
        defaults={"backgroundImageTheme": "none", "highlightAccents": True},
    ),
    StyleDescriptor(
        id="abstract-collage",
        label="Abstract Collage",
        description="Raw, expressive mixed-media collage.",
        operation="abstract-collage",
        fields=(
            FieldSpec(
                "emotiveTheme",
                "Emotive theme",
                required=True,
                placeholder="e.g., Breaking free from routine",
            ),
        ),
    ),
    StyleDescriptor(
        id="handcrafted",
        label="Handcrafted",
        description="Organic, analog illustration with hand-made texture.",
        operation="handcrafted",
        fields=(
            FieldSpec(
                "illustrativeMotifs",
                "Illustrative motifs",
                required=True,
                placeholder="e.g., leaves, coffee beans, hand-drawn arrows",
            ),
        ),
    ),
    StyleDescriptor(
        id="maximalist",
        label="Maximalist Illustration",
        description="Rich, detailed storybook scenes.",
        operation="maximalist",
        fields=(
            FieldSpec(
                "sceneDescription",
                "Scene description",
                required=True,
                placeholder="e.g., A bustling market in a floating city",
            ),
        ),
    ),
    StyleDescriptor(
        id="isometric-cityscape",
        label="Isometric Cityscape",
        description="Ultra-detailed isometric 3D smart city with your brand as a landmark.",
        operation="isometric-cityscape",
        fields=(_COMPANY_NAME,),
    ),
    StyleDescriptor(
        id="hyper-realistic",
        label="Hyper-Realistic Phone",
        description="DSLR-quality smartphone mockup with a micro-world on screen.",
        operation="hyper-realistic",
        fields=(
            _COMPANY_NAME,
            FieldSpec("designerName", "Designer name", required=True, placeholder="e.g., Jane Doe"),
        ),
    ),
    StyleDescriptor(
        id="corporate-gradient",
        label="Corporate Gradient",
        description="Polished corporate layout on a modern gradient.",
        operation="corporate-gradient",
        fields=(
            _palette(
                "Deep blue to vibrant orange/yellow",
                "Royal purple to sky blue",
                "Cool teal to steel gray",
            ),
            _HUMAN_SUBJECT,
            _INCLUDE_QR_CODE,
        ),
        defaults={"colorPalette": "Deep blue to vibrant orange/yellow"},
    ),
    StyleDescriptor(
        id="optimistic-business",
        label="Optimistic Business",
        description="Bright, action-oriented growth imagery.",
        operation="optimistic-business",
        fields=(
            _palette(
                "Bright blue sky to light turquoise",
                "Sunny yellow to soft orange",
                "Fresh lime green to warm cream",
                "Uplifting violet to pink mist",
            ),
            _HUMAN_SUBJECT,
        ),
        defaults={"colorPalette": "Bright blue sky to light turquoise"},
    ),
    StyleDescriptor(
        id="next-gen-arena",
        label="Next-Gen Arena",
        description="High-energy, game-inspired tech graphic.",
        operation="next-gen-arena",
        fields=(
            _palette("Electric Cyan", "Neon Magenta", "Lime Volt", label="Accent color"),
            _HUMAN_SUBJECT,
            FieldSpec("includeIcons", "Game icons / HUD overlays", kind="toggle"),
            FieldSpec("includeParticles", "Particle glow effects", kind="toggle"),
            _INCLUDE_QR_CODE,
        ),
        defaults={
            "colorPalette": "Electric Cyan",
            "includeIcons": True,
            "includeParticles": True,
        },
    ),
    StyleDescriptor(
        id="power-graphic",
        label="Power Graphic",
        description="Bold activism poster with a dual-pane split layout.",
        operation="power-graphic",
        fields=(
            _color_theme("Red Alert", "Blue Wave", "Green Earth"),
            _HUMAN_SUBJECT,
            FieldSpec(
                "organizationName",
                "Organization name",
                required=True,
                placeholder="e.g., Clean Oceans Now",
            ),
            _INCLUDE_QR_CODE,
        ),
        defaults={"colorTheme": "Red Alert"},
    ),
    StyleDescriptor(
        id="joyful-grid",
        label="Joyful Grid",
        description="Cheerful quadrant layout for tech brands.",
        operation="joyful-grid",
        fields=(
            _NICHE,
            _color_theme("Blue & Orange Tech", "Green & Yellow Growth", "Purple & Teal AI"),
            _HUMAN_SUBJECT,
            _COMPANY_NAME,
            FieldSpec("website", "Website", required=True, placeholder="e.g., www.example.com"),
        ),
        defaults={"niche": "Web Development", "colorTheme": "Blue & Orange Tech"},
    ),
    StyleDescriptor(
        id="modular-workflow",
        label="Modular Workflow",
        description="Minimal three-step workflow diagram, no human figures.",
        operation="modular-workflow",
        fields=(
            _NICHE,
            FieldSpec(
                "theme",
                "Theme",
                kind="choice",
                required=True,
                options=("Light Mode", "Dark Gradient"),
            ),
            FieldSpec(
                "layout", "Layout", kind="choice", required=True, options=("Horizontal", "Vertical")
            ),
            FieldSpec("strategyIcon", "Strategy icon", required=True, placeholder="e.g., compass"),
            FieldSpec("ideationIcon", "Ideation icon", required=True, placeholder="e.g., lightbulb"),
            FieldSpec("launchIcon", "Launch icon", required=True, placeholder="e.g., rocket"),
        ),
        defaults={"niche": "Web Development", "theme": "Light Mode", "layout": "Horizontal"},
    ),
    StyleDescriptor(
        id="multi-slide-carousel",
        label="Multi-Slide Carousel",
        description="Before/after transformation opener for a carousel.",
        operation="multi-slide-carousel",
        fields=(
            _NICHE,
            FieldSpec(
                "colorPalette",
                "Accent color",
                required=True,
                placeholder="e.g., electric purple to hot pink",
            ),
        ),
        defaults={"niche": "Web Development"},
        field_map={"colorPalette": "accentColor"},
    ),
)

# Global style table
style_registry = StyleRegistry(STYLES)
