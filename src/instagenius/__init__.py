"""InstaGenius - style-driven social media image generation."""

__version__ = "0.3.0"

from instagenius.core.config import InstageniusConfig, config
from instagenius.core.styles import StyleDescriptor, style_registry

__all__ = [
    "InstageniusConfig",
    "StyleDescriptor",
    "config",
    "style_registry",
]
