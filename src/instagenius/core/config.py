"""Configuration management for InstaGenius.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the INSTAGENIUS_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (INSTAGENIUS_* prefix)
2. .env file in the project root
3. Default values defined in InstageniusConfig

Example .env file:
    INSTAGENIUS_GEMINI_API_KEY=your-key
    INSTAGENIUS_IMAGE_MODEL=gemini-2.0-flash-preview-image-generation
    INSTAGENIUS_SERVER_PORT=9002

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from instagenius.core.config import config

    print(config.image_model)
    print(config.templates_dir)

Backend Credentials
-------------------
The Gemini API key and model names are only read by the backend client
(``instagenius.core.gemini``).  The style validator and dispatcher never look
at them, so the application starts without a key; generation requests then
fail with a user-visible message until one is configured.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package-relative asset directories.  Resolved from this file so the app
# works regardless of the current working directory.
_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class InstageniusConfig(BaseSettings):
    """Main configuration for InstaGenius.

    Attributes
    ----------
    Backend Settings:
        gemini_api_key : str
            API key for the Google Gemini API (empty disables generation)
        text_model : str
            Gemini model used to write marketing copy for a post
        image_model : str
            Gemini model used to render the final image

    Server Settings:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level configured by the CLI entry point

    Paths:
        static_dir : Path
            Directory with the front-end JavaScript and CSS
        templates_dir : Path
            Directory containing ``index.html``

    Front End:
        download_filename : str
            File name the browser uses when saving a generated image

    Examples
    --------
        >>> custom_config = InstageniusConfig(
        ...     gemini_api_key="test-key",
        ...     server_port=8080,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INSTAGENIUS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend settings
    gemini_api_key: str = Field(
        default="",
        description="API key for the Google Gemini API",
    )
    text_model: str = Field(
        default="gemini-2.0-flash",
        description="Gemini model used for marketing copy",
    )
    image_model: str = Field(
        default="gemini-2.0-flash-preview-image-generation",
        description="Gemini model used for image generation",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=9002,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level",
    )

    # Paths
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory with front-end static assets",
    )
    templates_dir: Path = Field(
        default=_PACKAGE_DIR / "templates",
        description="Directory containing index.html",
    )

    download_filename: str = Field(
        default="instagenius-image.png",
        description="File name used when the browser downloads an image",
    )


# Global configuration instance
# Loads values from environment variables (INSTAGENIUS_* prefix) and .env file.
config = InstageniusConfig()
