"""InstaGenius FastAPI application.

This module is the single entry point for the web application.  It defines
the FastAPI ``app`` instance, all REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The application follows a stateless REST pattern:

- **The style table** (:data:`~instagenius.core.styles.style_registry`) is
  served to the front end via ``GET /api/styles`` so the form can render the
  fields of the selected style.
- **Image generation** goes through a
  :class:`~instagenius.core.dispatch.StyleDispatcher` created at startup and
  stored on ``app.state``.  Each request builds its own
  :class:`~instagenius.core.session.GenerationSession`; nothing is kept
  between requests.
- **Static assets** (CSS, JS) are served by FastAPI's ``StaticFiles``.
- **The HTML page** is served as a raw ``HTMLResponse``.

Endpoints
---------
========  ================================  ==================================
Method    Path                              Purpose
========  ================================  ==================================
GET       ``/``                             Serve the main HTML page
GET       ``/api/config``                   Version, limits, download name
GET       ``/api/styles``                   Style catalogue
POST      ``/api/styles/{id}/select``       Reset fields to a style's defaults
POST      ``/api/validate``                 Validate a form without generating
POST      ``/api/generate``                 Validate and generate one image
========  ================================  ==================================

Usage
-----
CLI (installed entry point)::

    instagenius

Direct invocation::

    python -m instagenius.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from instagenius import __version__
from instagenius.api.models import (
    FormRequest,
    GenerateResponse,
    SelectStyleRequest,
    ValidationResponse,
)
from instagenius.core.config import config
from instagenius.core.dispatch import StyleDispatcher
from instagenius.core.models import (
    DEFAULT_STYLE,
    POST_IDEA_MAX_LENGTH,
    POST_IDEA_MIN_LENGTH,
    FormState,
    GenerationSuccess,
    ValidationFailure,
)
from instagenius.core.session import GenerationSession
from instagenius.core.styles import UnsupportedStyleError, style_registry
from instagenius.core.validation import apply_style_defaults, validate

logger = logging.getLogger(__name__)

STATIC_DIR: Path = config.static_dir
TEMPLATES_DIR: Path = config.templates_dir


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the style dispatcher on startup.

    The Gemini client behind the flows connects lazily, so the server starts
    without an API key.
    """
    app.state.dispatcher = StyleDispatcher.from_flows(config)
    logger.info(
        f"StyleDispatcher initialised with {len(app.state.dispatcher.operations)} operations."
    )

    yield


app = FastAPI(
    title="InstaGenius",
    description="Instagram post image generator with per-style Gemini flows.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the main application HTML page.

    Raises:
        HTTPException: 404 if ``index.html`` is not found.
    """
    index_path = TEMPLATES_DIR / "index.html"
    if index_path.exists():
        return HTMLResponse(content=index_path.read_text())
    raise HTTPException(status_code=404, detail="index.html not found")


@app.get("/api/config")
async def get_config() -> dict:
    """Return the front-end configuration."""
    return {
        "version": __version__,
        "default_style": DEFAULT_STYLE,
        "download_filename": config.download_filename,
        "post_idea_min_length": POST_IDEA_MIN_LENGTH,
        "post_idea_max_length": POST_IDEA_MAX_LENGTH,
    }


@app.get("/api/styles")
async def list_styles() -> dict:
    """Return the style catalogue in display order."""
    return {"styles": [style.to_dict() for style in style_registry]}


@app.post("/api/styles/{style_id}/select")
async def select_style(style_id: str, req: SelectStyleRequest) -> dict:
    """Switch to ``style_id``: reset style fields and apply its defaults.

    The post idea is carried over; every style-specific value is replaced.

    Raises:
        HTTPException: 404 for an unknown style.
    """
    form_state = FormState(post_idea=req.post_idea, values=dict(req.values))
    try:
        new_state = apply_style_defaults(style_id, form_state)
    except UnsupportedStyleError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return new_state.to_dict()


@app.post("/api/validate", response_model=ValidationResponse)
async def validate_form(req: FormRequest) -> ValidationResponse:
    """Validate a form against its style without generating anything.

    Raises:
        HTTPException: 404 for an unknown style.
    """
    try:
        errors = validate(req.style, req.to_form_state())
    except UnsupportedStyleError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return ValidationResponse(valid=not errors, errors=errors)


@app.post("/api/generate", response_model=GenerateResponse)
async def generate_image(req: FormRequest) -> GenerateResponse:
    """Validate the form and generate one image for its style.

    Returns:
        :class:`GenerateResponse` with the image data URI and download name.

    Raises:
        HTTPException: 422 with field errors when validation fails, 400 for
            an unsupported style, 502 when generation fails.
    """
    session = GenerationSession(form_state=req.to_form_state())
    result = await session.submit(app.state.dispatcher)

    if isinstance(result, GenerationSuccess):
        return GenerateResponse(image=result.image, filename=config.download_filename)

    if isinstance(result, ValidationFailure):
        raise HTTPException(
            status_code=422,
            detail={"message": "Please fix the highlighted fields.", "errors": result.errors},
        )

    if result.reason == "unsupported_style":
        raise HTTPException(status_code=400, detail=result.message)

    raise HTTPException(status_code=502, detail=result.message)


def main() -> None:
    """Launch the uvicorn ASGI server.

    Configures root logging at ``config.log_level`` and reads host and port
    from :data:`~instagenius.core.config.config` (``INSTAGENIUS_SERVER_HOST``
    and ``INSTAGENIUS_SERVER_PORT``).  Defaults to ``0.0.0.0:9002``.

    This function is registered as the ``instagenius`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "instagenius.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
