"""
Rank Math SEO Advisor - web entry point.
Collects an article, asks Gemini for a structured SEO analysis and renders it as suggestion cards.
"""

import os
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse

from .analyzer import SEOAnalyzer
from .clients.gemini import DEFAULT_MODEL, GeminiClient
from .page import INIT_ERROR_MESSAGE, render_blocks, render_index_page
from .schemas import ArticleInput, SchemaVariant
from .seo_system import SEOPromptBuilder
from .submission import SessionSubmissions

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# Load env
load_dotenv(override=True)

# --- CONFIGURATION ---
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", DEFAULT_MODEL)
SCHEMA_VARIANT = os.environ.get("SCHEMA_VARIANT", SchemaVariant.STRUCTURED.value).lower()
SESSION_COOKIE = "seo_advisor_session"


# --- INITIALIZATION ---
def initialize_system(api_key: Optional[str] = None, model: Optional[str] = None,
                      variant: Optional[str] = None) -> Dict[str, Any]:
    """Initialize the Gemini client, analyzer and per-session submission handlers."""
    try:
        schema_variant = SchemaVariant(variant or SCHEMA_VARIANT)
    except ValueError:
        logger.warning(f"Unknown SCHEMA_VARIANT '{variant or SCHEMA_VARIANT}', using structured")
        schema_variant = SchemaVariant.STRUCTURED

    gemini_client = GeminiClient(api_key or GEMINI_API_KEY)
    analyzer = SEOAnalyzer(
        gemini_client,
        prompt_builder=SEOPromptBuilder(),
        model=model or GEMINI_MODEL,
        variant=schema_variant,
    )

    if gemini_client.is_ready():
        logger.info(f"🚀 SEO advisor ready (model: {analyzer.model}, variant: {schema_variant.value})")
    else:
        logger.error("SEO advisor initialization failed. Submissions are disabled.")

    return {
        "gemini": gemini_client,
        "analyzer": analyzer,
        "submissions": SessionSubmissions(analyzer),
        "variant": schema_variant,
    }


def create_app(components: Optional[Dict[str, Any]] = None) -> FastAPI:
    """Build the FastAPI app around an initialized system."""
    system = components if components is not None else initialize_system()
    analyzer: SEOAnalyzer = system["analyzer"]
    submissions: SessionSubmissions = system["submissions"]
    variant: SchemaVariant = system["variant"]

    app = FastAPI(title="Rank Math SEO Advisor")

    def init_error() -> Optional[str]:
        return None if analyzer.is_ready() else INIT_ERROR_MESSAGE

    def set_session(response: Response, session_id: str) -> Response:
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return response

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> HTMLResponse:
        session_id, _ = submissions.handler_for(request.cookies.get(SESSION_COOKIE))
        response = HTMLResponse(content=render_index_page(variant, init_error=init_error()))
        return set_session(response, session_id)

    @app.get("/healthz")
    def healthz() -> Dict[str, str]:
        return {
            "status": "ok" if analyzer.is_ready() else "unavailable",
            "variant": variant.value,
            "model": analyzer.model,
        }

    @app.post("/api/analyze")
    def api_analyze(payload: ArticleInput, request: Request) -> Response:
        """
        Analyze one article for the calling session.

        200 with the result and rendered cards, 204 when this session's
        previous analysis is still running, 502 when this submission failed,
        503 when the client never initialized.
        """
        error = init_error()
        if error:
            return JSONResponse(status_code=503, content={"detail": error})

        session_id, handler = submissions.handler_for(request.cookies.get(SESSION_COOKIE))
        logger.info(
            f"[api.analyze] title='{payload.title}' permalink={'YES' if payload.permalink else 'NO'}"
        )
        outcome = handler.submit(payload)
        if outcome is None:
            return set_session(Response(status_code=204), session_id)
        if not outcome.ok:
            return set_session(JSONResponse(status_code=502, content={"detail": outcome.error}), session_id)

        return set_session(JSONResponse(content={
            "state": outcome.state.value,
            "result": outcome.result.model_dump(),
            "html": render_blocks(outcome.blocks),
        }), session_id)

    return app
