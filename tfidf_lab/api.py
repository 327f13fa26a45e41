"""
HTTP API for searching a loaded corpus model (FastAPI)

Routes:
- GET /api/search?q=<phrase> → JSON array of [document_id, score] pairs
- anything else → 404 with body "404"

The model is loaded once at startup and shared read-only by all requests.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .tfidf import CorpusModel, search

logger = logging.getLogger(__name__)


def create_app(model: CorpusModel, top_k: int = config.API_TOP_K) -> FastAPI:
    """
    Build the search application around an already loaded model.

    Args:
        model: Corpus model, never mutated by the app
        top_k: Maximum number of results per response
    """
    app = FastAPI(
        title="TF-IDF Lab API",
        description="TF-IDF document search over a prebuilt index",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.model = model
    app.state.top_k = top_k

    @app.get("/api/search")
    def api_search(request: Request, q: str = ""):
        """Rank documents against the query phrase"""
        results = search(q, request.app.state.model)[:request.app.state.top_k]
        logger.info(f"Search {q!r}: {len(results)} results")
        return JSONResponse(content=[[doc_id, score] for doc_id, score in results])

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes and wrong methods both answer with a plain 404"""
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code}")
        if exc.status_code in (404, 405):
            return PlainTextResponse("404", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    return app


def serve(model: CorpusModel, host: str = config.HOST, port: int = config.PORT) -> None:
    """Serve the API with a single uvicorn worker (blocks until stopped)"""
    import uvicorn

    app = create_app(model)
    logger.info(f"Listening on http://{host}:{port}/")
    uvicorn.run(app, host=host, port=port, log_config=None)
