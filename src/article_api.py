"""
HTTP API for the article service.

Exposes create/read/update/delete on /articles, a bulk download on /export,
and answers CORS preflight requests for every path.
"""
import json
import logging
import re
from typing import Any, Dict, Optional

from fastapi import FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.article_store import ArticleStore
from src.errors import (
    ArticleServiceError,
    MethodNotAllowedError,
    RouteNotFoundError,
    ValidationError,
)

logger = logging.getLogger('articles_api')
logger.setLevel(logging.INFO)

if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    logger.propagate = False

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def sanitize_log_input(value: Any) -> str:
    """
    Sanitize user input for logging to prevent log injection attacks.
    Removes newlines and other control characters that could be used for log forging.

    Args:
        value: The user input to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not isinstance(value, str):
        value = str(value)
    sanitized = value.replace('\n', '_').replace('\r', '_').replace('\t', '_')
    return sanitized[:200]


def parse_article_id(raw_id: Optional[str]) -> int:
    """
    Parse the ``id`` query parameter.

    Only ASCII digits with an optional sign are accepted.

    Raises:
        ValidationError: If the id is missing or not an integer
    """
    if raw_id is None or not _ID_PATTERN.fullmatch(raw_id):
        raise ValidationError("Invalid article ID.")
    return int(raw_id)


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    Read the request body as a JSON object.

    Raises:
        ValidationError: If the body is not valid JSON or not an object
    """
    body = await request.body()
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise ValidationError("Invalid JSON body.", str(exc)) from exc
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON body.", "Expected a JSON object.")
    return payload


def create_app(store: ArticleStore) -> FastAPI:
    """
    Create the article service FastAPI application.

    Args:
        store: Loaded article store the routes operate on

    Returns:
        FastAPI application instance
    """
    app = FastAPI(title="Article Service", redirect_slashes=False)
    app.state.store = store

    @app.middleware("http")
    async def cors_and_preflight(request: Request, call_next):
        """Answer preflight requests and add CORS headers to every response."""
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        if "content-type" not in response.headers:
            response.headers["Content-Type"] = "application/json"
        return response

    @app.exception_handler(ArticleServiceError)
    async def handle_service_error(request: Request, exc: ArticleServiceError):
        """Convert service errors into JSON error bodies."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(f"{request.method} {request.url.path} - {exc.status_code} {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        """Give unknown routes and unsupported methods the same JSON shape."""
        if exc.status_code == 405:
            error = MethodNotAllowedError("Method Not Allowed")
        elif exc.status_code == 404:
            error = RouteNotFoundError("Not Found")
        else:
            error = ArticleServiceError(str(exc.detail))
            error.status_code = exc.status_code
        return await handle_service_error(request, error)

    @app.post("/articles", status_code=201)
    async def create_article(request: Request):
        """Create an article; tags are generated from its content."""
        logger.info("POST /articles")
        payload = await read_json_object(request)
        article = store.create(payload.get("title"), payload.get("content"))
        logger.info(f"POST /articles - 201 id={article['id']}")
        return article

    @app.get("/articles")
    async def list_articles():
        """Get all articles."""
        logger.info("GET /articles")
        return store.list()

    @app.put("/articles")
    async def update_article(request: Request, raw_id: Optional[str] = Query(None, alias="id")):
        """Update the title and/or content of an article."""
        logger.info(f"PUT /articles?id={sanitize_log_input(raw_id)}")
        article_id = parse_article_id(raw_id)
        payload = await read_json_object(request)
        article = store.update(article_id, payload.get("title"), payload.get("content"))
        logger.info(f"PUT /articles?id={article_id} - 200")
        return article

    @app.delete("/articles")
    async def delete_article(raw_id: Optional[str] = Query(None, alias="id")):
        """Delete an article."""
        logger.info(f"DELETE /articles?id={sanitize_log_input(raw_id)}")
        article_id = parse_article_id(raw_id)
        confirmation = store.delete(article_id)
        logger.info(f"DELETE /articles?id={article_id} - 200")
        return confirmation

    @app.get("/export")
    async def export_articles():
        """Download the whole collection as articles.json."""
        logger.info("GET /export")
        return Response(
            content=store.export(),
            media_type="application/json",
            headers={"Content-Disposition": 'attachment; filename="articles.json"'}
        )

    return app
