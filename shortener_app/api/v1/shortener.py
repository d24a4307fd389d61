import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import PlainTextResponse
from starlette.requests import ClientDisconnect

from shortener_app.dependencies import get_url_service
from shortener_app.exceptions import (
    InvalidURLError,
    ShortCodeExhaustedError,
    ShortURLNotFoundError
)
from shortener_app.services.url_service import URLService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["shortener"])

INVALID_REQUEST = "Invalid request method or path"


def location_header(url: str) -> str:
    """
    Header-safe form of a stored URL.

    Printable ASCII is passed through untouched; only control and
    non-ASCII characters, which cannot travel in a latin-1 header,
    are percent-encoded (as UTF-8).
    """
    return "".join(
        char if " " <= char <= "~" else quote(char, safe="")
        for char in url
    )


@router.post("/", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
async def create_short_url(
    request: Request,
    url_service: URLService = Depends(get_url_service)
):
    """
    Create a new short URL.

    The body is the raw original URL (no JSON envelope), e.g.
    curl -X POST http://localhost:8080/ -d "https://example.com/"
    """
    try:
        body = await request.body()
    except ClientDisconnect:
        logger.error("Client disconnected while sending the request body")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to read request body"
        )

    try:
        original_url = body.decode("utf-8")
        short_url = url_service.create_short_url(original_url)
    except (UnicodeDecodeError, InvalidURLError):
        logger.warning("Rejected URL submission: %r", body[:200])
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid URL format"
        )
    except ShortCodeExhaustedError as e:
        logger.error("Short URL creation failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create short URL"
        )

    return PlainTextResponse(short_url, status_code=status.HTTP_201_CREATED)


@router.post("/{path:path}")
def create_on_invalid_path(path: str):
    """Short URLs can only be created on the root path"""
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_REQUEST)


@router.get("/")
def redirect_without_short_code():
    """A redirect needs a non-empty short code"""
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_REQUEST)


@router.get("/{short_code:path}")
def redirect_to_long_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the original URL.

    Plain `def`: FastAPI runs it in the threadpool, so concurrent
    lookups hit the store from several threads at once.
    """
    try:
        long_url = url_service.get_long_url_for_redirect(short_code)
    except ShortURLNotFoundError:
        logger.warning("Unknown short code requested: %s", short_code)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Short URL not found"
        )

    return Response(
        status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        headers={"Location": location_header(long_url)}
    )


@router.api_route(
    "/{path:path}",
    methods=["PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE", "CONNECT"]
)
def method_not_allowed(path: str):
    """Only GET and POST are served, on every path"""
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
        headers={"Allow": "GET, POST"}
    )
