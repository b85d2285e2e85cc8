from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .handler import CONTENT_TYPE, UNSUPPORTED_PATH, respond


__version__ = "1.0.0"

app = FastAPI(
    title="greeter",
    version=__version__,
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
    redirect_slashes=False,
)


def greet(request: Request) -> PlainTextResponse:
    status, body = respond(request.url.path)
    return PlainTextResponse(body, status_code=status, media_type=CONTENT_TYPE)


# No method filter: every method reaches greet
app.add_route("/{path:path}", greet, methods=None)


@app.exception_handler(404)
def unsupported(request: Request, exc: Exception) -> PlainTextResponse:
    # Targets the catch-all cannot match, such as an empty path
    return PlainTextResponse(UNSUPPORTED_PATH, status_code=404, media_type=CONTENT_TYPE)
