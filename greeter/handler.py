from urllib.parse import urlsplit


GREETING = "Hello world"
UNSUPPORTED_PATH = "Unsupported path"
CONTENT_TYPE = "text/plain; charset=utf-8"


def request_path(target: str) -> str:
    """Return the dispatch path of an HTTP request target.

    Query string and fragment are dropped. Absolute-form targets
    (``http://host/p``) yield their path, ``/`` when it is empty. Origin-form
    targets are otherwise left untouched, so ``//`` stays ``//``.
    """
    path = target.split("?", 1)[0].split("#", 1)[0]
    if "://" in path:
        return urlsplit(path).path or "/"
    return path


def respond(path: str) -> tuple[int, str]:
    if path == "/":
        return 200, GREETING
    return 404, UNSUPPORTED_PATH
