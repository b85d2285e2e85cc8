import sys
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

from .handler import CONTENT_TYPE, request_path, respond


HOST = "0.0.0.0"
PORT = 8080


class GreetingHandler(BaseHTTPRequestHandler):
    protocol_version = "HTTP/1.1"
    server_version = "greeter/1.0"
    # Drop idle or stalled connections after 10s
    timeout = 10

    def log_message(self, format: str, *args) -> None:  # noqa: A003 - keep default signature
        pass

    def __getattr__(self, name: str):
        # Any do_<METHOD> resolves to dispatch
        if name.startswith("do_"):
            return self.dispatch
        raise AttributeError(name)

    def dispatch(self) -> None:
        status, text = respond(request_path(self.path))
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", CONTENT_TYPE)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(body)


class GreetingServer(ThreadingHTTPServer):
    # A port held by another listener must fail to bind
    allow_reuse_port = False


def create_server(host: str = HOST, port: int = PORT) -> GreetingServer:
    return GreetingServer((host, port), GreetingHandler)


def run(host: str = HOST, port: int = PORT) -> None:
    try:
        server = create_server(host, port)
    except OSError as exc:
        print(f"failed to listen on {host}:{port}: {exc}", file=sys.stderr)
        raise SystemExit(1)

    print(f"Serving on http://{host}:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
