"""HTTP worker dispatching action requests to their handlers."""

from __future__ import annotations

import logging
import signal
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, NamedTuple

from . import metrics
from .handlers import (
    account_balance_handler,
    delegation_reward_handler,
    delegator_withdraw_address_handler,
    validator_commission_amount_handler,
)
from .payload import ActionContext, Payload
from .responses import GraphQLError, to_json

logger = logging.getLogger(__name__)

Handler = Callable[[ActionContext, Payload], Any]

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


class _Response(NamedTuple):
    status: int
    content_type: str
    body: bytes


def _text_error(message: str, status: int) -> _Response:
    return _Response(status, TEXT_CONTENT_TYPE, (message + "\n").encode())


class ActionsWorker:
    """Routes action requests by path to registered handlers."""

    def __init__(self, context: ActionContext) -> None:
        self.context = context
        self._handlers: dict[str, Handler] = {}

    def register_handler(self, path: str, handler: Handler) -> None:
        """Use handler for every request made to path."""
        logger.debug("registering actions handler for %s", path)
        self._handlers[path] = handler

    def handle(self, path: str, body: bytes | str) -> _Response:
        """Run the handler registered for path on the given request body."""
        handler = self._handlers.get(path)
        if handler is None:
            return _text_error("404 page not found", 404)

        start = time.monotonic()
        try:
            payload = Payload.from_json(body)
        except ValueError:
            return _text_error("invalid payload: failed to unmarshal json", 500)

        try:
            result = handler(self.context, payload)
            data = to_json(result).encode()
        except Exception as err:
            metrics.error_counter(path)
            return self._handle_error(path, err)

        metrics.success_counter(path)
        metrics.response_time_buckets(path, start)
        return _Response(200, JSON_CONTENT_TYPE, data)

    def _handle_error(self, path: str, err: Exception) -> _Response:
        logger.error("error while executing action %s: %s", path, err)
        body = to_json(GraphQLError(message=str(err))).encode()
        return _Response(400, JSON_CONTENT_TYPE, body)

    def make_server(self, port: int) -> ThreadingHTTPServer:
        """Build an HTTP server bound to all interfaces on port, serving this worker."""
        worker = self

        class _RequestHandler(BaseHTTPRequestHandler):
            def _serve(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length > 0 else b""
                path = self.path.split("?", 1)[0]
                response = worker.handle(path, body)
                self.send_response(response.status)
                self.send_header("Content-Type", response.content_type)
                self.send_header("Content-Length", str(len(response.body)))
                self.end_headers()
                self.wfile.write(response.body)

            do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = _serve

            def log_message(self, format: str, *args: Any) -> None:
                logger.debug(format, *args)

        return ThreadingHTTPServer(("", port), _RequestHandler)

    def start(self, port: int) -> None:
        """Serve requests on port until the server is shut down."""
        with self.make_server(port) as server:
            server.serve_forever()


def build_worker(context: ActionContext) -> ActionsWorker:
    """A worker with every supported action registered."""
    worker = ActionsWorker(context)
    worker.register_handler("/account_balance", account_balance_handler)
    worker.register_handler("/delegation_reward", delegation_reward_handler)
    worker.register_handler("/delegator_withdraw_address", delegator_withdraw_address_handler)
    worker.register_handler("/validator_commission_amount", validator_commission_amount_handler)
    return worker


def run_actions(context: ActionContext, port: int) -> None:
    """Serve the actions on port until SIGINT or SIGTERM, then stop the node."""
    worker = build_worker(context)
    server = worker.make_server(port)
    stop = threading.Event()

    def _on_signal(signum: int, frame: Any) -> None:
        stop.set()

    previous: dict[int, Any] = {}
    if threading.current_thread() is threading.main_thread():
        for sig in (signal.SIGTERM, signal.SIGINT):
            previous[sig] = signal.signal(sig, _on_signal)

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        while not stop.wait(0.5):
            pass
    finally:
        server.shutdown()
        server.server_close()
        thread.join()
        for sig, handler in previous.items():
            signal.signal(sig, handler)
        node_stop = getattr(context.node, "stop", None)
        if callable(node_stop):
            node_stop()