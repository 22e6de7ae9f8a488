"""A Logger that also accepts records from remote clients over HTTP."""

import json
import logging

from flask import request

from log_router.config import LoggerConfig
from log_router.exceptions import InvalidArgumentError
from log_router.levels import DEBUG
from log_router.logger import Logger
from log_router.normalizer import objectify, stringify

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class ServerLogger(Logger):
    """Logger exposing a POST endpoint on ``config.serve_path``.

    The request body is JSON ``{"level": int?, "message": any, "context": any?}``.
    A missing level means debug (RFC 5424 level 7). The message goes through
    ``stringify`` and the context through ``objectify`` before ``log()``.
    """

    def __init__(self, strategy, app=None, config: LoggerConfig | None = None, senders=()):
        self.config = config or LoggerConfig()
        super().__init__(strategy, senders)
        self.app = app
        if app is not None:
            logger.info("Serving logger on %s", self.config.serve_path)
            app.add_url_rule(
                self.config.serve_path,
                endpoint="log_router_ingest",
                view_func=self.handle_client_log_request,
                methods=ALL_METHODS,
                provide_automatic_options=False,
            )
        else:
            logger.info("Not serving logger, path %s", self.config.serve_path)

    @staticmethod
    def parse_payload(doc) -> tuple:
        """Turn a decoded JSON body into ``(level, message, context)``."""
        if not isinstance(doc, dict):
            return DEBUG, stringify(doc), {}
        level = doc.get("level")
        if level is None:
            level = DEBUG
        message = stringify(doc)
        context = objectify(doc["context"]) if "context" in doc else {}
        return level, message, context

    def handle_client_log_request(self):
        # RFC 7231: 405 means Method Not Allowed.
        if request.method.upper() != "POST":
            return "", 405

        body = request.get_data(as_text=True)
        try:
            doc = json.loads(body)
        except ValueError as exc:
            logger.warning("Malformed log payload from %s: %s", request.remote_addr, exc)
            return "", 200

        level, message, context = self.parse_payload(doc)
        try:
            self.log(level, message, context)
        except InvalidArgumentError as exc:
            logger.warning("Rejected log payload from %s: %s", request.remote_addr, exc)
        return "", 200
