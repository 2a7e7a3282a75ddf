"""Flask webhook receiver that appends incoming messages to a file."""

import json
import logging

from flask import Flask, Response, request
from werkzeug.exceptions import ClientDisconnected, MethodNotAllowed

from logcodes.sources import lookup_field

logger = logging.getLogger(__name__)

SUCCESS_BODY = "Successfully wrote to file\n"


def _plain(text: str, status: int) -> Response:
    return Response(text + "\n", status=status, mimetype="text/plain")


def create_app(output_file: str) -> Flask:
    app = Flask(__name__)
    app.config["OUTPUT_FILE"] = output_file

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(e):
        return _plain("Invalid request method", 405)

    @app.route("/webhook", methods=["POST"], provide_automatic_options=False)
    def webhook():
        try:
            body = request.get_data(cache=False)
        except (OSError, ClientDisconnected) as e:
            logger.warning("Error reading request body: %s", e)
            return _plain("Error reading request body", 500)

        try:
            notification = json.loads(body)
        except ValueError:
            return _plain("Error parsing request body", 400)
        if notification is None:
            notification = {}
        if not isinstance(notification, dict):
            return _plain("Error parsing request body", 400)

        message = lookup_field(notification, "message")
        if message is not None and not isinstance(message, str):
            return _plain("Error parsing request body", 400)
        if not message:
            return _plain("Missing 'message' in request body", 400)

        path = app.config["OUTPUT_FILE"]
        try:
            f = open(path, "a", encoding="utf-8")
        except OSError as e:
            logger.error("Error opening %s: %s", path, e)
            return _plain("Error opening file", 500)
        try:
            with f:
                f.write(message + "\n")
        except OSError as e:
            logger.error("Error writing to %s: %s", path, e)
            return _plain("Error writing to file", 500)

        logger.info("Appended %d bytes to %s", len(message) + 1, path)
        return Response(SUCCESS_BODY, status=200, mimetype="text/plain")

    return app


def run_webhook(app: Flask, host: str, port: int, debug: bool = False):
    app.run(host=host, port=port, debug=debug, use_reloader=False)
