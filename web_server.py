#!python3
"""JSON web API over the package information service (Flask).

Endpoints:
    GET /names                 -> {"names": [...]}
    GET /packages?name=<name>  -> package details
"""
from urllib.parse import parse_qs

from flask import Flask, abort, jsonify, request
from werkzeug.exceptions import HTTPException

from control_file_loader import FileAccessError
from loggingex import generate_logger
from package_info_service import PackageInfoService

logger = generate_logger(name=__name__, debug=__debug__, filepath=__file__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def _query_param(name: str) -> str:
    """Read a query parameter keeping ``+`` literal.

    Package names such as ``g++`` or ``libstdc++6`` contain ``+``, which
    form decoding would turn into a space.
    """
    raw = request.query_string.decode("utf-8", errors="replace")
    values = parse_qs(raw.replace("+", "%2B"))
    return values.get(name, [""])[0]


def create_app(service: PackageInfoService) -> Flask:
    """Build the Flask application serving ``service``.

    Parameters
    ----------
    service : PackageInfoService
        Service answering the name list and detail queries.

    Returns
    -------
    Flask
        The configured application.
    """
    app = Flask(__name__)
    app.json.sort_keys = False

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return jsonify(error=exc.description), exc.code

    @app.errorhandler(FileAccessError)
    def handle_file_access_error(exc):
        logger.error("[server] %s", exc)
        return jsonify(error=str(exc)), 500

    @app.route("/names", methods=["GET"])
    def names():
        return jsonify(names=service.get_package_names())

    @app.route("/packages", methods=["GET"])
    def packages():
        package_name = _query_param("name")
        if not package_name:
            abort(404, description="query parameter 'name' is required")
        logger.info("[server] details for %s", package_name)
        return jsonify(service.get_info_for(package_name).to_dict())

    return app


def serve(service: PackageInfoService,
          host: str = DEFAULT_HOST,
          port: int = DEFAULT_PORT) -> None:
    """Run the development server until interrupted."""
    logger.info("Server running at http://%s:%d/ (source: %s)", host, port,
                service.source)
    create_app(service).run(host=host, port=port)
