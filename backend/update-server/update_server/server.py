"""Flask application serving update requests and update images."""

import logging
import os
from urllib.parse import quote

from flask import Flask, current_app, jsonify, redirect, request, send_from_directory

from .catalog import list_catalog
from .config import Config
from .errors import AmbiguousCatalog, CatalogUnreachable, MalformedRequest
from .models import Request, UpdateAvailable
from .resolve import resolve_update

logger = logging.getLogger(__name__)

CONFIG_KEY = "UPDATE_SERVER"
IMAGES_PREFIX = "/images"


def _config() -> Config:
    return current_app.config[CONFIG_KEY]


def create_app(config: Config) -> Flask:
    """Create the Flask application for the given configuration."""
    app = Flask(__name__)
    app.config[CONFIG_KEY] = config

    @app.get("/")
    def update():
        update_request = Request.from_query(request.args)
        cfg = _config()
        outcome = resolve_update(update_request, cfg.images_directory, cfg.layout)

        if isinstance(outcome, UpdateAvailable):
            return redirect(f"{IMAGES_PREFIX}/{quote(outcome.artifact_name)}", code=302)
        return "", 404

    @app.get(f"{IMAGES_PREFIX}/")
    def images_listing():
        return jsonify(list_catalog(_config().images_directory))

    @app.get(f"{IMAGES_PREFIX}/<path:filename>")
    def image(filename):
        directory = os.path.abspath(_config().images_directory)
        return send_from_directory(directory, filename, mimetype="application/octet-stream")

    @app.get("/healthz")
    def health():
        return "ok", 200

    @app.errorhandler(MalformedRequest)
    def malformed_request(e):
        logger.info(f"Rejected update request: {e}")
        return jsonify({"error": str(e), "missing": e.missing}), 400

    @app.errorhandler(AmbiguousCatalog)
    def ambiguous_catalog(e):
        response = jsonify({
            "error": "More than one matching update image.",
            "image": e.image,
            "device": e.device,
            "images": e.artifact_names,
        })
        response.status_code = 500
        response.headers["X-Error"] = "More than one matching update image."
        return response

    @app.errorhandler(CatalogUnreachable)
    def catalog_unreachable(e):
        response = jsonify({"error": "Could not read images directory."})
        response.status_code = 500
        response.headers["X-Error"] = "Could not read images directory."
        return response

    return app
