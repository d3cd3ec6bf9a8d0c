"""Flask application factory for the head-movement web view.

The report is computed once, when the app is created; every request
serves that same result.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify

from fcfs_seek.cli import build_report
from fcfs_seek.logging import Logger
from fcfs_seek.report import format_report, report_as_dict


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        A configured Flask application ready to serve.

    """
    logger = Logger()
    report = build_report(logger=logger)
    text = format_report(report)

    app = Flask(__name__)

    @app.route("/")
    def index() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the plain-text report."""
        return Response(text, mimetype="text/plain")

    @app.route("/api/report")
    def api_report() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the report as JSON."""
        return jsonify(report_as_dict(report))

    @app.route("/api/log")
    def api_log() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return captured log entries as JSON."""
        return jsonify(
            [
                {"level": entry.level.name, "source": entry.source, "message": entry.message}
                for entry in logger.entries
            ]
        )

    return app


def main() -> None:
    """Run the web view development server.

    This is the ``fcfs-seek-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
