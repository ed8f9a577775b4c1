import logging
from flask import Flask, request, jsonify

from .core.router import route_request
from .core.service import SentimentAnalysisService
from . import config

log = logging.getLogger(__name__)


def create_app(service: SentimentAnalysisService | None = None) -> Flask:
    """Flask app around one shared (thread-safe) analysis service."""
    app = Flask(__name__)
    svc = service or SentimentAnalysisService.from_config()   # ConfigError surfaces at startup
    app.config["SENTIMENT_SERVICE"] = svc

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/v1/sentiment", methods=["POST"])
    def sentiment():
        payload = request.get_json(force=True, silent=True) or {}   # parse JSON payload
        body, status = route_request("/v1/sentiment", payload, svc)
        return jsonify(body), status

    @app.route("/v1/lexicon/refresh", methods=["POST"])
    def refresh():
        body, status = route_request("/v1/lexicon/refresh", {}, svc)
        return jsonify(body), status

    return app


def main():
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    log.info("Sentiment service running at http://%s:%d/v1/sentiment", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, threaded=True)  # dev server


if __name__ == "__main__":
    main()
