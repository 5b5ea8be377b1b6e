from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, jsonify, request

from news_digest import DigestAgent, DigestConfig, DigestStore, FileDigestStore
from news_digest.exceptions import DigestGenerationError

CRON_HEADER = "X-Vercel-Cron"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_app(
    config: Optional[DigestConfig] = None,
    agent: Optional[DigestAgent] = None,
    store: Optional[DigestStore] = None,
) -> Flask:
    config = config or DigestConfig.from_env()
    agent = agent or DigestAgent(config)
    store = store or FileDigestStore(config.digest_path)
    cache_control = f"public, max-age={config.cache_max_age}"

    app = Flask(__name__)

    @app.get("/health")
    def healthcheck():
        return {"status": "ok"}

    @app.route("/api/digest", methods=["GET", "POST", "PUT", "DELETE", "PATCH"])
    def generate_digest():
        if request.method != "GET":
            return jsonify({"error": "Method not allowed"}), 405
        is_cron = request.headers.get(CRON_HEADER) == "1"
        has_secret = bool(config.digest_secret) and request.args.get("secret") == config.digest_secret
        if not is_cron and not has_secret:
            return jsonify({
                "error": "Unauthorized",
                "message": "This endpoint can only be called by the scheduler or with a valid secret token",
            }), 401

        trigger = "Cron" if is_cron else "Manual"
        started = time.monotonic()
        app.logger.info("[%s] Starting digest generation", trigger)
        try:
            digest = agent.publish(store)
        except DigestGenerationError:
            app.logger.exception("Digest generation failed")
            return jsonify({"error": "Service temporarily unavailable", "timestamp": _now()}), 500
        except Exception:  # pragma: no cover - runtime guard
            app.logger.exception("Uncaught exception when storing digest")
            return jsonify({"error": "Service temporarily unavailable", "timestamp": _now()}), 500

        duration_ms = int((time.monotonic() - started) * 1000)
        app.logger.info("[%s] Digest updated: %d articles in %dms", trigger, len(digest), duration_ms)
        response = jsonify({
            "message": "Digest updated",
            "count": len(digest),
            "timestamp": _now(),
            "duration": f"{duration_ms}ms",
            "triggeredBy": trigger,
        })
        response.headers["Cache-Control"] = cache_control
        return response

    @app.get("/api/digest.json")
    def serve_digest():
        digest = store.load()
        if digest is None:
            return jsonify({
                "error": "Digest not found",
                "message": "Digest has not been generated yet. Please wait for the scheduled run or trigger it manually.",
            }), 404
        response = jsonify(digest)
        response.headers["Cache-Control"] = cache_control
        return response

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host="0.0.0.0", port=8008)
