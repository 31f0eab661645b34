from __future__ import annotations

import json

from flask import Flask, Response, jsonify, request

from essay_feed import FeedBuilder, FeedConfig

RSS_CONTENT_TYPE = "application/rss+xml; charset=UTF-8"
JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
_ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = Flask(__name__)
_builder = FeedBuilder(FeedConfig.from_env())


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


@app.route("/", defaults={"path": ""}, methods=_ANY_METHOD)
@app.route("/<path:path>", methods=_ANY_METHOD)
def serve_feed(path: str):
    if request.method != "GET":
        return _bad_request()
    try:
        rss = _builder.build()
    except Exception as exc:  # pragma: no cover - runtime guard
        app.logger.exception("Uncaught exception when building feed for /%s", path)
        return jsonify({"error": "Unexpected server error", "detail": str(exc)}), 500
    return Response(rss, content_type=RSS_CONTENT_TYPE)


@app.errorhandler(405)
def method_not_allowed(_exc):
    return _bad_request()


def _bad_request() -> Response:
    return Response(
        json.dumps({"error": "BAD REQUEST"}, separators=(",", ":")),
        status=400,
        content_type=JSON_CONTENT_TYPE,
    )


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8008)
