"""Lambda handler for the Hello API."""

import json
import os

MAX_NAME_LENGTH = 64


def _response(status_code: int, body: dict, headers: dict | None = None) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": json.dumps(body),
    }


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for API Gateway proxy integration."""
    # HTTP_METHOD is the verb the API routes to this function; ANY accepts all
    allowed = os.environ.get("HTTP_METHOD", "GET").upper()
    method = event.get("httpMethod", allowed if allowed != "ANY" else "GET").upper()
    if allowed != "ANY" and method != allowed:
        return _response(405, {"error": f"Method {method} not allowed"}, {"Allow": allowed})

    params = event.get("queryStringParameters") or {}
    name = (params.get("name") or "").strip() or "World"
    if len(name) > MAX_NAME_LENGTH:
        return _response(400, {"error": f"name cannot exceed {MAX_NAME_LENGTH} characters"})

    greeting = os.environ.get("GREETING", "Hello")
    return _response(
        200,
        {
            "message": f"{greeting}, {name}!",
            "path": event.get("path"),
        },
    )
