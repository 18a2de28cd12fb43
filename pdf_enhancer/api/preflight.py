"""Explicit OPTIONS answers for /api routes."""

from fastapi import Response

ALLOWED_HEADERS = "Content-Type, Authorization"


def preflight_response(*methods: str) -> Response:
    """Empty 200 advertising the route's methods plus OPTIONS."""
    return Response(
        status_code=200,
        headers={
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ", ".join([*methods, "OPTIONS"]),
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        },
    )
