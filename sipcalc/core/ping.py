"""Health-check payload for the API."""

SERVICE_NAME = "sipcalc"


def get_ping_message() -> str:
    return "pong"
