"""One-shot smoke check for the transport step of the setup wizard.

Posts a fixed set of transport preferences to a running server and reports
what came back. No retries and no checks on the response.
"""

import httpx

from src.wizard.dtos import SAMPLE_TRANSPORT_PREFERENCES, TransportPreferences


def build_transport_check_url(host: str, port: int, path: str) -> str:
    if not path.startswith("/"):
        path = f"/{path}"
    return f"http://{host}:{port}{path}"


async def post_transport_preferences(
    url: str,
    cookie: str,
    preferences: TransportPreferences = SAMPLE_TRANSPORT_PREFERENCES,
    http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
) -> httpx.Response:
    """Send the preferences once. Connection failures raise httpx.RequestError."""
    headers = {"Content-Type": "application/json"}
    if cookie:
        headers["Cookie"] = cookie

    async with http_client_class() as client:
        return await client.post(url, json=preferences.to_wire(), headers=headers)


def format_report(response: httpx.Response) -> list[str]:
    return [
        f"Status: {response.status_code}",
        f"Headers: {dict(response.headers)}",
        f"Response: {response.text}",
    ]
