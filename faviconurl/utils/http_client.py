"""A helper to create an HTTP client (via `httpx.Client`) with common configurations."""

from httpx import Client, Timeout

from faviconurl.constants import REQUEST_HEADERS


def create_http_client(
    request_timeout: float = 15.0,
    connect_timeout: float = 15.0,
    headers: dict[str, str] | None = None,
) -> Client:
    """Create a new `httpx.Client` with common configurations.

    Redirects are never followed by the client; callers observe every 3xx
    response themselves.

    Args:
      - `request_timeout` {float}: The timeout for handling a request to the host.
      - `connect_timeout` {float}: The timeout for establishing a connection to the host.
      - `headers` {dict[str, str] | None}: Headers sent with every request. Defaults to
        browser-like `REQUEST_HEADERS`.
    Returns:
      - {Client}: An HTTP client.
    """
    return Client(
        headers=REQUEST_HEADERS if headers is None else headers,
        timeout=Timeout(request_timeout, connect=connect_timeout),
        follow_redirects=False,
    )
