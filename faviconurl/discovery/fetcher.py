"""HTTP fetching with an explicit redirect loop"""

import logging
from contextlib import contextmanager
from typing import Iterator, NamedTuple
from urllib.parse import urljoin

import httpx

from faviconurl.exceptions import (
    RedirectWithoutLocationError,
    TooManyRedirectsError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)


class FetchedResponse(NamedTuple):
    """A successful response and the URL it was finally served from."""

    url: str
    response: httpx.Response


class RedirectFetcher:
    """Fetch URLs with GET, following redirects one hop at a time.

    The client must not follow redirects itself. Each 3xx response is
    inspected and closed unread, and its `Location` becomes the next URL.
    """

    def __init__(self, client: httpx.Client, max_redirects: int = 10) -> None:
        self.client = client
        self.max_redirects = max_redirects

    @contextmanager
    def open(self, url: str) -> Iterator[FetchedResponse]:
        """Fetch `url` and yield the final 2xx response.

        The response body is streamed and closed when the block exits, whether
        or not it was read.

        Raises:
            RedirectWithoutLocationError: If a 3xx response has no Location.
            UnexpectedStatusError: If the chain ends on a non-2xx status.
            TooManyRedirectsError: If more than `max_redirects` hops are needed.
            TransportError: If the request could not be sent or answered.
        """
        fetched = self._follow(url)
        try:
            yield fetched
        finally:
            fetched.response.close()

    def _follow(self, url: str) -> FetchedResponse:
        """Issue GET requests until a non-redirect response is received."""
        redirects = 0
        while True:
            response = self._send(url)
            status_code = response.status_code

            if 300 <= status_code < 400:
                response.close()
                location = response.headers.get("Location", "")
                if not location:
                    raise RedirectWithoutLocationError(
                        f"location is empty for http status: {url} ({status_code})"
                    )

                redirects += 1
                if redirects > self.max_redirects:
                    raise TooManyRedirectsError(
                        f"stopped after {self.max_redirects} redirects: {url}"
                    )

                logger.debug(f"Redirect {status_code} from {url} to {location}")
                url = urljoin(url, location)
                continue

            if not 200 <= status_code < 300:
                response.close()
                raise UnexpectedStatusError(url, status_code)

            return FetchedResponse(url, response)

    def _send(self, url: str) -> httpx.Response:
        # httpx raises a bare ValueError for some malformed URLs, e.g. a missing host.
        try:
            request = self.client.build_request("GET", url)
            return self.client.send(request, stream=True, follow_redirects=False)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise TransportError(f"failed to fetch {url}: {e}") from e


def media_type(response: httpx.Response) -> str:
    """Return the Content-Type of `response` without its parameters."""
    return response.headers.get("Content-Type", "").split(";")[0]
