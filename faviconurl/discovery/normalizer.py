"""URL parsing and normalization of command line addresses"""

import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from faviconurl.constants import DEFAULT_SCHEME, SUPPORTED_SCHEMES
from faviconurl.exceptions import InvalidURLError, UnsupportedSchemeError

_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_url(value: str) -> SplitResult:
    """Parse a URL, rejecting strings that are not syntactically valid.

    `urllib.parse` accepts nearly any string, so the checks below reject the
    inputs a strict parser would: control characters, broken percent escapes,
    a missing scheme before a leading colon, a colon in the first segment of a
    relative path, and malformed hosts or ports.

    Raises:
        InvalidURLError: If `value` cannot be parsed.
    """
    if _CONTROL_CHARACTERS.search(value):
        raise InvalidURLError(f"invalid control character in URL: {value!r}")

    if _BAD_PERCENT_ESCAPE.search(value):
        raise InvalidURLError(f"invalid URL escape in {value!r}")

    if value.startswith(":"):
        raise InvalidURLError(f"missing protocol scheme in {value!r}")

    try:
        url = urlsplit(value)
        # Accessing the port validates it.
        url.port
    except ValueError as e:
        raise InvalidURLError(f"{e}: {value!r}") from e

    if not url.scheme and not url.netloc and ":" in url.path.split("/", 1)[0]:
        raise InvalidURLError(f"first path segment in URL cannot contain colon: {value!r}")

    if " " in url.netloc:
        raise InvalidURLError(f"invalid character ' ' in host name: {value!r}")

    return url


def format_url(url: SplitResult) -> str:
    """Return the string form of a parsed URL."""
    return urlunsplit(url)


def normalize_address(address: str) -> SplitResult:
    """Turn a command line address into an absolute http(s) base URL.

    Bare domains such as `example.com` parse as a path, which is moved to the
    host. A missing scheme defaults to https.

    Raises:
        InvalidURLError: If the address is not a valid URL.
        UnsupportedSchemeError: If the address uses a scheme other than http(s).
    """
    try:
        url = parse_url(address)
    except InvalidURLError as e:
        raise InvalidURLError(f"invalid url: {address}") from e

    if url.scheme not in SUPPORTED_SCHEMES:
        if url.scheme:
            raise UnsupportedSchemeError(f"URL scheme must be HTTP or HTTPS: {address}")

        url = url._replace(scheme=DEFAULT_SCHEME)

    if not url.netloc and url.path:
        url = url._replace(netloc=url.path, path="")

    return url
