"""faviconurl specific exceptions."""


class FaviconUrlError(Exception):
    """Base class for every error raised while discovering favicons."""

    kind: str = "error"


class InvalidURLError(FaviconUrlError):
    """Raised when a string cannot be parsed as a URL."""

    kind = "invalid-url"


class UnsupportedSchemeError(FaviconUrlError):
    """Raised when an address uses a scheme other than http or https."""

    kind = "unsupported-scheme"


class RedirectWithoutLocationError(FaviconUrlError):
    """Raised when a 3xx response carries no Location header."""

    kind = "redirect-without-location"


class UnexpectedStatusError(FaviconUrlError):
    """Raised when a response status is neither a redirect nor a success."""

    kind = "unexpected-status"

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"invalid http status: {url} ({status_code})")
        self.url = url
        self.status_code = status_code


class TooManyRedirectsError(FaviconUrlError):
    """Raised when a redirect chain exceeds the configured number of hops."""

    kind = "too-many-redirects"


class TransportError(FaviconUrlError):
    """Raised when the HTTP client fails before a response is received."""

    kind = "transport-failure"


class UnexpectedContentTypeError(FaviconUrlError):
    """Raised when a response body is not of the expected media type."""

    kind = "unexpected-content-type"

    def __init__(self, content_type: str) -> None:
        super().__init__(f"unexpected content-type: {content_type}")
        self.content_type = content_type


class DecodeError(FaviconUrlError):
    """Raised when a page or manifest body cannot be decoded."""

    kind = "decode-failure"


class LinkParseError(FaviconUrlError):
    """Raised for a single malformed href, content or manifest src value."""

    kind = "link-parse-failure"
