"""Constants for favicon discovery"""

# Values of a space separated `rel` attribute that mark a <link> as an icon
ICON_REL_VALUES: tuple[str, ...] = (
    "icon",
    "apple-touch-icon",
    "apple-touch-icon-precomposed",
)

# Values of a <meta name> attribute whose `content` points at an image
IMAGE_META_NAMES: tuple[str, ...] = ("og:image", "twitter:image")

# Elements inspected during link extraction
LINK_ELEMENTS: tuple[str, ...] = ("link", "meta")

HTML_CONTENT_TYPE: str = "text/html"

MANIFEST_CONTENT_TYPE: str = "application/json"

DEFAULT_FAVICON_PATH: str = "/favicon.ico"

SUPPORTED_SCHEMES: tuple[str, ...] = ("http", "https")

DEFAULT_SCHEME: str = "https"

PARSER: str = "html.parser"

# HTTP request configuration
REQUEST_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:109.0) Gecko/20100101 Firefox/114.0"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
}
