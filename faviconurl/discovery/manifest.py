"""Web app manifest icon resolution"""

import logging
from urllib.parse import SplitResult

import httpx
from pydantic import ValidationError

from faviconurl.constants import MANIFEST_CONTENT_TYPE
from faviconurl.discovery.fetcher import RedirectFetcher, media_type
from faviconurl.discovery.normalizer import format_url, parse_url
from faviconurl.discovery.resolver import resolve_url
from faviconurl.exceptions import (
    DecodeError,
    InvalidURLError,
    LinkParseError,
    TransportError,
    UnexpectedContentTypeError,
)
from faviconurl.models import Diagnostic, Manifest, ManifestIcons

logger = logging.getLogger(__name__)


class ManifestResolver:
    """Read the icons listed in a web app manifest."""

    def __init__(self, fetcher: RedirectFetcher) -> None:
        self.fetcher = fetcher

    def resolve(self, manifest_url: SplitResult) -> ManifestIcons:
        """Fetch the manifest at `manifest_url` and return absolute icon URLs.

        Icon URLs are resolved against `manifest_url`, in manifest order.
        Icons whose `src` is not a URL are skipped and reported as warnings.

        Raises:
            FaviconUrlError: If the manifest cannot be fetched or decoded.
        """
        manifest = self.fetch_manifest(format_url(manifest_url))

        result = ManifestIcons()
        for icon in manifest.icons:
            try:
                src = parse_url(icon.src)
            except InvalidURLError as e:
                error = LinkParseError(f"failed to parse manifest icon url {icon.src!r}: {e}")
                logger.debug(str(error))
                result.warnings.append(Diagnostic.from_error(error))
                continue

            result.icons.append(format_url(resolve_url(manifest_url, src)))

        return result

    def fetch_manifest(self, url: str) -> Manifest:
        """Download and decode a manifest.

        Raises:
            UnexpectedContentTypeError: If the response is not `application/json`.
            DecodeError: If the body is not a manifest document.
        """
        with self.fetcher.open(url) as fetched:
            content_type = media_type(fetched.response)
            if content_type != MANIFEST_CONTENT_TYPE:
                raise UnexpectedContentTypeError(content_type)

            try:
                body = fetched.response.read()
            except httpx.HTTPError as e:
                raise TransportError(f"error reading manifest {url}: {e}") from e

        try:
            return Manifest.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"failed to unmarshal manifest {url}: {e}") from e
