"""Favicon discovery for a single address"""

import logging
from urllib.parse import SplitResult

import httpx

from faviconurl.constants import DEFAULT_FAVICON_PATH, HTML_CONTENT_TYPE
from faviconurl.discovery.extractor import LinkExtractor, parse_document
from faviconurl.discovery.fetcher import FetchedResponse, RedirectFetcher, media_type
from faviconurl.discovery.manifest import ManifestResolver
from faviconurl.discovery.normalizer import format_url, normalize_address, parse_url
from faviconurl.discovery.resolver import resolve_url
from faviconurl.exceptions import (
    FaviconUrlError,
    TransportError,
    UnexpectedContentTypeError,
)
from faviconurl.models import Diagnostic, DiscoveryResult, Link, LinkExtraction, LinkKind

logger = logging.getLogger(__name__)


class FaviconDiscovery:
    """Collect favicon URLs from a page, its manifest and the domain root.

    Icons are reported in this order: <link>/<meta> icons and manifest icons
    as they appear in the document, then `/favicon.ico` at the domain root.
    Failures at any step are recorded as warnings and never stop the run.
    """

    def __init__(
        self,
        fetcher: RedirectFetcher,
        link_extractor: LinkExtractor | None = None,
        manifest_resolver: ManifestResolver | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.link_extractor = link_extractor or LinkExtractor()
        self.manifest_resolver = manifest_resolver or ManifestResolver(fetcher)

    def discover_address(self, address: str) -> DiscoveryResult:
        """Normalize a command line address and discover its icons.

        Raises:
            InvalidURLError: If the address is not a valid URL.
            UnsupportedSchemeError: If the address is not http(s).
        """
        return self.discover(normalize_address(address))

    def discover(self, url: SplitResult) -> DiscoveryResult:
        """Discover the icons of the page at `url`."""
        result = DiscoveryResult(original_url=format_url(url), resolved_url=format_url(url))
        working_url = url

        extraction: LinkExtraction | None = None
        try:
            with self.fetcher.open(format_url(working_url)) as fetched:
                # The final URL is kept even if the page is then rejected.
                if fetched.url != format_url(working_url):
                    working_url = parse_url(fetched.url)
                extraction = self.extract_page_links(fetched)
        except FaviconUrlError as e:
            logger.debug(f"Failed to fetch links from {format_url(working_url)}: {e}")
            result.warnings.append(Diagnostic.from_error(e))

        if extraction is not None:
            result.warnings.extend(extraction.warnings)
            working_url = self.apply_canonical(working_url, extraction.links)

            for link in extraction.links:
                result.icons.extend(self._icons_from_link(working_url, link, result))

        try:
            result.icons.append(self.fetch_default_favicon(working_url))
        except FaviconUrlError as e:
            logger.debug(f"Failed to fetch from domain root {format_url(working_url)}: {e}")
            result.warnings.append(Diagnostic.from_error(e))

        result.resolved_url = format_url(working_url)
        return result

    def apply_canonical(self, url: SplitResult, links: list[Link]) -> SplitResult:
        """Adopt the host of every canonical link that points elsewhere.

        Only the host changes; the scheme and path of `url` are kept. Links
        without a host, such as `mailto:` URIs, leave `url` as it is.
        """
        for link in links:
            if link.kind is not LinkKind.CANONICAL:
                continue

            canonical = resolve_url(url, parse_url(link.target))
            if not canonical.netloc:
                continue

            if format_url(canonical) != format_url(url):
                logger.debug(f"Canonical link {format_url(canonical)} for {format_url(url)}")
                url = url._replace(netloc=canonical.netloc)

        return url

    def fetch_default_favicon(self, url: SplitResult) -> str:
        """Return `{scheme}://{host}/favicon.ico` if it answers with a 2xx status.

        The body is never read.

        Raises:
            FaviconUrlError: If the favicon cannot be fetched.
        """
        favicon_url = f"{url.scheme}://{url.netloc}{DEFAULT_FAVICON_PATH}"
        with self.fetcher.open(favicon_url):
            pass
        return favicon_url

    def extract_page_links(self, fetched: FetchedResponse) -> LinkExtraction:
        """Extract the links of a fetched HTML page.

        Raises:
            UnexpectedContentTypeError: If the page is not `text/html`.
            DecodeError: If the markup cannot be parsed.
        """
        content_type = media_type(fetched.response)
        if content_type != HTML_CONTENT_TYPE:
            raise UnexpectedContentTypeError(content_type)

        try:
            markup = fetched.response.read()
        except httpx.HTTPError as e:
            raise TransportError(f"error reading page {fetched.url}: {e}") from e

        return self.link_extractor.extract(parse_document(markup))

    def _icons_from_link(
        self, base_url: SplitResult, link: Link, result: DiscoveryResult
    ) -> list[str]:
        """Return the icon URLs a link contributes."""
        target = resolve_url(base_url, parse_url(link.target))

        match link.kind:
            case LinkKind.ICON:
                return [format_url(target)]
            case LinkKind.MANIFEST:
                try:
                    manifest_icons = self.manifest_resolver.resolve(target)
                except FaviconUrlError as e:
                    logger.debug(f"Failed to read manifest {format_url(target)}: {e}")
                    result.warnings.append(Diagnostic.from_error(e))
                    return []
                result.warnings.extend(manifest_icons.warnings)
                return manifest_icons.icons
            case _:
                return []

