"""Favicon discovery pipeline"""

from faviconurl.discovery.extractor import LinkExtractor
from faviconurl.discovery.fetcher import RedirectFetcher
from faviconurl.discovery.manifest import ManifestResolver
from faviconurl.discovery.normalizer import normalize_address
from faviconurl.discovery.orchestrator import FaviconDiscovery
from faviconurl.discovery.resolver import resolve_url

__all__ = [
    "FaviconDiscovery",
    "LinkExtractor",
    "ManifestResolver",
    "RedirectFetcher",
    "normalize_address",
    "resolve_url",
]
