"""Data models for favicon discovery"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from faviconurl.exceptions import FaviconUrlError


class LinkKind(str, Enum):
    """Kinds of references recognized in HTML markup."""

    ICON = "icon"
    CANONICAL = "canonical"
    MANIFEST = "manifest"


class Link(BaseModel):
    """A classified reference found in a <link> or <meta> element."""

    model_config = ConfigDict(frozen=True)

    kind: LinkKind
    target: str


class Diagnostic(BaseModel):
    """A non-fatal problem reported alongside a result."""

    model_config = ConfigDict(frozen=True)

    kind: str
    message: str

    @classmethod
    def from_error(cls, error: FaviconUrlError) -> "Diagnostic":
        """Build a diagnostic from a raised error."""
        return cls(kind=error.kind, message=str(error))


class LinkExtraction(BaseModel):
    """Links found in a document, in document order."""

    links: list[Link] = []
    warnings: list[Diagnostic] = []


class ManifestIcon(BaseModel):
    """An entry of a web app manifest `icons` array."""

    src: str = ""
    sizes: str = ""
    type: str = ""

    @field_validator("src", "sizes", "type", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        """Treat JSON null like a missing member."""
        return "" if value is None else value


class Manifest(BaseModel):
    """The subset of a web app manifest used for icon discovery."""

    icons: list[ManifestIcon] = []

    @field_validator("icons", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        """Treat a null `icons` member or a null icon entry like a missing one."""
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if icon is None else icon for icon in value]
        return value

    @model_validator(mode="before")
    @classmethod
    def null_document(cls, data: Any) -> Any:
        """Decode a `null` document as a manifest without icons."""
        return {} if data is None else data


class ManifestIcons(BaseModel):
    """Absolute icon URLs read from a manifest."""

    icons: list[str] = []
    warnings: list[Diagnostic] = []


class DiscoveryResult(BaseModel):
    """Icons discovered for one address."""

    original_url: str
    resolved_url: str
    icons: list[str] = []
    warnings: list[Diagnostic] = []

    @property
    def redirected(self) -> bool:
        """Return whether redirects or a canonical link changed the address."""
        return self.original_url != self.resolved_url
