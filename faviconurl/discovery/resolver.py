"""Relative URL resolution"""

from urllib.parse import SplitResult


def is_opaque(url: SplitResult) -> bool:
    """Return whether `url` is opaque, e.g. `data:` or `mailto:` URIs."""
    return bool(url.scheme) and not url.netloc and bool(url.path) and url.path[0] != "/"


def resolve_url(base: SplitResult, ref: SplitResult) -> SplitResult:
    """Resolve `ref` against `base`.

    This is not RFC 3986 resolution. A path that does not start with `/` is
    appended to the base path after a literal `/`, so `icon.png` against
    `https://a.com/dir` gives `https://a.com/dir/icon.png` and against
    `https://a.com/` gives `https://a.com//icon.png`. Dot segments are kept
    as they are. A missing scheme or host is taken from `base`.

    Opaque references are returned unchanged.
    """
    if is_opaque(ref):
        return ref

    if not ref.path.startswith("/"):
        ref = ref._replace(path=f"{base.path}/{ref.path}")

    if not ref.scheme:
        ref = ref._replace(scheme=base.scheme)

    if not ref.netloc:
        ref = ref._replace(netloc=base.netloc)

    return ref
