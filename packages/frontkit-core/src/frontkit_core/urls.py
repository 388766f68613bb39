"""URL and page file name helpers shared by the compiler and dev-server layer."""

from __future__ import annotations

from urllib.parse import urlparse


def get_path_from_url(url: str, with_slash: bool = True) -> str:
    """Return the path portion of a public URL.

    Args:
        url: Absolute ("https://cdn.example.com/portal/") or path-only URL.
        with_slash: Wrap the result in leading and trailing slashes.

    Returns:
        "/portal/" with slashes, "portal" without. The root path is "/"
        with slashes and "" without.

    Example:
        >>> get_path_from_url("https://cdn.example.com/portal")
        '/portal/'
        >>> get_path_from_url("/portal/", with_slash=False)
        'portal'
    """
    trimmed = urlparse(url).path.strip("/")
    if not with_slash:
        return trimmed
    return f"/{trimmed}/" if trimmed else "/"


def get_page_filename(page_name: str) -> str:
    return f"{page_name}.html"
