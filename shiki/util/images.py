"""Image URL helpers."""

from typing import Optional
from urllib.parse import urlencode, urlsplit


def optimized_image_url(
    url: str, width: Optional[int] = None, height: Optional[int] = None
) -> str:
    """Ask the image CDN for a resized, compressed rendition.

    Only Pexels URLs are rewritten; their existing query string is replaced.
    Any other URL is returned unchanged.

    Args:
        url: Original image URL
        width: Target width in pixels
        height: Target height in pixels

    Returns:
        URL with sizing and compression parameters
    """
    if "pexels.com" not in (urlsplit(url).hostname or ""):
        return url

    params: list[tuple[str, str]] = []
    if width:
        params.append(("w", str(width)))
    if height:
        params.append(("h", str(height)))
    params += [("auto", "compress"), ("cs", "tinysrgb"), ("dpr", "2")]

    base_url = url.split("?", 1)[0]
    return f"{base_url}?{urlencode(params)}"
