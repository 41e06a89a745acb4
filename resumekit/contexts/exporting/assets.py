"""
Static asset retrieval for the exporting context.

The DOCX header embeds one raster badge image. It is fetched once per export,
either over HTTP(S) or from the filesystem (the packaged default).
"""

import os
from pathlib import Path
from typing import Optional, Union

import httpx
from dotenv import load_dotenv

from resumekit.contexts.exporting.exceptions import AssetFetchError
from resumekit.contexts.exporting.logger import _log_debug

load_dotenv()

PACKAGED_BADGE_PATH = Path(__file__).resolve().parents[2] / "assets" / "badge.png"
BADGE_LOCATION = os.getenv("RESUMEKIT_BADGE_LOCATION", str(PACKAGED_BADGE_PATH))
BADGE_FETCH_TIMEOUT_S = float(os.getenv("RESUMEKIT_BADGE_TIMEOUT_S", "10"))


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


async def fetch_badge(
    location: Optional[Union[str, Path]] = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = BADGE_FETCH_TIMEOUT_S,
) -> bytes:
    """
    Fetch the badge image bytes.

    Args:
        location: http(s) URL or filesystem path (default: BADGE_LOCATION)
        client: Existing httpx client to reuse (a short-lived one is created otherwise)
        timeout: Request timeout in seconds when a client is created here

    Returns:
        Raw image bytes

    Raises:
        AssetFetchError: If the request fails, returns a non-2xx status, or the file is unreadable
    """
    location = str(location or BADGE_LOCATION)
    _log_debug(f"Fetching badge: {location}")

    if not is_remote(location):
        try:
            return Path(location).read_bytes()
        except OSError as e:
            raise AssetFetchError("Badge image could not be read", location, e) from e

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(location)
        else:
            response = await client.get(location)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise AssetFetchError("Badge image could not be fetched", location, e) from e

    return response.content
