"""Advisory Cache Header: client-side caching hint for read endpoints.

Invariants:
    - Header only; the server keeps no cache and never invalidates anything
"""

from fastapi import Response

from sample_api.config import get_settings


def set_cache_control(response: Response) -> None:
    response.headers["Cache-Control"] = f"max-age={get_settings().cache_max_age}"
