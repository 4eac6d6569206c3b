"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and User-Agent for every call to the host.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from frontkick.core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/vnd.github+json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.github_api_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
