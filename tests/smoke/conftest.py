"""
Smoke-test fixtures for the ImagineX Deals deployment.

Provides the ``smoke_base_url`` session-scoped fixture that yields a
reachable target URL shared across the entire smoke suite, and a pooled
``requests`` session.  URL resolution is delegated to
:func:`shared.live_target.live_target_url`, which skips the suite when the
deployment does not answer.

Key SDET Concepts Demonstrated:
- Session-scoped URL fixtures to share a single target across all smoke tests
- Delegating target resolution to a shared helper reused by the browser suites
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
import requests

from config import get_config
from shared.live_target import live_target_url


@pytest.fixture(scope="session")
def smoke_base_url(pytestconfig) -> Generator[str, None, None]:
    """Yield a reachable target URL for smoke tests."""
    settings = get_config()
    yield from live_target_url(
        base_url_default=settings.BASE_URL,
        explicit_base_url=pytestconfig.getoption("base_url", None),
        suite_name="smoke",
        timeout=settings.TARGET_READY_TIMEOUT,
    )


@pytest.fixture(scope="session")
def http() -> Generator[requests.Session, None, None]:
    """Pooled HTTP session for the smoke suite."""
    with requests.Session() as session:
        session.headers["User-Agent"] = "imaginex-deals-smoke"
        yield session
