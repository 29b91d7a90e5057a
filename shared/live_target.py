"""Shared target-resolution helpers for smoke and E2E test suites."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import pytest
import requests

from shared.test_data import LOGIN_URL

logger = logging.getLogger(__name__)


def is_target_ready(url: str, timeout: int = 5) -> bool:
    """Return True when the login page answers without a server error."""
    try:
        response = requests.get(f"{url}{LOGIN_URL}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_target_ready(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the target's login page until it answers or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_target_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Target at {url} not reachable after {timeout}s")


def resolve_base_url(explicit: str | None, base_url_env: str, base_url_default: str) -> str:
    """
    Pick the base URL to test against.

    Priority:
    1. An explicit value (e.g. pytest ``--base-url``).
    2. The `base_url_env` environment variable.
    3. `base_url_default` from the active configuration.
    """
    base_url = explicit or os.getenv(base_url_env) or base_url_default
    return base_url.rstrip("/")


def live_target_url(
    *,
    base_url_default: str,
    suite_name: str,
    explicit_base_url: str | None = None,
    base_url_env: str = "TEST_BASE_URL",
    timeout: int = 30,
) -> Generator[str, None, None]:
    """
    Yield a reachable base URL, skipping the suite when the target is down.

    The application under test is external, so an unreachable target is an
    environment gap rather than a product failure.
    """
    base_url = resolve_base_url(explicit_base_url, base_url_env, base_url_default)
    try:
        wait_for_target_ready(base_url, timeout=timeout)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set {base_url_env} to run {suite_name} tests")

    logger.info("Running %s tests against %s", suite_name, base_url)
    yield base_url
