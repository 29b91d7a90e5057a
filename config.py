"""
Suite configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local workstation, CI, interactive debugging).
Configuration values are loaded from environment variables with sensible
defaults so the same suite can target a preview deployment or production.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("TEST_BASE_URL", "https://v0-imagine-deals.vercel.app")

    # Playwright timeouts, all in milliseconds
    DEFAULT_TIMEOUT: int = int(os.environ.get("E2E_DEFAULT_TIMEOUT", "5000"))
    NAVIGATION_TIMEOUT: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT", "10000"))

    # Upper bound for a page to settle in the performance checks, in milliseconds
    PAGE_LOAD_BUDGET: int = int(os.environ.get("E2E_PAGE_LOAD_BUDGET", "5000"))

    # Seconds to wait for the target to answer before skipping the e2e session
    TARGET_READY_TIMEOUT: int = int(os.environ.get("E2E_TARGET_READY_TIMEOUT", "30"))

    RESULTS_DIR: Path = Path(os.environ.get("E2E_RESULTS_DIR", BASE_DIR / "test-results"))
    SCREENSHOT_DIR: Path = RESULTS_DIR / "screenshots"
    REPORT_PATH: Path = RESULTS_DIR / "report.html"

    DESKTOP_VIEWPORT: dict = {"width": 1920, "height": 1080}
    TABLET_VIEWPORT: dict = {"width": 768, "height": 1024}
    MOBILE_VIEWPORT: dict = {"width": 375, "height": 667}

    IGNORE_HTTPS_ERRORS: bool = False


class LocalConfig(Config):
    """Local workstation configuration."""

    # Self-signed preview certificates are common on developer machines
    IGNORE_HTTPS_ERRORS: bool = True


class CIConfig(Config):
    """Continuous-integration configuration."""

    # Shared runners are slower than workstations
    DEFAULT_TIMEOUT: int = int(os.environ.get("E2E_DEFAULT_TIMEOUT", "10000"))
    NAVIGATION_TIMEOUT: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT", "20000"))
    PAGE_LOAD_BUDGET: int = int(os.environ.get("E2E_PAGE_LOAD_BUDGET", "10000"))
    TARGET_READY_TIMEOUT: int = int(os.environ.get("E2E_TARGET_READY_TIMEOUT", "60"))


class DebugConfig(LocalConfig):
    """Interactive debugging configuration (Playwright inspector, headed runs)."""

    DEFAULT_TIMEOUT: int = 0
    NAVIGATION_TIMEOUT: int = 0


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "debug": DebugConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci, debug).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "local")
    return config.get(env, config["default"])
