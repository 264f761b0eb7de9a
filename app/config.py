import os
from typing import List, Optional


DEFAULT_FIXTURE_URL = "https://www.flashscore.com.tr/takim/karaman-fk/vF0VBreO/fikstur/"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Flags for a local Chromium running inside a container without a usable sandbox
LOCAL_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--single-process",
    "--disable-gpu",
]

# Flags for a trimmed Chromium build on a serverless runtime (read-only fs, no /dev/shm)
SERVERLESS_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-zygote",
    "--single-process",
    "--hide-scrollbars",
    "--mute-audio",
    "--ignore-gpu-blocklist",
    "--use-gl=swiftshader",
    "--window-size=1920,1080",
]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def is_serverless() -> bool:
    """True when running on Vercel or when explicitly forced."""
    return bool(os.getenv("VERCEL")) or os.getenv("FIXTURE_SERVERLESS", "false").lower() == "true"


def is_dev() -> bool:
    return os.getenv("FIXTURE_ENV", "production").lower() == "dev"


class LaunchConfig:
    """Browser launch profile handed to the fetcher at construction time."""

    def __init__(
        self,
        name: str,
        args: List[str],
        headless: bool = True,
        executable_path: Optional[str] = None,
        ignore_https_errors: bool = False,
    ):
        self.name = name
        self.args = list(args)
        self.headless = headless
        self.executable_path = executable_path
        self.ignore_https_errors = ignore_https_errors

    @classmethod
    def local(cls) -> "LaunchConfig":
        return cls(name="local", args=LOCAL_LAUNCH_ARGS)

    @classmethod
    def serverless(cls, executable_path: Optional[str] = None) -> "LaunchConfig":
        return cls(
            name="serverless",
            args=SERVERLESS_LAUNCH_ARGS,
            executable_path=executable_path or os.getenv("CHROMIUM_EXECUTABLE_PATH"),
            ignore_https_errors=True,
        )

    @classmethod
    def from_env(cls) -> "LaunchConfig":
        if is_serverless():
            return cls.serverless()
        return cls.local()

    def launch_kwargs(self) -> dict:
        """Keyword arguments for ``playwright.chromium.launch``."""
        kwargs = {"headless": self.headless, "args": self.args}
        if self.executable_path:
            kwargs["executable_path"] = self.executable_path
        return kwargs

    def __repr__(self):
        return f"LaunchConfig(name={self.name!r}, headless={self.headless}, args={len(self.args)})"


class FetchConfig:
    """Target page and timing budget for one fixture fetch."""

    def __init__(
        self,
        url: str = DEFAULT_FIXTURE_URL,
        timeout_ms: int = 30000,
        settle_ms: int = 3000,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.url = url
        self.timeout_ms = timeout_ms
        self.settle_ms = settle_ms
        self.user_agent = user_agent

    @classmethod
    def from_env(cls) -> "FetchConfig":
        return cls(
            url=os.getenv("FIXTURE_URL", DEFAULT_FIXTURE_URL),
            timeout_ms=_env_int("FETCH_TIMEOUT_MS", 30000),
            settle_ms=_env_int("FETCH_SETTLE_MS", 3000),
        )


class TeamConfig:
    """The tracked team and the venue labels derived from it."""

    def __init__(
        self,
        name: str = "Karaman",
        home_venue: str = "Yeni Karaman Stadyumu",
        away_venue: str = "Deplasman",
    ):
        self.name = name
        self.home_venue = home_venue
        self.away_venue = away_venue

    @classmethod
    def from_env(cls) -> "TeamConfig":
        return cls(
            name=os.getenv("TRACKED_TEAM", "Karaman"),
            home_venue=os.getenv("HOME_VENUE_LABEL", "Yeni Karaman Stadyumu"),
            away_venue=os.getenv("AWAY_VENUE_LABEL", "Deplasman"),
        )

    def venue_for(self, home_team: str) -> str:
        """Home venue label iff the tracked team name appears in ``home_team``."""
        if self.name and self.name.lower() in (home_team or "").lower():
            return self.home_venue
        return self.away_venue


def get_env_presence() -> dict:
    tracked_vars = [
        "FIXTURE_ENV",
        "FIXTURE_URL",
        "TRACKED_TEAM",
        "HOME_VENUE_LABEL",
        "AWAY_VENUE_LABEL",
        "FETCH_TIMEOUT_MS",
        "FETCH_SETTLE_MS",
        "FIXTURE_SERVERLESS",
        "VERCEL",
        "CHROMIUM_EXECUTABLE_PATH",
        "PORT",
        "CORS_ORIGINS",
    ]
    return {var: bool(os.getenv(var)) for var in tracked_vars}
