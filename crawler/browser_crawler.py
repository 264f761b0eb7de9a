"""
Browser-based fetcher using Playwright for the JavaScript-rendered fixture page.
"""
import logging
from typing import Optional

from playwright.async_api import async_playwright

from app.config import FetchConfig, LaunchConfig

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the browser cannot launch, navigate or finish within the timeout."""
    pass


class BrowserCrawler:
    """Render the fixture page in a fresh headless browser per call"""

    def __init__(
        self,
        launch_config: Optional[LaunchConfig] = None,
        fetch_config: Optional[FetchConfig] = None,
        playwright_factory=async_playwright,
    ):
        self.launch_config = launch_config or LaunchConfig.local()
        self.fetch_config = fetch_config or FetchConfig()
        self._playwright_factory = playwright_factory

    async def fetch_html(self) -> str:
        """
        Fetch the rendered HTML of the configured fixture page.

        One browser is launched and closed per call, on success and on failure.

        Returns:
            Rendered HTML content

        Raises:
            FetchError: on launch, navigation or timeout failure
        """
        url = self.fetch_config.url
        try:
            async with self._playwright_factory() as p:
                logger.info(f"[browser] Launching chromium ({self.launch_config.name} profile)")
                browser = await p.chromium.launch(**self.launch_config.launch_kwargs())
                try:
                    page = await browser.new_page(
                        user_agent=self.fetch_config.user_agent,
                        ignore_https_errors=self.launch_config.ignore_https_errors,
                    )
                    await page.set_extra_http_headers({
                        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
                        'Accept-Language': 'tr-TR,tr;q=0.9,en;q=0.8'
                    })

                    logger.info(f"[browser] Loading {url}")
                    await page.goto(url, wait_until='networkidle', timeout=self.fetch_config.timeout_ms)

                    # Late widgets keep rendering after network idle
                    if self.fetch_config.settle_ms > 0:
                        await page.wait_for_timeout(self.fetch_config.settle_ms)

                    html = await page.content()
                    logger.info(f"[browser] Fetched {len(html)} bytes from {url}")
                    return html
                finally:
                    await browser.close()
        except Exception as e:
            message = str(e) or e.__class__.__name__
            logger.error(f"[browser] Fetch failed for {url}: {message}")
            raise FetchError(message) from e
