import pytest
from fastapi.testclient import TestClient
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from app.config import FetchConfig
from app.fixtures import get_crawler
from crawler.browser_crawler import BrowserCrawler

FIXTURE_HTML = """
<html><body>
  <div class="event__match event__match--scheduled">
    <div class="event__time">01.03.2025 14:00</div>
    <div class="event__participant--home">Karaman FK</div>
    <div class="event__participant--away">Altınordu</div>
  </div>
</body></html>
"""


class StaticCrawler:
    def __init__(self, html):
        self.html = html

    async def fetch_html(self):
        return self.html


@pytest.fixture
def client():
    from main import app
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def app():
    from main import app
    return app


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Karaman FK Fikstür API"
    assert data["endpoints"] == {"fikstur": "/api/fikstur", "health": "/health"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert response.json()["message"]


def test_fixtures_success(client, app):
    app.dependency_overrides[get_crawler] = lambda: StaticCrawler(FIXTURE_HTML)

    response = client.get("/api/fikstur")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "count": 1,
        "matches": [{
            "tarih": "01.03.2025",
            "saat": "14:00",
            "evSahibi": "Karaman FK",
            "deplasman": "Altınordu",
            "stadyum": "Yeni Karaman Stadyumu",
        }]
    }


def test_fixtures_empty_page_is_not_an_error(client, app):
    app.dependency_overrides[get_crawler] = lambda: StaticCrawler("<html><body></body></html>")

    response = client.get("/api/fikstur")

    assert response.status_code == 200
    assert response.json() == {"success": True, "count": 0, "matches": []}


def test_fixtures_timeout_returns_500_and_releases_browser(client, app, fake_playwright):
    driver = fake_playwright(goto_error=PlaywrightTimeoutError("Timeout 30000ms exceeded."))
    app.dependency_overrides[get_crawler] = lambda: BrowserCrawler(
        fetch_config=FetchConfig(settle_ms=0),
        playwright_factory=driver,
    )

    response = client.get("/api/fikstur")

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert "Timeout" in data["error"]
    assert driver.browser.closed is True
