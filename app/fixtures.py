"""
Fixture endpoint: render the team page, extract upcoming matches.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.config import FetchConfig, LaunchConfig, TeamConfig
from crawler.browser_crawler import BrowserCrawler
from pipeline.extractor import FixtureExtractor

logger = logging.getLogger(__name__)
router = APIRouter()


class MatchOut(BaseModel):
    tarih: str
    saat: str
    evSahibi: str
    deplasman: str
    stadyum: str


class FixtureResponse(BaseModel):
    success: bool
    count: int
    matches: List[MatchOut]


class FixtureError(BaseModel):
    success: bool = False
    error: str


def get_crawler() -> BrowserCrawler:
    """Dependency building a fetcher from the environment's launch profile."""
    return BrowserCrawler(
        launch_config=LaunchConfig.from_env(),
        fetch_config=FetchConfig.from_env(),
    )


def get_extractor() -> FixtureExtractor:
    return FixtureExtractor(team=TeamConfig.from_env())


@router.get(
    "/api/fikstur",
    response_model=FixtureResponse,
    responses={500: {"model": FixtureError}},
)
async def get_fixtures(
    crawler: BrowserCrawler = Depends(get_crawler),
    extractor: FixtureExtractor = Depends(get_extractor),
):
    """
    Fetch the tracked team's fixture page and return its upcoming matches.

    Any failure is reported as HTTP 500 with ``success: false`` and the error message.
    """
    logger.info("[fikstur] Fixture request received")
    try:
        html = await crawler.fetch_html()
        matches = extractor.extract(html)
    except Exception as e:
        logger.error(f"[fikstur] Error: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": str(e) or e.__class__.__name__
            }
        )

    logger.info(f"[fikstur] Returning {len(matches)} matches")
    return {
        "success": True,
        "count": len(matches),
        "matches": [match.to_dict() for match in matches]
    }
