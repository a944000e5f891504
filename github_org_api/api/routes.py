from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, Query

from github_org_api.application.repository_service import RepositoryService
from github_org_api.domain.models import Repository, StarSum
from github_org_api.infrastructure.github_client import GitHubRestClient

router = APIRouter()

DEFAULT_MIN_STARS = 5
DEFAULT_LIMIT = 5

API_DESCRIPTION = {
    "message": "GitHub StackBuilders API",
    "endpoints": {
        "GET /org/:org/repos?minStars=5": "Get repositories with more than minStars stars (default: 5)",
        "GET /org/:org/latest?limit=5": "Get latest updated repositories (default: 5)",
        "GET /org/:org/star-sum": "Get sum of all repository stars",
        "GET /org/:org/top-stars?limit=5": "Get top repositories by stars (default: 5)",
        "GET /org/:org/alphabetical": "Get all repositories alphabetically, excluding those starting with 'h'",
    },
    "example": {
        "repos": "/org/stackbuilders/repos",
        "latest": "/org/stackbuilders/latest",
        "starSum": "/org/stackbuilders/star-sum",
        "topStars": "/org/stackbuilders/top-stars",
        "alphabetical": "/org/stackbuilders/alphabetical",
    },
}


def get_repository_service() -> RepositoryService:
    return RepositoryService(github_client=GitHubRestClient())


@router.get("/")
async def describe_api():
    return API_DESCRIPTION


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/org/{org}/repos", response_model=List[Repository])
async def repos_above_min_stars(
    org: str,
    min_stars: int = Query(DEFAULT_MIN_STARS, alias="minStars", ge=0),
    service: RepositoryService = Depends(get_repository_service),
):
    return await service.repos_above(org, min_stars)


@router.get("/org/{org}/latest", response_model=List[Repository])
async def latest_updated(
    org: str,
    limit: int = Query(DEFAULT_LIMIT, ge=0),
    service: RepositoryService = Depends(get_repository_service),
):
    return await service.latest(org, limit)


@router.get("/org/{org}/star-sum", response_model=StarSum)
async def star_sum(org: str, service: RepositoryService = Depends(get_repository_service)):
    return await service.star_sum(org)


@router.get("/org/{org}/top-stars", response_model=List[Repository])
async def top_stars(
    org: str,
    limit: int = Query(DEFAULT_LIMIT, ge=0),
    service: RepositoryService = Depends(get_repository_service),
):
    return await service.top_stars(org, limit)


@router.get("/org/{org}/alphabetical", response_model=List[Repository])
async def alphabetical(org: str, service: RepositoryService = Depends(get_repository_service)):
    """All repositories except those starting with "h", sorted by name."""
    return await service.alphabetical(org)
