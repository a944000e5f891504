import logging
from typing import List

import aiohttp

from github_org_api.application import transforms
from github_org_api.domain.models import Repository, StarSum
from github_org_api.infrastructure.acl import GitHubTranslator
from github_org_api.infrastructure.github_client import GitHubRestClient

logger = logging.getLogger(__name__)


class RepositoryService:
    """
    Service that fetches an organization's repositories from GitHub and
    reshapes them for each API route.

    Every call performs its own paginated fetch; nothing is cached or shared
    between calls.
    """

    def __init__(self, github_client: GitHubRestClient):
        self.github_client = github_client

    async def _fetch(self, org: str) -> List[Repository]:
        async with aiohttp.ClientSession() as session:
            raw_repos = await self.github_client.list_org_repos(session, org)
        return [GitHubTranslator.to_domain(raw) for raw in raw_repos]

    async def repos_above(self, org: str, min_stars: int) -> List[Repository]:
        repos = await self._fetch(org)
        result = transforms.filter_by_stars(repos, min_stars)
        logger.info(f"[{org}] {len(result)}/{len(repos)} repositories with more than {min_stars} stars.")
        return result

    async def latest(self, org: str, limit: int) -> List[Repository]:
        repos = await self._fetch(org)
        logger.info(f"[{org}] Selecting {limit} most recently updated of {len(repos)} repositories.")
        return transforms.take(transforms.sort_by_updated_desc(repos), limit)

    async def star_sum(self, org: str) -> StarSum:
        repos = await self._fetch(org)
        total = transforms.sum_stars(repos)
        logger.info(f"[{org}] {total} stars across {len(repos)} repositories.")
        return StarSum(org=org, total_stars=total)

    async def top_stars(self, org: str, limit: int) -> List[Repository]:
        repos = await self._fetch(org)
        logger.info(f"[{org}] Selecting top {limit} by stars of {len(repos)} repositories.")
        return transforms.take(transforms.sort_by_stars_desc(repos), limit)

    async def alphabetical(self, org: str) -> List[Repository]:
        """All repositories except those whose name starts with "h", sorted by name."""
        repos = await self._fetch(org)
        result = transforms.sort_alphabetically(transforms.filter_out_repos_starting_with_h(repos))
        logger.info(f"[{org}] {len(result)}/{len(repos)} repositories listed alphabetically.")
        return result
