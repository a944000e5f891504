import aiohttp
import asyncio
import logging
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

from pydantic import ValidationError

from github_org_api import config
from github_org_api.domain.exceptions import NetworkError, ParseError, RemoteStatusError
from github_org_api.domain.models import RawRepository

logger = logging.getLogger(__name__)

PAGE_SIZE = 100
NOT_MODIFIED = 304


class GitHubRestClient:
    """
    Client for the GitHub REST "list organization repositories" endpoint.
    Follows Link header pagination until the last page; never retries.
    """

    def __init__(
        self,
        base_url: str = config.GITHUB_API_URL,
        user_agent: str = config.GITHUB_USER_AGENT,
        timeout_seconds: float = config.REQUEST_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
        }
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds, connect=10)

    def build_org_repos_url(self, org: str) -> str:
        # org is a single opaque path segment
        return (
            f"{self.base_url}/orgs/{quote(org, safe='')}/repos"
            f"?per_page={PAGE_SIZE}&type=public&sort=updated&direction=desc"
        )

    async def fetch_page(
        self,
        session: aiohttp.ClientSession,
        url: str,
    ) -> Tuple[List[RawRepository], Optional[str], bool]:
        """
        Fetches a single page of repositories.

        Returns:
            Tuple of (repositories, next_url, not_modified).

        Raises:
            RemoteStatusError: GitHub answered with a status >= 400.
            ParseError: The body is not a JSON array of repository objects.
            NetworkError: The request failed before a response was received.
        """
        try:
            async with session.get(url, headers=self.headers, timeout=self.timeout) as response:
                if response.status == NOT_MODIFIED:
                    logger.info(f"GitHub reported not modified for {url}. Stopping pagination.")
                    return [], None, True

                if response.status >= 400:
                    logger.warning(f"GitHub error ({response.status}) for {url}.")
                    raise RemoteStatusError(status_code=response.status, url=url)

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise ParseError(f"Response from {url} is not valid JSON: {e}") from e

                repos = self._parse_repositories(data, url)
                next_link = response.links.get("next")
                next_url = str(next_link["url"]) if next_link else None
                return repos, next_url, False

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Request to {url} failed: {e!r}")
            raise NetworkError(f"Request to {url} failed: {e!r}") from e

    @staticmethod
    def _parse_repositories(data: Any, url: str) -> List[RawRepository]:
        if not isinstance(data, list):
            raise ParseError(f"Expected a JSON array from {url}, got {type(data).__name__}.")
        try:
            return [RawRepository.model_validate(item) for item in data]
        except ValidationError as e:
            raise ParseError(f"Unexpected repository shape from {url}: {e}") from e

    async def list_org_repos(self, session: aiohttp.ClientSession, org: str) -> List[RawRepository]:
        """
        Retrieves every public repository of an organization, page by page.

        Pages are requested one after another because the next URL is only known
        once the current response headers have been read. Records keep the order
        in which GitHub returned them.
        """
        url: Optional[str] = self.build_org_repos_url(org)
        repositories: List[RawRepository] = []
        pages = 0

        while url:
            page, url, not_modified = await self.fetch_page(session, url)
            if not_modified:
                break
            pages += 1
            repositories.extend(page)
            logger.debug(f"[{org}] Page {pages}: {len(page)} repositories. Total: {len(repositories)}.")

        logger.info(f"[{org}] Fetched {len(repositories)} repositories in {pages} page(s).")
        return repositories
