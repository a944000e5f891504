from typing import Any, Mapping, Union
from github_org_api.domain.models import RawRepository, Repository

class GitHubTranslator:
    """
    Anti-corruption layer that translates raw GitHub REST records into Repository instances.
    """

    @staticmethod
    def to_domain(raw: Union[RawRepository, Repository, Mapping[str, Any]]) -> Repository:
        """
        Projects a raw GitHub repository record onto the API-facing Repository shape.

        Field renaming only: no defaulting and no extra validation. A value that is
        already a Repository is returned unchanged, so translating twice is the same
        as translating once.

        Args:
            raw: A RawRepository, a raw JSON object from GitHub, or a Repository.

        Returns:
            Repository: The normalized repository.
        """
        if isinstance(raw, Repository):
            return raw
        if not isinstance(raw, RawRepository):
            raw = RawRepository.model_validate(raw)

        return Repository(
            name=raw.name,
            stars=raw.stargazers_count,
            updated_at=raw.updated_at,
            url=raw.html_url,
        )


def normalize(raw: Union[RawRepository, Repository, Mapping[str, Any]]) -> Repository:
    return GitHubTranslator.to_domain(raw)
