"""
Pure transforms over lists of repositories.

None of these functions mutates its input; each returns a new list (or a number).
Numeric arguments are expected to be validated by the caller.
"""

from typing import List, Sequence

from pyuca import Collator

from github_org_api.domain.models import Repository

# Unicode Collation Algorithm with the default table; same order as ICU root collation for names
_collator = Collator()


def filter_by_stars(repos: Sequence[Repository], min_stars: int) -> List[Repository]:
    """Keeps repositories with strictly more than ``min_stars`` stars."""
    return [repo for repo in repos if repo.stars > min_stars]


def sort_by_updated_desc(repos: Sequence[Repository]) -> List[Repository]:
    # ISO-8601 timestamps order lexicographically; sorted() stays stable with reverse=True
    return sorted(repos, key=lambda repo: repo.updated_at, reverse=True)


def sort_by_stars_desc(repos: Sequence[Repository]) -> List[Repository]:
    return sorted(repos, key=lambda repo: repo.stars, reverse=True)


def sort_alphabetically(repos: Sequence[Repository]) -> List[Repository]:
    """
    Sorts by name using Unicode collation: punctuation before digits, digits
    before letters, and lowercase before uppercase when names differ only in case.
    """
    return sorted(repos, key=lambda repo: _collator.sort_key(repo.name))


def filter_out_repos_starting_with_h(repos: Sequence[Repository]) -> List[Repository]:
    return [repo for repo in repos if not repo.name.casefold().startswith("h")]


def take(repos: Sequence[Repository], n: int) -> List[Repository]:
    """First ``n`` repositories in their current order; empty when ``n`` <= 0."""
    if n <= 0:
        return []
    return list(repos[:n])


def sum_stars(repos: Sequence[Repository]) -> int:
    return sum(repo.stars for repo in repos)
