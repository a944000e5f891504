import json
import unittest
from pathlib import Path

from github_org_api.application import transforms
from github_org_api.domain.models import Repository
from github_org_api.infrastructure.acl import normalize

FIXTURE = Path(__file__).parent / "fixtures" / "stackbuilders-repos.json"


def _load() -> list:
    return [normalize(raw) for raw in json.loads(FIXTURE.read_text(encoding="utf-8"))]


def _repo(name: str, stars: int = 0, updated_at: str = "2025-01-01T00:00:00Z") -> Repository:
    return Repository(name=name, stars=stars, updated_at=updated_at, url=f"https://github.com/acme/{name}")


class TestFilters(unittest.TestCase):
    def test_filter_by_stars_keeps_strictly_greater(self) -> None:
        repos = _load()

        result = transforms.filter_by_stars(repos, 5)

        self.assertEqual(len(result), 6)
        self.assertTrue(all(repo.stars > 5 for repo in result))
        self.assertTrue(all(repo.stars <= 5 for repo in repos if repo not in result))

    def test_filter_by_stars_threshold_is_exclusive(self) -> None:
        repos = [_repo("a", 5), _repo("b", 6)]

        self.assertEqual([r.name for r in transforms.filter_by_stars(repos, 5)], ["b"])

    def test_filter_out_repos_starting_with_h(self) -> None:
        repos = _load()

        result = transforms.filter_out_repos_starting_with_h(repos)

        self.assertEqual(len(result), 7)
        self.assertNotIn("hapistrano", [repo.name for repo in result])
        removed = [repo for repo in repos if repo not in result]
        self.assertTrue(all(repo.name.lower().startswith("h") for repo in removed))

    def test_filter_out_repos_starting_with_h_is_case_insensitive(self) -> None:
        repos = [_repo("Haskell"), _repo("hspec"), _repo("aeson"), _repo("shh")]

        self.assertEqual(
            [r.name for r in transforms.filter_out_repos_starting_with_h(repos)],
            ["aeson", "shh"],
        )


class TestSorts(unittest.TestCase):
    def test_sort_by_updated_desc(self) -> None:
        result = transforms.sort_by_updated_desc(_load())

        self.assertEqual(result[0].name, "tutorialspoint")
        for previous, current in zip(result, result[1:]):
            self.assertGreaterEqual(previous.updated_at, current.updated_at)

    def test_sort_by_stars_desc(self) -> None:
        result = transforms.sort_by_stars_desc(_load())

        self.assertEqual([r.name for r in result[:3]], ["tutorialspoint", "hapistrano", "stache"])
        for previous, current in zip(result, result[1:]):
            self.assertGreaterEqual(previous.stars, current.stars)

    def test_sort_alphabetically(self) -> None:
        result = transforms.sort_alphabetically(_load())

        names = [r.name for r in result]
        self.assertEqual(names, sorted(names))
        self.assertEqual(names[0], "cassava-conduit")

    def test_sort_alphabetically_ignores_case(self) -> None:
        repos = [_repo("beta"), _repo("Alpha"), _repo("alpha-two")]

        self.assertEqual(
            [r.name for r in transforms.sort_alphabetically(repos)],
            ["Alpha", "alpha-two", "beta"],
        )

    def test_sort_alphabetically_orders_punctuation_before_digits_and_letters(self) -> None:
        repos = [_repo("ab"), _repo("a1"), _repo("a.b"), _repo("a-b"), _repo("a_b")]

        self.assertEqual(
            [r.name for r in transforms.sort_alphabetically(repos)],
            ["a_b", "a-b", "a.b", "a1", "ab"],
        )

    def test_sort_alphabetically_puts_lowercase_first_on_case_only_ties(self) -> None:
        repos = [_repo("Repo"), _repo("repo")]

        self.assertEqual([r.name for r in transforms.sort_alphabetically(repos)], ["repo", "Repo"])

    def test_sorts_are_stable_on_ties(self) -> None:
        same_time = "2025-03-03T03:03:03Z"
        repos = [_repo("first", 7, same_time), _repo("second", 7, same_time), _repo("third", 7, same_time)]

        self.assertEqual(transforms.sort_by_stars_desc(repos), repos)
        self.assertEqual(transforms.sort_by_updated_desc(repos), repos)

    def test_sorts_do_not_mutate_input(self) -> None:
        repos = _load()
        original = list(repos)

        transforms.sort_by_stars_desc(repos)
        transforms.sort_by_updated_desc(repos)
        transforms.sort_alphabetically(repos)

        self.assertEqual(repos, original)

    def test_sorts_are_permutations(self) -> None:
        repos = _load()

        for sort in (transforms.sort_by_stars_desc, transforms.sort_by_updated_desc, transforms.sort_alphabetically):
            self.assertCountEqual(sort(repos), repos)


class TestTakeAndSum(unittest.TestCase):
    def test_take_returns_prefix(self) -> None:
        repos = _load()

        self.assertEqual(transforms.take(repos, 3), repos[:3])

    def test_take_more_than_available_returns_everything(self) -> None:
        repos = _load()

        self.assertEqual(transforms.take(repos, 50), repos)

    def test_take_non_positive_returns_empty(self) -> None:
        repos = _load()

        self.assertEqual(transforms.take(repos, 0), [])
        self.assertEqual(transforms.take(repos, -2), [])

    def test_top_five_by_stars(self) -> None:
        top5 = transforms.take(transforms.sort_by_stars_desc(_load()), 5)

        self.assertEqual(len(top5), 5)
        self.assertEqual([r.name for r in top5[:3]], ["tutorialspoint", "hapistrano", "stache"])

    def test_sum_stars(self) -> None:
        repos = _load()

        self.assertEqual(transforms.sum_stars(repos), 315)
        self.assertEqual(transforms.sum_stars(list(reversed(repos))), 315)

    def test_sum_stars_of_empty_list_is_zero(self) -> None:
        self.assertEqual(transforms.sum_stars([]), 0)
