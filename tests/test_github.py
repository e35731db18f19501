"""Tests for the GitHub star count adapter."""

from unittest.mock import patch

import pytest

from chatquery.exceptions import ConfigurationError, DecodeError, InvalidQueryError, TransportError
from chatquery.providers.github import github_stars, iter_repository_pages, next_page_number

REPOS_URL = "https://api.github.com/user/1/repos"


def _link(page, last=3):
    return (
        f'<{REPOS_URL}?type=public&per_page=50&page={page}>; rel="next", '
        f'<{REPOS_URL}?type=public&per_page=50&page={last}>; rel="last"'
    )


def _paged_responses(respond, sizes):
    """Owner listing split into pages; stars run 1, 2, 3, ... across all pages."""
    star = 1
    responses = []
    for index, size in enumerate(sizes):
        repos = []
        for _ in range(size):
            repos.append({"name": f"repo{star}", "fork": False, "stargazers_count": star})
            star += 1
        has_next = index + 1 < len(sizes)
        headers = {"Link": _link(index + 2, len(sizes))} if has_next else {}
        responses.append(respond(json=repos, headers=headers))
    return responses


def test_owner_stars_are_summed_across_pages(settings, respond):
    responses = _paged_responses(respond, [50, 50, 7])
    with patch("chatquery.providers.github.http_get", side_effect=responses) as mock_get:
        output = github_stars("aarondl", settings)

    assert output == f"\x02GitHub:\x02 {sum(range(1, 108))}"
    assert mock_get.call_count == 3
    pages = [call.kwargs["params"]["page"] for call in mock_get.call_args_list]
    assert pages == [1, 2, 3]
    first = mock_get.call_args_list[0]
    assert first.args[0] == "https://api.github.com/users/aarondl/repos"
    assert first.kwargs["params"]["type"] == "public"
    assert first.kwargs["params"]["per_page"] == 50
    assert first.kwargs["headers"]["Authorization"] == "Bearer gh-token"


def test_owner_pagination_stops_on_empty_page(settings, respond):
    responses = [
        respond(json=[{"name": "a", "stargazers_count": 3}], headers={"Link": _link(2)}),
        respond(json=[], headers={"Link": _link(3)}),
        respond(json=[{"name": "never", "stargazers_count": 1000}]),
    ]
    with patch("chatquery.providers.github.http_get", side_effect=responses) as mock_get:
        output = github_stars("aarondl", settings)

    assert output == "\x02GitHub:\x02 3"
    assert mock_get.call_count == 2


def test_owner_missing_counts_and_forks(settings, respond):
    repos = [
        {"name": "a"},
        {"name": "b", "stargazers_count": None},
        {"name": "c", "stargazers_count": 7},
        {"name": "forked", "fork": True, "stargazers_count": 900},
    ]
    with patch("chatquery.providers.github.http_get", return_value=respond(json=repos)):
        assert github_stars("aarondl", settings) == "\x02GitHub:\x02 7"


def test_owner_without_public_repositories(settings, respond):
    with patch("chatquery.providers.github.http_get", return_value=respond(json=[])) as mock_get:
        assert github_stars("nobody", settings) == "\x02GitHub: No results found.\x02"

    assert mock_get.call_count == 1


def test_unknown_owner(settings, respond):
    with patch("chatquery.providers.github.http_get", return_value=respond(404, json={"message": "Not Found"})):
        assert github_stars("no-such-owner-xyz", settings) == "\x02GitHub: No results found.\x02"


def test_single_repository(settings, respond):
    body = {"name": "query", "full_name": "aarondl/query", "fork": False, "stargazers_count": 12}
    with patch("chatquery.providers.github.http_get", return_value=respond(json=body)) as mock_get:
        assert github_stars("aarondl/query", settings) == "\x02GitHub:\x02 12"

    assert mock_get.call_args.args[0] == "https://api.github.com/repos/aarondl/query"


def test_single_repository_missing_count(settings, respond):
    with patch("chatquery.providers.github.http_get", return_value=respond(json={"name": "query"})):
        assert github_stars("aarondl/query", settings) == "\x02GitHub:\x02 0"


def test_rate_limited(settings, respond):
    with patch("chatquery.providers.github.http_get", return_value=respond(403, json={"message": "rate limit"})):
        with pytest.raises(TransportError) as excinfo:
            github_stars("aarondl", settings)

    assert excinfo.value.status_code == 403


def test_listing_that_is_not_a_list(settings, respond):
    with patch("chatquery.providers.github.http_get", return_value=respond(json={"message": "odd"})):
        with pytest.raises(DecodeError):
            github_stars("aarondl", settings)


def test_empty_target(settings):
    with pytest.raises(InvalidQueryError):
        github_stars("   ", settings)


def test_requires_token(bare_settings):
    with patch("chatquery.providers.github.http_get") as mock_get:
        with pytest.raises(ConfigurationError, match="github_api_key"):
            github_stars("aarondl", bare_settings)

    mock_get.assert_not_called()


def test_next_page_number(respond):
    assert next_page_number(respond(json=[], headers={"Link": _link(4, 9)})) == 4
    assert next_page_number(respond(json=[])) is None
    last_only = f'<{REPOS_URL}?page=9>; rel="last"'
    assert next_page_number(respond(json=[], headers={"Link": last_only})) is None


def test_iter_repository_pages_is_lazy(respond):
    responses = _paged_responses(respond, [50, 50, 7])
    with patch("chatquery.providers.github.http_get", side_effect=responses) as mock_get:
        pages = iter_repository_pages("aarondl", "token")
        first = next(pages)

    assert len(first.repositories) == 50
    assert first.next_page == 2
    assert mock_get.call_count == 1


@pytest.mark.parametrize("target", ["/query", "aarondl/query/extra", "/"])
def test_malformed_target(settings, target):
    with patch("chatquery.providers.github.http_get") as mock_get:
        with pytest.raises(InvalidQueryError):
            github_stars(target, settings)

    mock_get.assert_not_called()
