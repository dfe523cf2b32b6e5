"""Unit tests for repository slug utility."""

from __future__ import annotations

import pytest

from ghactivity.common.slug import RepoRef, parse_repo_ref, repo_slug


def test_repo_slug_combines_owner_and_name() -> None:
    """repo_slug returns owner/name format."""
    assert repo_slug("octo", "reef") == "octo/reef"


def test_parse_repo_ref_splits_owner_and_name() -> None:
    """parse_repo_ref returns (name, owner) for well-formed slugs."""
    assert parse_repo_ref("a/b") == RepoRef(name="b", owner="a")
    assert parse_repo_ref("Owner-Org/Repo_Name") == ("Repo_Name", "Owner-Org")


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        (None, (None, None)),
        ("reef", ("reef", None)),
        ("", ("", None)),
        ("owner/name/extra", ("name/extra", "owner")),
        ("owner/", ("", "owner")),
        ("/name", ("name", "")),
        ("owner//name", ("/name", "owner")),
    ],
)
def test_parse_repo_ref_splits_at_first_separator(
    slug: str | None, expected: tuple[str | None, str | None]
) -> None:
    """Only the first separator splits; the remainder is kept verbatim."""
    assert parse_repo_ref(slug) == expected, f"unexpected parse for {slug!r}"


def test_parse_repo_ref_round_trips_owner_and_name() -> None:
    """A slug built from owner and name parses back to the same pair."""
    ref = parse_repo_ref(repo_slug("octo", "reef"))
    assert (ref.owner, ref.name) == ("octo", "reef")
