"""Repository slug utilities.

GitHub identifies repositories with ``owner/name`` slugs. Activity payloads
carry them as opaque strings, so parsing here is lenient: it never raises
and degrades to partial references when the slug is not well formed.
"""

from __future__ import annotations

import typing as typ

_SEPARATOR = "/"


class RepoRef(typ.NamedTuple):
    """Repository reference derived from a slug.

    Attributes
    ----------
    name:
        Repository short name, or ``None`` when the slug was absent.
    owner:
        Repository owner, or ``None`` when the slug carries no separator.

    """

    name: str | None
    owner: str | None


def repo_slug(owner: str, name: str) -> str:
    """Build a repository slug from owner and name.

    Examples
    --------
    >>> repo_slug("octo", "reef")
    'octo/reef'

    """
    return f"{owner}{_SEPARATOR}{name}"


def parse_repo_ref(slug: str | None) -> RepoRef:
    """Split a repository slug into ``(name, owner)``.

    The slug is split at the first ``/`` only. Everything after it is the
    short name, taken verbatim even when it contains further separators.

    Parameters
    ----------
    slug:
        Repository slug in ``owner/name`` format, or ``None``.

    Returns
    -------
    RepoRef
        ``(None, None)`` for an absent slug, ``(slug, None)`` when there is
        no separator, otherwise ``(name, owner)``.

    Examples
    --------
    >>> parse_repo_ref("octo/reef")
    RepoRef(name='reef', owner='octo')
    >>> parse_repo_ref("reef")
    RepoRef(name='reef', owner=None)
    >>> parse_repo_ref(None)
    RepoRef(name=None, owner=None)

    """
    if slug is None:
        return RepoRef(None, None)
    owner, separator, name = slug.partition(_SEPARATOR)
    if not separator:
        return RepoRef(slug, None)
    return RepoRef(name, owner)
