"""Shared helpers used across ghactivity layers."""

from __future__ import annotations

from .slug import RepoRef, parse_repo_ref, repo_slug

__all__ = ["RepoRef", "parse_repo_ref", "repo_slug"]
