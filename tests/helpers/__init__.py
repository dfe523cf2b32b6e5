"""Shared helpers for ghactivity unit and behavioural tests."""
