"""Invoke entry point: `invoke --list` from the project root."""

from token_creator.tasks import namespace
