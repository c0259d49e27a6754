"""Toggl API access for togglsum."""

from .client import TogglClient

__all__ = ['TogglClient']
