"""Toggl Track API access for togglipy."""

from .client import TogglClient

__all__ = ['TogglClient']
