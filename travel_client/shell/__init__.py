"""Seams towards the UI shell: navigation signals and notifications."""

from travel_client.shell.navigation import Navigator, Redirect
from travel_client.shell.notifications import Notifier

__all__ = ["Navigator", "Redirect", "Notifier"]
