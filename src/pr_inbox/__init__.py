"""
PR Inbox

Open pull requests you wrote, and the ones waiting on you.
"""

__version__ = "1.0.0"

from .api import InboxReport, PRInboxAPI

__all__ = ["InboxReport", "PRInboxAPI"]
