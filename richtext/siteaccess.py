"""
Siteaccess lookup for a fixed, preconfigured siteaccess.
"""

from typing import Optional

from .services import SiteAccess, SiteAccessService


class StaticSiteAccessService(SiteAccessService):
    """Always reports the same current siteaccess, or none when no name is given."""

    def __init__(self, name: Optional[str] = None):
        self.current = SiteAccess(name) if name else None

    def get_current(self) -> Optional[SiteAccess]:
        return self.current
