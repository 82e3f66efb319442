"""
URL alias routing.

Turns a location into an absolute URL for a given siteaccess.
"""

from typing import Any, Dict, Optional

from .services import URL_ALIAS_ROUTE_NAME, Location, Router, UrlGenerationError


class UrlAliasRouter(Router):
    """
    Router for the URL alias route.

    Example:
        router = UrlAliasRouter("https://example.com")
        router.generate(URL_ALIAS_ROUTE_NAME, {"location": loc, "siteaccess": "site-en"})
        # Result: "https://example.com/site-en/news/article"
    """

    def __init__(
        self,
        base_url: str,
        siteaccess_hosts: Optional[Dict[str, str]] = None,
        prefix_siteaccess: bool = True
    ):
        self.base_url = base_url.rstrip('/')
        self.siteaccess_hosts = {
            name: host.rstrip('/') for name, host in (siteaccess_hosts or {}).items()
        }
        self.prefix_siteaccess = prefix_siteaccess

    def generate(self, route_name: str, parameters: Dict[str, Any]) -> str:
        if route_name != URL_ALIAS_ROUTE_NAME:
            raise UrlGenerationError(f"Unknown route '{route_name}'")

        location = parameters.get('location')
        if not isinstance(location, Location):
            raise UrlGenerationError("URL alias route requires a 'location' parameter")
        if not location.url_alias:
            raise UrlGenerationError(f"Location {location.id} has no URL alias")

        siteaccess = parameters.get('siteaccess')
        alias = '/' + location.url_alias.lstrip('/')

        # A siteaccess with its own host is served from that host's root
        if siteaccess and siteaccess in self.siteaccess_hosts:
            return self.siteaccess_hosts[siteaccess] + alias

        if siteaccess and self.prefix_siteaccess:
            return f"{self.base_url}/{siteaccess}{alias}"

        return self.base_url + alias
