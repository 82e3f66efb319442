"""
Service contracts consumed by the rich text converters.

The converters never talk to storage, routing or the siteaccess registry
directly. They receive implementations of the abstract classes below at
construction time.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


URL_ALIAS_ROUTE_NAME = "ibexa.url.alias"


class RichTextError(Exception):
    """Base class for all errors raised by rich text services."""


class NotFoundError(RichTextError):
    """Requested content or location does not exist."""

    def __init__(self, what: str, identifier: Any):
        super().__init__(f"Could not find '{what}' with identifier '{identifier}'")
        self.what = what
        self.identifier = identifier


class UnauthorizedError(RichTextError):
    """Current user is not allowed to read the requested object."""

    def __init__(self, what: str, identifier: Any):
        super().__init__(f"Not authorized to read '{what}' with identifier '{identifier}'")
        self.what = what
        self.identifier = identifier


class UrlGenerationError(RichTextError):
    """Router could not build a URL for the given parameters."""


class ConfigurationError(RichTextError):
    """Configuration or fixture data is malformed."""


@dataclass
class ContentInfo:
    """Content metadata needed to find a content item's main location"""
    id: int
    main_location_id: int
    name: str = ""


@dataclass
class Location:
    """A node in the content tree"""
    id: int
    path: List[int] = field(default_factory=list)  # Root to self, inclusive
    content_id: Optional[int] = None
    url_alias: Optional[str] = None  # e.g. "/news/article"


@dataclass
class SiteAccess:
    """A named site partition (tenant, language, ...)"""
    name: str


class ContentService(ABC):

    @abstractmethod
    def load_content_info(self, content_id: int) -> ContentInfo:
        """
        Load content metadata.

        Raises:
            NotFoundError: If the content does not exist
            UnauthorizedError: If the content can't be read
        """


class LocationService(ABC):

    @abstractmethod
    def load_location(self, location_id: int) -> Location:
        """
        Load a location.

        Raises:
            NotFoundError: If the location does not exist
            UnauthorizedError: If the location can't be read
        """


class Router(ABC):

    @abstractmethod
    def generate(self, route_name: str, parameters: Dict[str, Any]) -> str:
        """
        Generate an absolute URL for a route.

        Raises:
            UrlGenerationError: If no URL can be generated
        """


class SiteAccessService(ABC):

    @abstractmethod
    def get_current(self) -> Optional[SiteAccess]:
        """Return the siteaccess handling the current request, if any."""


class ConfigResolver(ABC):

    @abstractmethod
    def get_parameter(self, name: str, namespace: str, default: Any = None) -> Any:
        """Return a configuration parameter from the given namespace."""
