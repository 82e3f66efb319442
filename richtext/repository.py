"""
In-memory content repository.

Implements the content and location lookups on top of plain dictionaries,
optionally loaded from a YAML fixture file:

    locations:
      - {id: 42, path: [1, 2, 42], content_id: 7, url_alias: /news/article}
    contents:
      - {id: 7, main_location_id: 42, name: Article}
    restricted:
      contents: [9]
      locations: [13]

Objects listed under ``restricted`` exist but can't be read, which is how
permission failures are simulated.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Set

import yaml

from .services import (
    ConfigurationError,
    ContentInfo,
    ContentService,
    Location,
    LocationService,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class InMemoryRepository(ContentService, LocationService):
    """Dictionary backed content and location service."""

    def __init__(
        self,
        contents: Optional[Iterable[ContentInfo]] = None,
        locations: Optional[Iterable[Location]] = None,
        restricted_contents: Optional[Iterable[int]] = None,
        restricted_locations: Optional[Iterable[int]] = None
    ):
        self.contents: Dict[int, ContentInfo] = {c.id: c for c in contents or []}
        self.locations: Dict[int, Location] = {location.id: location for location in locations or []}
        self.restricted_contents: Set[int] = set(restricted_contents or [])
        self.restricted_locations: Set[int] = set(restricted_locations or [])

    def add_content(self, content_info: ContentInfo) -> None:
        self.contents[content_info.id] = content_info

    def add_location(self, location: Location) -> None:
        self.locations[location.id] = location

    def load_content_info(self, content_id: int) -> ContentInfo:
        if content_id in self.restricted_contents:
            raise UnauthorizedError("content", content_id)
        try:
            return self.contents[content_id]
        except KeyError:
            raise NotFoundError("content", content_id) from None

    def load_location(self, location_id: int) -> Location:
        if location_id in self.restricted_locations:
            raise UnauthorizedError("location", location_id)
        try:
            return self.locations[location_id]
        except KeyError:
            raise NotFoundError("location", location_id) from None

    @classmethod
    def from_dict(cls, data: dict) -> 'InMemoryRepository':
        """
        Build a repository from fixture data.

        Raises:
            ConfigurationError: If an entry is missing required keys
        """
        try:
            contents = [
                ContentInfo(
                    id=int(entry['id']),
                    main_location_id=int(entry['main_location_id']),
                    name=str(entry.get('name', ''))
                )
                for entry in data.get('contents') or []
            ]
            locations = [
                Location(
                    id=int(entry['id']),
                    path=[int(p) for p in entry.get('path') or [entry['id']]],
                    content_id=entry.get('content_id'),
                    url_alias=entry.get('url_alias')
                )
                for entry in data.get('locations') or []
            ]
            restricted = data.get('restricted') or {}
            restricted_contents = [int(i) for i in restricted.get('contents') or []]
            restricted_locations = [int(i) for i in restricted.get('locations') or []]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(f"Invalid repository data: {e}") from e

        return cls(contents, locations, restricted_contents, restricted_locations)

    @classmethod
    def load(cls, path: Path) -> 'InMemoryRepository':
        """
        Load a repository from a YAML fixture file.

        Raises:
            ConfigurationError: If the file isn't valid YAML, not a mapping, or has bad entries
        """
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Repository file must contain a mapping: {path}")

        repository = cls.from_dict(data)
        logger.info(
            f"Loaded repository {path}: {len(repository.contents)} contents, "
            f"{len(repository.locations)} locations"
        )
        return repository
