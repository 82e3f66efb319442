"""
Internal link resolution for rich text documents.

Rewrites DocBook links that point at repository objects into absolute URLs:

    <link xlink:href="ezcontent://57#intro">  -> content 57, main location
    <link xlink:href="ezlocation://42">        -> location 42
    <ezlink xlink:href="...">                  -> resolved value in href_resolved

The URL is generated for a target siteaccess picked with the
``rte_siteaccess.mapping`` parameter, which maps a root location id to
a language code -> siteaccess table:

    mapping:
      2:   {eng-GB: site-en, fre-FR: site-fr}
      100: {eng-GB: other-en, fre-FR: other-fr}

A link into the tree below location 100 rendered on ``site-fr`` is
generated for ``other-fr``.
"""

import copy
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional

from lxml import etree

from ..services import (
    URL_ALIAS_ROUTE_NAME,
    ConfigResolver,
    ContentService,
    Location,
    LocationService,
    NotFoundError,
    Router,
    SiteAccessService,
    UnauthorizedError,
)
from ..utils.logger import NOTICE, silent_logger
from .base import Converter, Document

DOCBOOK_NS = "http://docbook.org/ns/docbook"
XLINK_NS = "http://www.w3.org/1999/xlink"
NAMESPACES = {'docbook': DOCBOOK_NS, 'xlink': XLINK_NS}

CONTENT_SCHEME = "ezcontent://"
LOCATION_SCHEME = "ezlocation://"

HREF_ATTRIBUTE = f"{{{XLINK_NS}}}href"
RESOLVED_HREF_ATTRIBUTE = "href_resolved"
EMBED_LINK_TAG = "ezlink"

# Href used when a link can't be resolved
UNRESOLVED_HREF = "#"

LINK_XPATH = (
    f"//docbook:link[starts-with(@xlink:href, '{LOCATION_SCHEME}') "
    f"or starts-with(@xlink:href, '{CONTENT_SCHEME}')]|//docbook:ezlink"
)

# <scheme://><id><#fragment>, every part optional
REFERENCE_PATTERN = re.compile(r'^(.+://)?([^#]*)?(#.*|\s*)?$')
LEADING_INTEGER_PATTERN = re.compile(r'^\s*[+-]?\d+')


class Scheme(Enum):
    """Kind of object a link reference points at"""
    CONTENT = "content"
    LOCATION = "location"
    NONE = "none"


@dataclass
class ParsedReference:
    """A link href split into its parts"""
    href: str                  # Original href
    scheme: Scheme
    id: Optional[int] = None   # None unless scheme is CONTENT or LOCATION
    fragment: str = ""         # Includes the leading "#", or empty
    raw_id: str = ""           # Id as written in the href, used in diagnostics


def _to_int(value: str) -> int:
    """Loose integer cast: leading digits, 0 when there are none."""
    match = LEADING_INTEGER_PATTERN.match(value)
    return int(match.group(0)) if match else 0


def parse_reference(href: str) -> ParsedReference:
    """
    Split a link href into scheme, id and fragment.

    Args:
        href: Raw href, e.g. "ezcontent://57#intro"

    Returns:
        ParsedReference; anything not using an internal scheme gets
        Scheme.NONE and is meant to be used verbatim
    """
    match = REFERENCE_PATTERN.match(href)
    if not match:
        return ParsedReference(href=href, scheme=Scheme.NONE)

    scheme, identifier, fragment = (group or '' for group in match.groups())

    if scheme == CONTENT_SCHEME:
        return ParsedReference(href, Scheme.CONTENT, _to_int(identifier), fragment, identifier)
    if scheme == LOCATION_SCHEME:
        return ParsedReference(href, Scheme.LOCATION, _to_int(identifier), fragment, identifier)
    return ParsedReference(href=href, scheme=Scheme.NONE, fragment=fragment)


def select_links(document: Document) -> Iterator[etree._Element]:
    """
    Yield link elements that need resolving, in document order.

    Generic links are selected when they use an internal scheme, embed
    links are always selected.
    """
    yield from document.xpath(LINK_XPATH, namespaces=NAMESPACES)


class LinkConverter(Converter):
    """
    Converts internal links (ezcontent:// and ezlocation://) to URLs.

    Unresolvable links become "#". Lookup failures are logged as a
    warning (not found) or a notice (not authorized) and never raised.
    URL generation errors are not handled and abort the conversion.
    """

    def __init__(
        self,
        location_service: LocationService,
        content_service: ContentService,
        router: Router,
        siteaccess_service: SiteAccessService,
        config_resolver: ConfigResolver,
        logger: Optional[logging.Logger] = None
    ):
        self.location_service = location_service
        self.content_service = content_service
        self.router = router
        self.siteaccess_service = siteaccess_service
        self.config_resolver = config_resolver
        self.siteaccess_mapping: Optional[Dict[Any, Any]] = config_resolver.get_parameter(
            'mapping', 'rte_siteaccess'
        )
        self.logger = logger or silent_logger()

    def convert(self, document: Document) -> Document:
        document = copy.deepcopy(document)

        for link in select_links(document):
            href = link.get(HREF_ATTRIBUTE, '')
            href_resolved = self.resolve_href(href)

            # Embeds keep the original href, it's needed to build link parameters
            attribute = HREF_ATTRIBUTE
            if etree.QName(link).localname == EMBED_LINK_TAG:
                attribute = RESOLVED_HREF_ATTRIBUTE

            link.set(attribute, href_resolved)

        return document

    def resolve_href(self, href: str) -> str:
        """
        Resolve a single href.

        Returns:
            Absolute URL with the original fragment, "#" when the target
            can't be loaded, or the href itself for non-internal links
        """
        reference = parse_reference(href)

        if reference.scheme is Scheme.CONTENT:
            try:
                content_info = self.content_service.load_content_info(reference.id)
                location = self.location_service.load_location(content_info.main_location_id)
            except NotFoundError:
                self.logger.warning(
                    'While generating links for richtext, could not locate '
                    f'Content object with ID {reference.raw_id}'
                )
                return UNRESOLVED_HREF
            except UnauthorizedError:
                self.logger.log(
                    NOTICE,
                    'While generating links for richtext, unauthorized to load '
                    f'Content object with ID {reference.raw_id}'
                )
                return UNRESOLVED_HREF
            return self.generate_url_alias(location, reference.fragment)

        if reference.scheme is Scheme.LOCATION:
            try:
                location = self.location_service.load_location(reference.id)
            except NotFoundError:
                self.logger.warning(
                    'While generating links for richtext, could not locate '
                    f'Location with ID {reference.raw_id}'
                )
                return UNRESOLVED_HREF
            except UnauthorizedError:
                self.logger.log(
                    NOTICE,
                    'While generating links for richtext, unauthorized to load '
                    f'Location with ID {reference.raw_id}'
                )
                return UNRESOLVED_HREF
            return self.generate_url_alias(location, reference.fragment)

        return href

    def generate_url_alias(self, location: Location, fragment: str) -> str:
        """Absolute URL alias of the location in its target siteaccess, plus fragment."""
        target_siteaccess = self.build_target_siteaccess(location)
        url_alias = self.router.generate(
            URL_ALIAS_ROUTE_NAME,
            {
                'location': location,
                'siteaccess': target_siteaccess,
            }
        )

        return url_alias + fragment

    def build_target_siteaccess(self, location: Location) -> Optional[str]:
        """
        Pick the siteaccess a link to the location should be generated for.

        The first configured root found in the location's path selects a
        language -> siteaccess table. The language is the key under which
        the current siteaccess appears in any configured table (first hit
        wins). Whenever a step comes up empty, or the mapping is malformed,
        the current siteaccess is used.
        """
        current = self.siteaccess_service.get_current()
        current_name = current.name if current is not None else None

        try:
            if not self.siteaccess_mapping:
                return current_name

            # Roots may come from YAML as strings or integers
            path = {str(location_id) for location_id in location.path}
            matched_root_ids = [
                root_id for root_id in self.siteaccess_mapping if str(root_id) in path
            ]
            if not matched_root_ids:
                return current_name

            matched_id = matched_root_ids[0]
            language_siteaccess = self.siteaccess_mapping[matched_id]
            if not (matched_id and language_siteaccess):
                return current_name

            for entry_point in self.siteaccess_mapping.values():
                language_code = next(
                    (code for code, name in entry_point.items() if name == current_name),
                    None
                )
                if language_code:
                    target_siteaccess = language_siteaccess[language_code]
                    if target_siteaccess is not None:
                        return target_siteaccess
                    break

            return current_name
        except Exception as e:
            self.logger.debug(f"Invalid rte_siteaccess mapping, using current siteaccess: {e!r}")
            return current_name
