"""Rich text converters."""

from .base import Aggregate, Converter
from .link import LinkConverter, ParsedReference, Scheme, parse_reference, select_links

__all__ = [
    "Aggregate",
    "Converter",
    "LinkConverter",
    "ParsedReference",
    "Scheme",
    "parse_reference",
    "select_links",
]
