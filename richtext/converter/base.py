"""
Rich text converter interface and converter chaining.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Union

from lxml import etree

Document = Union[etree._ElementTree, etree._Element]


class Converter(ABC):
    """Transforms a rich text document, returning a new document."""

    @abstractmethod
    def convert(self, document: Document) -> Document:
        """
        Convert the document.

        Implementations must not modify the input document.
        """


class Aggregate(Converter):
    """
    Applies a list of converters in order.

    Each converter receives the output of the previous one.
    """

    def __init__(self, converters: Optional[Iterable[Converter]] = None):
        self.converters: List[Converter] = list(converters or [])

    def add_converter(self, converter: Converter) -> None:
        self.converters.append(converter)

    def convert(self, document: Document) -> Document:
        for converter in self.converters:
            document = converter.convert(document)
        return document
