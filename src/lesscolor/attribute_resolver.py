from __future__ import annotations
import logging
import threading
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Mapping, Optional

from . import hl_groups
from .tokens import Category

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """The category to attribute bindings are missing or were set up twice"""


@dataclass(frozen=True)
class LessHighlightingConfiguration:
    """The attribute ids to bind, one per Category"""

    DEFAULT: str = hl_groups.DEFAULT
    STRING: str = hl_groups.STRING
    COMMENT: str = hl_groups.COMMENT
    AT_KEYWORD: str = hl_groups.AT_KEYWORD
    MEDIA_QUERY_KEYWORD: str = hl_groups.MEDIA_QUERY_KEYWORD


class AttributeResolver:
    """Maps each Category to the attribute id the renderer understands

    The bindings are written exactly once by configure(). After that the table
    is read-only, so resolve() can be called from any thread.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._bindings: Optional[Mapping[Category, str]] = None

    @property
    def configured(self) -> bool:
        return self._bindings is not None

    @property
    def bindings(self) -> Mapping[Category, str]:
        if self._bindings is None:
            raise ConfigurationError("The attribute resolver is not configured")
        return self._bindings

    def configure(self, attributes: LessHighlightingConfiguration):
        """Bind every Category to its attribute id

        Args:
            attributes: The attribute ids to use for each category

        Raises:
            ConfigurationError: If called more than once, or if any category
                would be left without an attribute id
        """
        with self._lock:
            if self._bindings is not None:
                raise ConfigurationError("The attribute resolver is already configured")

            table = {}
            for field in fields(attributes):
                table[Category[field.name]] = getattr(attributes, field.name)

            missing = [cat.name for cat in Category if not table.get(cat)]
            if missing:
                raise ConfigurationError(
                    "No attribute bound for: {}".format(", ".join(missing))
                )

            self._bindings = MappingProxyType(table)
        logger.debug("Configured attribute bindings: %s", dict(table))

    def resolve(self, category: Category) -> str:
        bindings = self._bindings
        if bindings is None:
            raise ConfigurationError("resolve() called before configure()")
        try:
            return bindings[category]
        except KeyError:
            raise ConfigurationError(
                "No attribute bound for category {!r}".format(category)
            ) from None
