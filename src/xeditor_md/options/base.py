"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
by the serializer, the Markdown parser and the HTML bridge.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the field values as a plain dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def field_aliases(cls) -> dict[str, str]:
        """Return alternative key names accepted by :meth:`from_mapping`.

        Subclasses override this to accept names used by external
        configuration sources.

        """
        return {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], base: Self | None = None) -> Self:
        """Create options from a mapping of field names to values.

        Keys may be field names or any alias from :meth:`field_aliases`.
        Unknown keys are ignored with a warning.

        Parameters
        ----------
        mapping : Mapping[str, Any]
            Option values, e.g. a section of a configuration file
        base : options instance, optional
            Options to start from; defaults are used when omitted

        Returns
        -------
        Self
            New options instance

        Raises
        ------
        ValueError
            If a value is not valid for its field

        """
        known = {f.name for f in fields(cls)}
        aliases = cls.field_aliases()
        updates: dict[str, Any] = {}
        for key, value in mapping.items():
            name = aliases.get(key, key)
            if name in known:
                updates[name] = value
            else:
                logger.warning(f"Ignoring unknown {cls.__name__} option: {key}")

        if base is not None:
            return base.create_updated(**updates)
        return cls(**updates)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert a document tree into an output format.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert source text into a document tree.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """
