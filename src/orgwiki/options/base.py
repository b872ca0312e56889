"""Base classes for renderer options.

This module defines the foundation classes for the options used
throughout the orgwiki export pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from orgwiki.constants import DEFAULT_UNKNOWN_NODE_POLICY, UNKNOWN_NODE_POLICIES, UnknownNodePolicy


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes support for frozen option dataclasses.

    Options are immutable; changing a value means building a new instance.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Fields to replace

        Returns
        -------
        Self
            Updated copy; validation runs again in ``__post_init__``

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    unknown_node_policy : {"raise", "skip"}, default "raise"
        What the exporter does with an object that is not a known node kind:
        raise UnhandledNodeTypeError, or log a warning and render nothing.

    Notes
    -----
    Dialect-specific options subclass this as further frozen fields.

    """

    unknown_node_policy: UnknownNodePolicy = field(
        default=DEFAULT_UNKNOWN_NODE_POLICY,
        metadata={
            "help": "Behaviour for unknown node types: raise an error or skip the node",
            "choices": UNKNOWN_NODE_POLICIES,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If the unknown-node policy is not recognised.

        """
        if self.unknown_node_policy not in UNKNOWN_NODE_POLICIES:
            raise ValueError(
                f"unknown_node_policy must be one of {UNKNOWN_NODE_POLICIES}, got {self.unknown_node_policy!r}"
            )
