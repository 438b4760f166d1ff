# -*- coding: utf-8 -*-
"""Exception types raised by nestedgrid."""


class NestedGridError(Exception):
    """Base class for all nestedgrid errors."""


class InvalidArgumentError(NestedGridError, ValueError):
    """Raised when inputs fail validation before any computation starts.

    Covers empty point sets, non-positive ``min_count`` values, malformed
    coordinate arrays and similar caller mistakes.
    """


class LayerNotFoundError(NestedGridError, ValueError):
    """Raised when a layer or attached function lookup fails."""
