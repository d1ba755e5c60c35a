# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, compare, extremes, parse, sort, validate

__all__ = ["check", "compare", "extremes", "parse", "sort", "validate"]
