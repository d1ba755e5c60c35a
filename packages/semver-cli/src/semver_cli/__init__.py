# SPDX-License-Identifier: MIT
"""Command line interface for semantic version parsing, sorting and range checks."""

__version__ = "0.1.0"
