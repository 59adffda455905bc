#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/xeditor_md/utils/__init__.py
"""Shared helpers for escaping, output writing and input validation."""
