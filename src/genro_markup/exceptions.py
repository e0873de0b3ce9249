# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Markup exceptions."""

from __future__ import annotations


class MarkupError(Exception):
    """Base exception for markup errors."""

    pass


class InvalidArgumentError(MarkupError, ValueError):
    """Raised when an element is called with an absent value (None)."""

    pass
