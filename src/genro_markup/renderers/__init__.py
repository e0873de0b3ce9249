# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Renderers for markup nodes - string and structural (DOM) output."""

from .dom import render_dom
from .html import render_html

__all__ = ['render_dom', 'render_html']
