# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Page - Example of a small HTML page built with HtmlMarkup.

A didactic example showing callable elements, chained calls,
fragments and both renderers.
"""

from __future__ import annotations

import html

from genro_markup import HtmlMarkup


def news_list(h: HtmlMarkup, items: list[tuple[str, str]]):
    """Return a fragment with one article per (title, text) item.

    Text is escaped here: the renderers insert values verbatim.
    """
    frag = h.fragment
    for title, text in items:
        frag(h.article({'class': 'news'},
                       h.h2(html.escape(title)),
                       h.p(html.escape(text))))
    return frag


def build_page(items: list[tuple[str, str]]):
    """Build the whole page."""
    h = HtmlMarkup()
    return h.html(
        h.head(h.meta(charset='utf-8'), h.title('News')),
        h.body(
            h.header('Latest news'),
            h.main(id='main')(news_list(h, items)),
            h.footer('Built with ', h.code('genro_markup'), h.br, '2025'),
        ),
    )


if __name__ == '__main__':
    page = build_page([
        ('First', 'Fish & chips'),
        ('Second', 'Use <br> for line breaks'),
    ])
    print(page.html())
    print(page.dom().toprettyxml(indent='  '))
