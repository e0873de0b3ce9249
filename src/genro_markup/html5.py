# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlMarkup - Markup registry preloaded with the HTML5 elements.

Example:
    Building a page::

        from genro_markup import HtmlMarkup

        h = HtmlMarkup()
        page = h.html(
            h.head(h.meta(charset='utf-8'), h.title('Welcome')),
            h.body(
                h.div(id='main', class_='container')(
                    h.h1('Welcome'),
                    h.p('Hello, World!'),
                    h.ul([h.li('Item 1'), h.li('Item 2')]),
                )
            ),
        )
        page.html()

References:
    - WHATWG HTML Standard: https://html.spec.whatwg.org/
"""

from __future__ import annotations

from .registry import Markup

#: Void elements: self-closing, no content.
VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'source', 'track', 'wbr',
})

#: All HTML5 element names, in a stable order.
ALL_TAGS = (
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio', 'b',
    'base', 'bdi', 'bdo', 'blockquote', 'body', 'br', 'button', 'canvas',
    'caption', 'cite', 'code', 'col', 'colgroup', 'data', 'datalist', 'dd',
    'del', 'details', 'dfn', 'dialog', 'div', 'dl', 'dt', 'em', 'embed',
    'fieldset', 'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3',
    'h4', 'h5', 'h6', 'head', 'header', 'hgroup', 'hr', 'html', 'i',
    'iframe', 'img', 'input', 'ins', 'kbd', 'label', 'legend', 'li', 'link',
    'main', 'map', 'mark', 'menu', 'meta', 'meter', 'nav', 'noscript',
    'object', 'ol', 'optgroup', 'option', 'output', 'p', 'picture', 'pre',
    'progress', 'q', 'rp', 'rt', 'ruby', 's', 'samp', 'script', 'search',
    'section', 'select', 'slot', 'small', 'source', 'span', 'strong',
    'style', 'sub', 'summary', 'sup', 'table', 'tbody', 'td', 'template',
    'textarea', 'tfoot', 'th', 'thead', 'time', 'title', 'tr', 'track', 'u',
    'ul', 'var', 'video', 'wbr',
)


class HtmlMarkup(Markup):
    """Markup registry for HTML5.

    Every HTML5 element is registered; void elements (meta, br, img, etc.)
    are self-closing. Extra tag specs are registered after the HTML5 set and
    can override it, e.g. ``HtmlMarkup('my-widget', 'p/')``.

    Usage:
        >>> h = HtmlMarkup()
        >>> h.p('Hello', h.br).html()
        '<p>Hello<br/></p>'
    """

    def __init__(self, *specs: str) -> None:
        super().__init__(
            *(f'{tag}/' if tag in VOID_ELEMENTS else tag for tag in ALL_TAGS)
        )
        self.tags(*specs)
