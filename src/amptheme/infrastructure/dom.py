"""lxml helpers for parsing, querying and serializing theme documents.

Bound attributes travel through the tree as ``data-amp-bind-<name>``:
:func:`parse_document` converts incoming ``[name]=`` attributes and
:func:`serialize_document` / :func:`fragment_to_html` restore them. Only
start tags are rewritten; text content is left as written.
"""

from __future__ import annotations

import logging
import re

from lxml import etree, html

from amptheme.domain.bindings import BIND_ATTRIBUTE_PREFIX

logger = logging.getLogger(__name__)

_START_TAG_RE = re.compile(r"""<[A-Za-z](?:[^>"']|"[^"]*"|'[^']*')*>""")
_BRACKET_ATTR_RE = re.compile(r"(\s)\[([A-Za-z0-9_.\-]+)\](?=\s*=)")
_PLACEHOLDER_ATTR_RE = re.compile(
    rf"(\s){re.escape(BIND_ATTRIBUTE_PREFIX)}([A-Za-z0-9_.\-]+)(?==)"
)
_DOCTYPE_RE = re.compile(r"\A\s*(<!doctype\b[^>]*>)", re.IGNORECASE)


def _rewrite_start_tags(markup: str, pattern: re.Pattern[str], replacement: str) -> str:
    return _START_TAG_RE.sub(lambda tag: pattern.sub(replacement, tag.group(0)), markup)


def convert_bind_attributes(markup: str) -> str:
    """Rewrite ``[attr]=`` into the tree-safe placeholder form."""
    return _rewrite_start_tags(markup, _BRACKET_ATTR_RE, rf"\1{BIND_ATTRIBUTE_PREFIX}\2")


def restore_bind_attributes(markup: str) -> str:
    """Rewrite placeholder attributes back into ``[attr]=``."""
    return _rewrite_start_tags(markup, _PLACEHOLDER_ATTR_RE, r"\1[\2]")


def source_doctype(markup: str) -> str | None:
    """The doctype declaration *markup* starts with, or None.

    Examples:
        >>> source_doctype("<!DOCTYPE html>\\n<html></html>")
        '<!DOCTYPE html>'
        >>> source_doctype("<html></html>") is None
        True
    """
    match = _DOCTYPE_RE.match(markup)
    return match.group(1) if match else None


def parse_document(markup: str) -> html.HtmlElement:
    """Parse a full HTML document and return its root element.

    Raises:
        lxml.etree.ParserError: If *markup* is empty (XMLSyntaxError on some
            libxml2 versions).
    """
    return html.document_fromstring(convert_bind_attributes(markup))


def serialize_document(root: html.HtmlElement, doctype: str | None = None) -> str:
    """Serialize the whole tree, preceded by *doctype* when given.

    libxml2 reports a default doctype for documents that never declared
    one, so the caller passes the declaration found by :func:`source_doctype`.
    """
    markup = html.tostring(root, encoding="unicode", doctype=doctype)
    return restore_bind_attributes(markup)


def fragment_to_html(element: html.HtmlElement) -> str:
    """Serialize a single element without its tail text."""
    return restore_bind_attributes(html.tostring(element, encoding="unicode", with_tail=False))


def find_body(root: html.HtmlElement) -> html.HtmlElement | None:
    """First ``<body>`` in document order, or None."""
    return next(root.iter("body"), None)


def find_head(root: html.HtmlElement) -> html.HtmlElement:
    """Return ``<head>``, creating it as the first child of the root if absent."""
    head = next(root.iter("head"), None)
    if head is None:
        head = html.Element("head")
        root.insert(0, head)
    return head


def get_element_by_id(root: html.HtmlElement, element_id: str) -> html.HtmlElement | None:
    return root.get_element_by_id(element_id, None)


def query_first(root: html.HtmlElement, query: str) -> html.HtmlElement | None:
    """First element matched by the XPath *query*, or None.

    A malformed expression counts as no match.
    """
    try:
        matches = root.xpath(query)
    except etree.XPathError:
        logger.warning("Invalid XPath query %r", query, exc_info=True)
        return None
    for match in matches:
        if isinstance(match, etree._Element):
            return match
    return None


def class_tokens(element: html.HtmlElement) -> list[str]:
    return (element.get("class") or "").split()


def replace_class_token(class_value: str, old: str, new: str) -> str:
    """Replace whole-token occurrences of *old* with *new*.

    Examples:
        >>> replace_class_token("no-svg foo", "no-svg", "svg")
        'svg foo'
        >>> replace_class_token("foo no-svgx", "no-svg", "svg")
        'foo no-svgx'
    """
    pattern = rf"(^|\s){re.escape(old)}(?=\s|$)"
    return re.sub(pattern, lambda m: f"{m.group(1)}{new}", class_value)


def append_markup(parent: html.HtmlElement, markup: str) -> None:
    """Parse *markup* as fragments and append them to *parent*."""
    for fragment in html.fragments_fromstring(convert_bind_attributes(markup)):
        if isinstance(fragment, str):
            _append_text(parent, fragment)
        else:
            parent.append(fragment)


def replace_with_markup(element: html.HtmlElement, markup: str) -> None:
    """Replace *element* in its parent with the fragments parsed from *markup*.

    The element's tail text is kept after the last inserted fragment.
    """
    parent = element.getparent()
    if parent is None:
        return
    tail = element.tail
    index = parent.index(element)
    fragments = html.fragments_fromstring(convert_bind_attributes(markup))
    previous = element.getprevious()
    parent.remove(element)
    last: html.HtmlElement | None = previous
    for fragment in fragments:
        if isinstance(fragment, str):
            if last is None:
                parent.text = (parent.text or "") + fragment
            else:
                last.tail = (last.tail or "") + fragment
            continue
        parent.insert(index, fragment)
        index += 1
        last = fragment
    if tail:
        if last is None:
            parent.text = (parent.text or "") + tail
        else:
            last.tail = (last.tail or "") + tail


def _append_text(parent: html.HtmlElement, text: str) -> None:
    children = list(parent)
    if children:
        children[-1].tail = (children[-1].tail or "") + text
    else:
        parent.text = (parent.text or "") + text
