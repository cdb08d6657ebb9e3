import html
from typing import List

from bs4 import BeautifulSoup
from bs4.element import Comment, Doctype, NavigableString, Tag

# Paragraph markup understood by reportlab, keyed by the HTML tag that maps to it
REPORTLAB_TAGS = {
    "b": "b", "strong": "b",
    "i": "i", "em": "i",
    "u": "u",
}

# Elements that start on a line of their own
BLOCK_TAGS = {
    "p", "div", "li", "ul", "ol", "blockquote", "pre", "tr", "table",
    "h1", "h2", "h3", "h4", "h5", "h6",
}

SKIPPED_TAGS = {"script", "style"}


def _end_line(out: List[str], line_break: str) -> None:
    last = next((piece for piece in reversed(out) if piece), "")
    if last and not last.endswith(line_break):
        out.append(line_break)


def _render(node: Tag, out: List[str], line_break: str, markup: bool) -> None:
    for child in node.children:
        if isinstance(child, (Comment, Doctype)):
            continue
        if isinstance(child, NavigableString):
            text = str(child)
            out.append(html.escape(text, quote=False) if markup else text)
            continue
        if not isinstance(child, Tag):
            continue

        name = child.name.lower()
        if name in SKIPPED_TAGS:
            continue
        if name == "br":
            out.append(line_break)
            continue

        block = name in BLOCK_TAGS
        if block:
            _end_line(out, line_break)

        mapped = REPORTLAB_TAGS.get(name) if markup else None
        if mapped:
            out.append(f"<{mapped}>")
        _render(child, out, line_break, markup)
        if mapped:
            out.append(f"</{mapped}>")

        if block:
            _end_line(out, line_break)


def _convert(content: str, line_break: str, markup: bool) -> str:
    soup = BeautifulSoup(content, "html.parser")
    out: List[str] = []
    _render(soup, out, line_break, markup)
    # a block closing the fragment leaves a dangling break
    while out and out[-1] == line_break:
        out.pop()
    return "".join(out)


def to_plain_text(content: str) -> str:
    """Drop markup; br and block elements become newlines"""
    return _convert(content, "\n", markup=False)


def to_reportlab_markup(content: str) -> str:
    """Rewrite editor HTML into the inline tag subset reportlab's Paragraph parses"""
    return _convert(content, "<br/>", markup=True)
