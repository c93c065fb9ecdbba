"""Offset-annotated HTML fragment parser.

Every element in the returned tree records the exact ``[start, end)`` range it
occupies in the markup string it was parsed from. Those offsets are only valid
for that exact string; after any edit the markup must be parsed again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import Iterator, List, Optional, Tuple

FRAGMENT_ROOT = "#document-fragment"

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose content is text, never markup.
TEXT_ONLY_ELEMENTS = frozenset({"iframe", "noembed", "noframes", "textarea", "title", "xmp"})

Attribute = Tuple[str, Optional[str]]


@dataclass
class ParsedNode:
    tag: str
    attrs: List[Attribute] = field(default_factory=list)
    children: List["ParsedNode"] = field(default_factory=list)
    start: int = 0
    end: int = 0

    def get_attr(self, name: str) -> Optional[str]:
        """Return the first value recorded for ``name`` (``None`` when bare or missing)."""

        for attr_name, value in self.attrs:
            if attr_name == name:
                return value
        return None

    def has_attr(self, name: str) -> bool:
        return any(attr_name == name for attr_name, _ in self.attrs)

    def iter(self) -> Iterator["ParsedNode"]:
        """Walk the subtree in document order, starting with this node."""

        yield self
        for child in self.children:
            yield from child.iter()


class _FragmentBuilder(HTMLParser):
    def __init__(self, markup: str) -> None:
        super().__init__(convert_charrefs=True)
        self._markup = markup
        self._line_starts = [0]
        for index, char in enumerate(markup):
            if char == "\n":
                self._line_starts.append(index + 1)
        self.root = ParsedNode(tag=FRAGMENT_ROOT, start=0, end=len(markup))
        self._open: List[ParsedNode] = [self.root]

    def _offset(self) -> int:
        lineno, column = self.getpos()
        return self._line_starts[lineno - 1] + column

    def _new_node(self, tag: str, attrs: List[Attribute]) -> ParsedNode:
        start = self._offset()
        raw = self.get_starttag_text() or ""
        node = ParsedNode(tag=tag, attrs=list(attrs), start=start, end=start + len(raw))
        self._open[-1].children.append(node)
        return node

    def handle_starttag(self, tag: str, attrs: List[Attribute]) -> None:
        node = self._new_node(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self._open.append(node)
        if tag in TEXT_ONLY_ELEMENTS:
            self.set_cdata_mode(tag)

    def handle_startendtag(self, tag: str, attrs: List[Attribute]) -> None:
        self._new_node(tag, attrs)

    def handle_endtag(self, tag: str) -> None:
        start = self._offset()
        close = self._markup.find(">", start)
        end = close + 1 if close != -1 else len(self._markup)

        for depth in range(len(self._open) - 1, 0, -1):
            if self._open[depth].tag == tag:
                break
        else:
            # stray end tag
            return

        for node in self._open[depth + 1 :]:
            node.end = start
        self._open[depth].end = end
        del self._open[depth:]

    def close(self) -> None:
        super().close()
        for node in self._open[1:]:
            node.end = len(self._markup)
        del self._open[1:]


def parse_fragment(markup: str) -> ParsedNode:
    """Parse ``markup`` into a tree of elements annotated with source offsets."""

    builder = _FragmentBuilder(markup)
    builder.feed(markup)
    builder.close()
    return builder.root


__all__ = ["FRAGMENT_ROOT", "TEXT_ONLY_ELEMENTS", "VOID_ELEMENTS", "ParsedNode", "parse_fragment"]
