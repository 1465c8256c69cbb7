"""Generic parsed-XML tree node and lookup helpers.

Lookups compare local names only, so ``a:srgbClr`` and ``srgbClr`` match the
same query.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Namespace URI → conventional prefix
NAMESPACE_PREFIXES: dict[str, str] = {
    "http://schemas.openxmlformats.org/drawingml/2006/main": "a",
    "http://schemas.openxmlformats.org/presentationml/2006/main": "p",
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships": "r",
}


def local_name(name: str) -> str:
    return name.rsplit(":", 1)[-1]


class TreeNode(BaseModel):
    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[TreeNode] = Field(default_factory=list)

    @property
    def local_name(self) -> str:
        return local_name(self.name)

    def iter(self) -> Iterator[TreeNode]:
        """Depth-first, self included."""
        yield self
        for child in self.children:
            yield from child.iter()


def find_node(node: TreeNode | None, name: str) -> TreeNode | None:
    """First descendant (depth-first, self excluded) with the given local name."""
    if node is None:
        return None
    target = local_name(name)
    for child in node.children:
        for found in child.iter():
            if found.local_name == target:
                return found
    return None


def find_nodes(node: TreeNode | None, name: str) -> list[TreeNode]:
    if node is None:
        return []
    target = local_name(name)
    return [n for child in node.children for n in child.iter() if n.local_name == target]


def find_child(node: TreeNode | None, name: str) -> TreeNode | None:
    """First direct child with the given local name."""
    if node is None:
        return None
    target = local_name(name)
    return next((c for c in node.children if c.local_name == target), None)


def get_attribute(node: TreeNode | None, name: str, default: str | None = None) -> str | None:
    if node is None:
        return default
    return node.attributes.get(name, default)


def _qualify(tag: str) -> str:
    if tag.startswith("{"):
        uri, _, rest = tag[1:].partition("}")
        prefix = NAMESPACE_PREFIXES.get(uri)
        return f"{prefix}:{rest}" if prefix else rest
    return tag


def _convert(element: ET.Element) -> TreeNode:
    return TreeNode(
        name=_qualify(element.tag),
        attributes={_qualify(k): v for k, v in element.attrib.items()},
        children=[_convert(child) for child in element],
    )


def parse_xml(text: str | bytes) -> TreeNode:
    """Parse serialized XML into a TreeNode tree.

    Raises:
        xml.etree.ElementTree.ParseError: malformed input.
    """
    root = ET.fromstring(text)
    node = _convert(root)
    logger.debug("Parsed XML root %s", node.name)
    return node
