"""Block syntax-tree nodes to DocNode conversion"""

import logging
import re

from markdown_it.tree import SyntaxTreeNode

from mdrender.core.extract.inline import inline_to_nodes
from mdrender.core.models import DocNode, NodeTypeEnum


logger = logging.getLogger(__name__)

ALIGN_RE = re.compile(r'text-align:\s*(left|right|center)')


def _inline_of(node: SyntaxTreeNode) -> list[DocNode]:
    """Inline content of a block holding a single `inline` child (heading, paragraph, cell)."""
    return [n for child in node.children for n in inline_to_nodes(child.children)]


def _heading_level(node: SyntaxTreeNode) -> int | None:
    """Extract heading level (1-6) from an h1..h6 tag, else None."""
    if node.tag and node.tag[0] == 'h' and node.tag[1:].isdigit():
        return int(node.tag[1:])
    return None


def _cell_align(cell: SyntaxTreeNode) -> str | None:
    m = ALIGN_RE.search(str(cell.attrs.get('style', '')))
    return m.group(1) if m else None


def _table(node: SyntaxTreeNode) -> DocNode:
    header: list[list[DocNode]] = []
    align: list[str | None] = []
    cells: list[list[list[DocNode]]] = []
    for section in node.children:
        for tr in section.children:
            row = [_inline_of(cell) for cell in tr.children]
            if section.type == 'thead':
                header = row
                align = [_cell_align(cell) for cell in tr.children]
            else:
                cells.append(row)
    return DocNode(type=NodeTypeEnum.table, header=header, cells=cells, align=align)


def _convert(node: SyntaxTreeNode) -> list[DocNode]:
    """Convert one block node; tight-list paragraphs splice into their parent."""
    t = node.type
    if t == 'paragraph':
        content = _inline_of(node)
        if node.hidden:
            return content
        return [DocNode(type=NodeTypeEnum.paragraph, content=content)]
    if t == 'heading':
        return [DocNode(type=NodeTypeEnum.heading, level=_heading_level(node), content=_inline_of(node))]
    if t in ('bullet_list', 'ordered_list'):
        return [DocNode(
            type=NodeTypeEnum.list,
            ordered=t == 'ordered_list',
            items=[blocks_to_nodes(item.children) for item in node.children],
        )]
    if t == 'blockquote':
        return [DocNode(type=NodeTypeEnum.block_quote, content=blocks_to_nodes(node.children))]
    if t in ('fence', 'code_block'):
        return [DocNode(type=NodeTypeEnum.code_block, content=node.content, lang=node.info.strip() or None)]
    if t == 'hr':
        return [DocNode(type=NodeTypeEnum.hr)]
    if t == 'table':
        return [_table(node)]
    if t == 'inline':
        return inline_to_nodes(node.children)
    logger.debug("Dropping unsupported block node %r", t)
    return []


def blocks_to_nodes(children: list[SyntaxTreeNode]) -> list[DocNode]:
    """Convert a sequence of block syntax-tree nodes to DocNodes in document order."""
    return [n for child in children for n in _convert(child)]


def tree_to_nodes(tokens: list) -> list[DocNode]:
    """Build the DocNode forest for a markdown-it token stream."""
    return blocks_to_nodes(SyntaxTreeNode(tokens).children)
