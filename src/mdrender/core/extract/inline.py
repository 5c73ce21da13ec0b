"""Inline syntax-tree children to DocNode conversion"""

import logging

from markdown_it.tree import SyntaxTreeNode

from mdrender.core.models import DocNode, NodeTypeEnum


logger = logging.getLogger(__name__)

MAILTO = "mailto:"

WRAPPER_MAP: dict[str, NodeTypeEnum] = {
    'strong': NodeTypeEnum.strong,
    'em':     NodeTypeEnum.em,
    's':      NodeTypeEnum.del_,
}


def _link_type(node: SyntaxTreeNode) -> NodeTypeEnum:
    """Classify a link by how it was written: <...>, bare url, mailto, or [text](href)."""
    href = node.attrs.get('href', '')
    if str(href).startswith(MAILTO):
        return NodeTypeEnum.mailto
    if node.markup == 'autolink':
        return NodeTypeEnum.autolink
    if node.markup == 'linkify':
        return NodeTypeEnum.url
    return NodeTypeEnum.link


def _html_tag(node: SyntaxTreeNode) -> str:
    return node.content.strip().lower() if node.type == 'html_inline' else ''


def _convert(node: SyntaxTreeNode) -> DocNode | None:
    t = node.type
    if t == 'text':
        # emphasis delimiters leave empty text tokens behind
        if not node.content:
            return None
        return DocNode(type=NodeTypeEnum.text, content=node.content)
    if t == 'softbreak':
        return DocNode(type=NodeTypeEnum.newline)
    if t == 'hardbreak':
        return DocNode(type=NodeTypeEnum.br)
    if t == 'code_inline':
        return DocNode(type=NodeTypeEnum.inline_code, content=node.content)
    if t in WRAPPER_MAP:
        return DocNode(type=WRAPPER_MAP[t], content=inline_to_nodes(node.children))
    if t == 'link':
        return DocNode(
            type=_link_type(node),
            target=node.attrs.get('href'),
            title=node.attrs.get('title'),
            content=inline_to_nodes(node.children),
        )
    if t == 'image':
        return DocNode(
            type=NodeTypeEnum.image,
            target=node.attrs.get('src'),
            title=node.attrs.get('title'),
            alt=node.content,
        )
    logger.debug("Dropping unsupported inline node %r", t)
    return None


def inline_to_nodes(children: list[SyntaxTreeNode]) -> list[DocNode]:
    """Convert inline syntax-tree nodes, folding <u>...</u> html pairs into u nodes."""
    nodes: list[DocNode] = []
    i = 0
    while i < len(children):
        child = children[i]
        if _html_tag(child) == '<u>':
            depth, j = 1, i + 1
            while j < len(children):
                tag = _html_tag(children[j])
                depth += (tag == '<u>') - (tag == '</u>')
                if depth == 0:
                    break
                j += 1
            if depth == 0:
                nodes.append(DocNode(type=NodeTypeEnum.u, content=inline_to_nodes(children[i + 1:j])))
                i = j + 1
                continue
        converted = _convert(child)
        if converted is not None:
            nodes.append(converted)
        i += 1
    return nodes
