"""Markdown node -> UI element rule table and the renderer that walks it"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Union

from mdrender.core.elements import Container, Element, ImageElement, Overlay, TextRun
from mdrender.core.models import DocNode, NodeTypeEnum, RenderOptions
from mdrender.core.state import RenderState
from mdrender.core.styles import pick


logger = logging.getLogger(__name__)

Content = Union[str, list[DocNode], None]
Rendered = Union[str, list[Element], None]
Output = Callable[[Content, RenderState], Rendered]
Rule = Callable[[DocNode, Output, RenderState], Element]

BULLET = "• "
# List items starting with these render inside a single text run; anything
# else may hold block content and gets a container instead.
TEXT_LEADING_TYPES = {NodeTypeEnum.text, NodeTypeEnum.paragraph, NodeTypeEnum.strong}


def make_rules(styles: Mapping[str, Any], opts: RenderOptions) -> dict[NodeTypeEnum, Rule]:
    """Build the rule for every node type, closed over styles and options."""

    def press_handler(target: Optional[str]) -> Callable[[], None]:
        def _press() -> None:
            if opts.on_link:
                opts.on_link(target)
        return _press

    def styled_text(name: str) -> Rule:
        def rule(node, output, state):
            return TextRun(
                key=state.key,
                style=pick(styles, name),
                content=output(node.content, state.enter(within_text=True)),
            )
        return rule

    def pressable_text(name: str, **flags) -> Rule:
        def rule(node, output, state):
            return TextRun(
                key=state.key,
                style=pick(styles, name),
                on_press=press_handler(node.target),
                content=output(node.content, state.enter(**flags)),
            )
        return rule

    def literal_text(name: str, text: str) -> Rule:
        def rule(node, output, state):
            return TextRun(key=state.key, style=pick(styles, name), content=text)
        return rule

    def text(node, output, state):
        names = ("text", "autolink") if state.within_link else ("text",)
        return TextRun(key=state.key, style=pick(styles, *names), content=node.content)

    def paragraph(node, output, state):
        children = node.content if isinstance(node.content, list) else []
        if any(c.type == NodeTypeEnum.image for c in children):
            return Container(
                key=state.key,
                style=pick(styles, "paragraphWithImage"),
                children=output(node.content, state.enter(within_paragraph_with_image=True)) or [],
            )
        name = "paragraph"
        # markdown parsers may pad a bold-only paragraph with a whitespace
        # text node, hence < 3 rather than == 1
        if len(children) < 3 and any(c.type == NodeTypeEnum.strong for c in children):
            name = "paragraphCenter"
        names = (name, "noMargin") if state.within_list else (name,)
        return TextRun(key=state.key, style=pick(styles, *names), content=output(node.content, state))

    def heading(node, output, state):
        return TextRun(
            key=state.key,
            style=pick(styles, "heading", f"heading{node.level}"),
            content=output(node.content, state.enter(within_text=True, within_heading=True)),
        )

    def code_block(node, output, state):
        return TextRun(key=state.key, style=pick(styles, "codeBlock"), content=None)

    def image(node, output, state):
        img = ImageElement(
            key=state.key,
            source={"uri": (node.target or "") + (opts.image_param or "")},
            style=pick(styles, "image"),
        )
        if not opts.enable_lightbox:
            return img
        return Overlay(
            key=state.key,
            active_props=styles.get("imageBox"),
            navigator=opts.navigator,
            on_open=opts.on_image_open,
            on_close=opts.on_image_close,
            child=img,
        )

    def list_(node, output, state):
        rows = []
        for i, item in enumerate(node.items):
            if node.ordered:
                bullet = TextRun(key=0, style=pick(styles, "listItemNumber"), content=f"{i + 1}. ")
            else:
                bullet = TextRun(key=0, style=pick(styles, "listItemBullet"), content=BULLET)

            content = output(item, state.enter(within_list=True)) or []
            if item and item[0].type in TEXT_LEADING_TYPES:
                body = TextRun(key=1, style=pick(styles, "listItemText"), content=content)
            else:
                body = Container(key=1, style=pick(styles, "listItem"), children=content)
            rows.append(Container(key=i, style=pick(styles, "listRow"), children=[bullet, body]))
        return Container(key=state.key, style=pick(styles, "list"), children=rows)

    def table(node, output, state):
        headers = [
            TextRun(key=i, style=pick(styles, "tableHeaderCell"), content=output(cell, state))
            for i, cell in enumerate(node.header)
        ]
        header = Container(key=-1, style=pick(styles, "tableHeader"), children=headers)

        rows = []
        last = len(node.cells) - 1
        for r, row in enumerate(node.cells):
            cells = [
                Container(key=c, style=pick(styles, "tableRowCell"), children=output(cell, state) or [])
                for c, cell in enumerate(row)
            ]
            names = ("tableRow", "tableRowLast") if r == last else ("tableRow",)
            rows.append(Container(key=r, style=pick(styles, *names), children=cells))
        return Container(key=state.key, style=pick(styles, "table"), children=[header, *rows])

    def block_quote(node, output, state):
        quote = TextRun(
            key=state.key,
            style=pick(styles, "blockQuote"),
            content=output(node.content, state.enter(within_quote=True)),
        )
        bg = opts.bg_image.get(NodeTypeEnum.block_quote.value)
        if not bg:
            return quote
        img = ImageElement(key=1, resize_mode="cover", source=bg, style=pick(styles, "bgImage"))
        return Container(key=state.key, style=pick(styles, "bgImageView"), children=[img, quote])

    def hr(node, output, state):
        return Container(key=state.key, style=pick(styles, "hr"))

    return {
        NodeTypeEnum.text:        text,
        NodeTypeEnum.paragraph:   paragraph,
        NodeTypeEnum.heading:     heading,
        NodeTypeEnum.strong:      styled_text("strong"),
        NodeTypeEnum.em:          styled_text("em"),
        NodeTypeEnum.del_:        styled_text("del"),
        NodeTypeEnum.inline_code: styled_text("inlineCode"),
        # u renders like strong so no block element lands inside inline text
        NodeTypeEnum.u:           styled_text("strong"),
        NodeTypeEnum.mailto:      pressable_text("mailto", within_text=True),
        NodeTypeEnum.code_block:  code_block,
        NodeTypeEnum.link:        pressable_text("autolink", within_link=True),
        NodeTypeEnum.autolink:    pressable_text("autolink", within_text=True),
        NodeTypeEnum.url:         pressable_text("autolink", within_text=True),
        NodeTypeEnum.image:       image,
        NodeTypeEnum.list:        list_,
        NodeTypeEnum.table:       table,
        NodeTypeEnum.block_quote: block_quote,
        NodeTypeEnum.hr:          hr,
        NodeTypeEnum.br:          literal_text("br", "\n\n"),
        NodeTypeEnum.newline:     literal_text("newline", "\n"),
    }


class NodeRenderer:
    """Depth-first renderer over a DocNode tree.

    ``output`` is handed to every rule as its recursion hook: it passes raw
    strings through, and renders node lists with each sibling keyed by index.
    """

    def __init__(self, styles: Mapping[str, Any], options: Optional[RenderOptions] = None):
        self.styles = styles
        self.options = options or RenderOptions()
        self.rules = make_rules(styles, self.options)

    def output(self, content: Content, state: RenderState) -> Rendered:
        if content is None or isinstance(content, str):
            return content
        return [self.render_node(node, state.enter(key=i)) for i, node in enumerate(content)]

    def render_node(self, node: DocNode, state: Optional[RenderState] = None) -> Element:
        rule = self.rules[node.type]
        return rule(node, self.output, state or RenderState(key=0))

    def render(self, nodes: Iterable[DocNode]) -> list[Element]:
        """Render top-level document nodes in order."""
        nodes = list(nodes)
        logger.debug("Rendering %d top-level node(s)", len(nodes))
        return self.output(nodes, RenderState())
