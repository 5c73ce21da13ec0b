"""Document node tree and render option models"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeTypeEnum(str, Enum):
    """Closed set of markdown node types the renderer knows how to draw"""
    text = "text"
    paragraph = "paragraph"
    heading = "heading"
    strong = "strong"
    em = "em"
    del_ = "del"
    u = "u"
    link = "link"
    autolink = "autolink"
    mailto = "mailto"
    url = "url"
    image = "image"
    list = "list"
    table = "table"
    block_quote = "blockQuote"
    code_block = "codeBlock"
    inline_code = "inlineCode"
    hr = "hr"
    br = "br"
    newline = "newline"


class DocNode(BaseModel):
    """One node of the parsed markdown tree."""
    type: NodeTypeEnum
    content: Union[str, list["DocNode"], None] = None
    level: Optional[int] = Field(default=None, ge=1, le=6)   # headings only
    target: Optional[str] = None                            # links and images
    title: Optional[str] = None
    alt: Optional[str] = None
    lang: Optional[str] = None                              # code blocks
    ordered: bool = False
    items: list[list["DocNode"]] = []
    header: list[list["DocNode"]] = []                      # one node list per header cell
    cells: list[list[list["DocNode"]]] = []                 # rows -> cells -> nodes
    align: list[Optional[str]] = []


class RenderOptions(BaseModel):
    """Caller-supplied rendering switches and callbacks.

    Accepts both the snake_case field names and the camelCase keys used by
    mobile hosts (enableLightBox, onLink, imageParam, ...).
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    enable_lightbox: bool = Field(default=False, alias="enableLightBox")
    navigator: Any = None
    on_link: Optional[Callable[[str], Any]] = Field(default=None, alias="onLink")
    on_image_open: Optional[Callable[[], Any]] = Field(default=None, alias="onImageOpen")
    on_image_close: Optional[Callable[[], Any]] = Field(default=None, alias="onImageClose")
    image_param: str = Field(default="", alias="imageParam")
    bg_image: dict[str, Any] = Field(default_factory=dict, alias="bgImage")


@dataclass
class ParsedDoc:
    """Parse result for a single source file; not persisted."""
    path:         Path
    slug:         str
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body only (frontmatter stripped)
    hash:         str
    frontmatter:  dict[str, Any]
    nodes:        list[DocNode]
