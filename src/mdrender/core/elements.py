"""UI element descriptions produced by the renderer.

Each model stands for one host UI primitive: a text run, an image, a plain
container view, or a lightbox overlay wrapping an image. Callbacks and the
navigator are carried for the host but never serialized.
"""

from typing import Annotated, Any, Callable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _Element(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: Optional[int] = None
    style: list[Any] = []


class TextRun(_Element):
    kind: Literal["text"] = "text"
    content: Union[str, list["Element"], None] = None
    on_press: Optional[Callable[[], Any]] = Field(default=None, exclude=True)

    @computed_field
    @property
    def pressable(self) -> bool:
        return self.on_press is not None

    def press(self) -> None:
        """Simulate the host dispatching a press on this run."""
        if self.on_press is not None:
            self.on_press()


class ImageElement(_Element):
    kind: Literal["image"] = "image"
    source: Any = None
    resize_mode: Optional[str] = None


class Container(_Element):
    kind: Literal["view"] = "view"
    children: list["Element"] = []


class Overlay(_Element):
    kind: Literal["lightbox"] = "lightbox"
    active_props: Any = None
    navigator: Any = Field(default=None, exclude=True)
    on_open: Optional[Callable[[], Any]] = Field(default=None, exclude=True)
    on_close: Optional[Callable[[], Any]] = Field(default=None, exclude=True)
    child: "Element"

    def open(self) -> None:
        if self.on_open is not None:
            self.on_open()

    def close(self) -> None:
        if self.on_close is not None:
            self.on_close()


Element = Annotated[
    Union[TextRun, ImageElement, Container, Overlay],
    Field(discriminator="kind"),
]

for _model in (TextRun, Container, Overlay):
    _model.model_rebuild()


def dump_elements(elements: list[Element]) -> list[dict[str, Any]]:
    """JSON-ready dicts for a rendered element list (callbacks dropped)."""
    return [e.model_dump(mode="json") for e in elements]


def iter_elements(element: Element):
    """Yield element and every descendant, depth first in document order."""
    yield element
    if isinstance(element, TextRun) and isinstance(element.content, list):
        children = element.content
    elif isinstance(element, Container):
        children = element.children
    elif isinstance(element, Overlay):
        children = [element.child]
    else:
        children = []
    for child in children:
        yield from iter_elements(child)
