"""Render-pass context flags"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RenderState:
    """Where the node being rendered sits in the tree.

    Immutable: a rule derives a new state for its children with ``enter``,
    so a flag set for one subtree is never seen by siblings or the parent.
    """
    key:                         int | None = None
    within_text:                 bool = False
    within_link:                 bool = False
    within_list:                 bool = False
    within_quote:                bool = False
    within_heading:              bool = False
    within_paragraph_with_image: bool = False

    def enter(self, **flags) -> "RenderState":
        return replace(self, **flags)
