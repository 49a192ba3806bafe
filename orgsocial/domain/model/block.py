"""Collapsible org blocks (``#+begin_TYPE ... #+end_TYPE``)."""

from orgsocial.domain.model.common import EntityModel

_TYPE_LABELS = {
    "src": "Code block",
    "quote": "Quote block",
    "example": "Example block",
    "verse": "Verse block",
}


class OrgBlock(EntityModel):
    """A fenced block found in a post body.

    ``start_line`` and ``end_line`` are 0-based indices of the begin and end
    marker lines. ``content`` holds the interior lines verbatim. Blocks are
    rebuilt on every parse; only ``is_collapsed`` is meant to change.
    """

    block_type: str
    attributes: str | None = None
    content: str
    start_line: int
    end_line: int
    is_collapsed: bool = False

    def toggle_collapsed(self) -> None:
        self.is_collapsed = not self.is_collapsed

    def label(self) -> str:
        return _TYPE_LABELS.get(self.block_type.lower(), "Block")

    def summary(self) -> str:
        """One-line description used when the block is collapsed."""
        if self.attributes is not None:
            return f"{self.label()} ({self.attributes})"
        return self.label()


# Elements of a post body that can be toggled open or closed
ActivatableElement = OrgBlock
