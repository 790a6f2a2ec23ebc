"""Description - indentable text tree for match explanations.

A Description is an ordered list of blocks. A block is either a literal
text (possibly spanning several lines) or a nested Description, which is
rendered one indentation level deeper.

Rendering rules:
- Blocks are joined by newlines, in insertion order
- Each nesting level adds INDENT (2 spaces)
- bullet_list() prefixes literal blocks with "* "
- enumerate() prefixes literal blocks with "0. ", "1. ", ...
- Continuation lines of a prefixed block are aligned under its text

Descriptions are immutable: every builder returns a new instance.
"""

from typing import Iterable, Literal

INDENT = "  "

ListStyle = Literal["plain", "bullet", "enumerate"]


class Description:
    """Ordered, indentable text tree."""

    __slots__ = ("_blocks", "_style")

    def __init__(
        self,
        blocks: Iterable["str | Description"] = (),
        style: ListStyle = "plain",
    ):
        self._blocks: tuple[str | Description, ...] = tuple(blocks)
        self._style: ListStyle = style

    @classmethod
    def of(cls, text: "str | Description") -> "Description":
        """Wrap text into a Description (a Description is returned as is)."""
        if isinstance(text, Description):
            return text
        return cls((text,))

    @classmethod
    def collect(cls, items: Iterable["str | Description"]) -> "Description":
        """Build a Description with one block per item."""
        return cls(items)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def text(self, text: str) -> "Description":
        """Append a literal block."""
        return self._replace(blocks=self._blocks + (text,))

    def nested(self, inner: "Description") -> "Description":
        """Append a block rendered one level deeper."""
        return self._replace(blocks=self._blocks + (Description.of(inner),))

    def indent(self) -> "Description":
        """Shift the whole description one level deeper."""
        return Description().nested(self)

    def bullet_list(self) -> "Description":
        return self._replace(style="bullet")

    def enumerate(self) -> "Description":
        return self._replace(style="enumerate")

    def _replace(
        self,
        blocks: tuple["str | Description", ...] | None = None,
        style: ListStyle | None = None,
    ) -> "Description":
        return Description(
            self._blocks if blocks is None else blocks,
            style=self._style if style is None else style,
        )

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def lines(self) -> list[str]:
        """Render to a list of lines without trailing newlines."""
        rendered: list[str] = []
        item_index = 0
        for block in self._blocks:
            if isinstance(block, Description):
                rendered.extend(_prefix_lines(block.lines(), INDENT))
                continue
            rendered.extend(self._decorate(item_index, block.split("\n")))
            item_index += 1
        return rendered

    def _decorate(self, index: int, block_lines: list[str]) -> list[str]:
        if self._style == "plain":
            return block_lines
        marker = "* " if self._style == "bullet" else f"{index}. "
        continuation = " " * len(marker)
        head, *tail = block_lines
        return [marker + head] + _prefix_lines(tail, continuation)

    def is_empty(self) -> bool:
        return not self._blocks

    def is_multiline(self) -> bool:
        return len(self.lines()) > 1

    def __len__(self) -> int:
        return len(self._blocks)

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def __repr__(self) -> str:
        return f"Description({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Description):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


def _prefix_lines(lines: list[str], prefix: str) -> list[str]:
    # Empty lines stay empty so no trailing whitespace is produced
    return [prefix + line if line else line for line in lines]
