"""Fenced block parsing for post bodies.

A block opens on a line starting with ``#+begin_TYPE`` (or ``#+BEGIN_TYPE``)
and closes on the first later line equal to ``#+end_type`` or
``#+END_TYPE``. Blocks do not nest: an inner end marker of the same type
closes the outer block. A block that never closes is dropped.
"""

from collections.abc import Mapping

from orgsocial.domain.model.block import OrgBlock

_BEGIN_PREFIXES = ("#+begin_", "#+BEGIN_")


def split_lines(content: str) -> list[str]:
    """Split text into lines.

    A trailing newline does not open an extra empty line, and a carriage
    return before each newline is dropped.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_blocks(content: str) -> list[OrgBlock]:
    """Find every well-formed block in ``content``, in line order."""
    lines = split_lines(content)
    blocks: list[OrgBlock] = []
    index = 0
    while index < len(lines):
        block = None
        if lines[index].strip().startswith(_BEGIN_PREFIXES):
            block = _parse_block_at(lines, index)
        if block is None:
            index += 1
            continue
        blocks.append(block)
        index = block.end_line + 1
    return blocks


def _parse_block_at(lines: list[str], start_line: int) -> OrgBlock | None:
    header = lines[start_line].strip()
    block_type, separator, attributes = header[len(_BEGIN_PREFIXES[0]) :].partition(" ")
    block_type = block_type.lower()
    end_markers = (f"#+end_{block_type}", f"#+END_{block_type.upper()}")

    for index in range(start_line + 1, len(lines)):
        if lines[index].strip() in end_markers:
            return OrgBlock(
                block_type=block_type,
                attributes=attributes if separator else None,
                content="\n".join(lines[start_line + 1 : index]),
                start_line=start_line,
                end_line=index,
            )
    return None


def apply_collapse(
    content: str, collapsed_by_start_line: Mapping[int, bool]
) -> tuple[str, list[OrgBlock]]:
    """Render ``content`` with collapsed blocks folded to one summary line.

    Collapse state lives with the caller, keyed by each block's start line,
    because blocks are rebuilt from scratch on every parse.

    Args:
        content: Post body
        collapsed_by_start_line: Collapse flag per block start line

    Returns:
        The folded text and the blocks with their collapse flags applied
    """
    blocks = parse_blocks(content)
    for block in blocks:
        if block.start_line in collapsed_by_start_line:
            block.is_collapsed = collapsed_by_start_line[block.start_line]

    by_start = {block.start_line: block for block in blocks}
    lines = split_lines(content)
    result: list[str] = []
    index = 0
    while index < len(lines):
        block = by_start.get(index)
        if block is None:
            result.append(lines[index])
            index += 1
            continue
        if block.is_collapsed:
            result.append(f"[+] {block.summary()} [...]")
        else:
            result.extend(lines[block.start_line : block.end_line + 1])
        index = block.end_line + 1

    return "\n".join(result), blocks
