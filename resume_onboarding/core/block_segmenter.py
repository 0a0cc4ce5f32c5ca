from typing import List, Sequence

from .data_models import Block
from .dates import looks_like_date_line


def split_into_blocks(section_lines: Sequence[str]) -> List[Block]:
    """Partition a region's lines into blocks, one per logical record.

    A blank line closes the current block. A date-looking line also closes it and opens
    the next one, since entries usually start with an employer or institution line that
    carries the date range.
    """
    blocks: List[Block] = []
    buf: List[str] = []

    def flush():
        if buf and " ".join(buf).strip():
            blocks.append(Block(lines=list(buf)))
        buf.clear()

    for line in section_lines:
        if not line.strip():
            flush()
            continue
        if looks_like_date_line(line) and buf:
            flush()
        buf.append(line)
    flush()
    return blocks
