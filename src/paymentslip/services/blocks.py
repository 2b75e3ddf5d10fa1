"""Display grouping of long digit strings."""

from __future__ import annotations


def group_into_blocks(text: str, block_size: int = 5, align_from_right: bool = True) -> str:
    """Split ``text`` into space-separated blocks of ``block_size`` characters.

    With ``align_from_right`` the short remainder block comes first, the way
    reference numbers are printed: ``"123456789"`` becomes ``"1234 56789"``.
    Only the presentation changes, the characters and their order do not.
    """
    if block_size < 1:
        raise ValueError(f"block_size must be positive, got {block_size}")

    if align_from_right:
        text = text[::-1]

    blocks = " ".join(text[i:i + block_size] for i in range(0, len(text), block_size))

    if align_from_right:
        blocks = blocks[::-1]

    return blocks.strip()
