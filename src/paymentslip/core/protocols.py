"""Protocol interfaces for payment slip collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Code-line encoding
# ---------------------------------------------------------------------------

@runtime_checkable
class ICodeLineEncoder(Protocol):
    """Turns one slip's data into the machine-readable code line."""

    def code_line(self, fill_zeros: bool | None = None) -> str: ...
