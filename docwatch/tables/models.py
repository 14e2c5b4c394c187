from dataclasses import dataclass


@dataclass(frozen=True)
class TableRef:
    """Handle to an append-only table inside a folder."""

    id: str
    name: str
