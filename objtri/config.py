# objtri/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_GENERATOR = "objtri"


@dataclass(frozen=True)
class WriterOptions:
    """Settings for write_obj / format_obj."""
    # replace an existing destination instead of raising DestinationExistsError
    overwrite: bool = False
    # None writes the shortest string that reads back to the same float;
    # an int writes that many fixed decimals (lossy)
    precision: Optional[int] = None
    # emit the '#' comment block with object name and counts
    header: bool = True
    # defaults to the destination path
    object_name: Optional[str] = None
    generator: str = DEFAULT_GENERATOR

    def __post_init__(self):
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be >= 0 (got {self.precision})")
