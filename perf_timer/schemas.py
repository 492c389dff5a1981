"""
Pydantic schemas for timer snapshots.

The serialized form is the compatibility contract for anything that
consumes timer output:

    {
        "measures": [{"name": str, "duration": float}, ...],
        "children": {name: <same shape>, ...}   # only when children exist
    }
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class Measure(BaseModel):
    """A completed, named duration in milliseconds."""
    name: str
    duration: float

    class Config:
        frozen = True


class NestedMeasures(BaseModel):
    """Snapshot of a timer and, recursively, its children."""
    measures: List[Measure] = Field(default_factory=list)
    # None means "no children"; it is dropped from the serialized form
    children: Optional[Dict[str, "NestedMeasures"]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping with the ``children`` key omitted when absent."""
        return self.model_dump(exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """JSON string of :meth:`to_dict`."""
        return self.model_dump_json(exclude_none=True, indent=indent)
