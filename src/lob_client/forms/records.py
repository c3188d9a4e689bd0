"""Base model for typed request records.

A record's fields carry their wire name as a pydantic alias and their semantic
type as the annotation. See encoder.FieldKind for the supported annotations.
"""

from typing import NewType
from pydantic import BaseModel, ConfigDict

# 64-bit integer fields (amounts in cents, ids) are annotated with Int64 so the
# encoder can tell them apart from plain int fields.
Int64 = NewType('Int64', int)


class LobRecord(BaseModel):
    """Base class for request records submitted to the Lob API."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)
