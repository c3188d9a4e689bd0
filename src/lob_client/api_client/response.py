"""
Response envelope for Lob API calls.

Holds the raw bytes and status of one HTTP exchange, before decoding.
"""
import json as jsonlib
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class APIResponse:
    """Raw response of a single API call."""
    status_code: int
    body: bytes
    url: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for the single success status, 200."""
        return self.status_code == 200

    def json(self) -> Any:
        """Parse the body as JSON."""
        return jsonlib.loads(self.body)

    @property
    def text(self) -> str:
        """Return the body as text."""
        return self.body.decode('utf-8', errors='replace')
