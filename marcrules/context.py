"""Per-record context handed to rules by the host pipeline."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Context:
    """Mutable state for one record as it moves through a set of rules.

    Rules receive the context but the rules in this package never read
    or write it; it exists so a host can share per-record state between
    its own rules.
    """

    position: Optional[int] = None
    source_record_id: Optional[str] = None
    output_hash: Dict[str, list] = field(default_factory=dict)
    clipboard: Dict[str, Any] = field(default_factory=dict)
