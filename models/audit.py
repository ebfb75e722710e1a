from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class AuditEntry:
    action: str              # "park", "release"
    occupant_id: str
    outcome: str             # AllocationStatus value
    category: Optional[str] = None
    floor_index: Optional[int] = None
    spot_indexes: Tuple[int, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)
