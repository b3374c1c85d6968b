from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ContactCategory


@dataclass(frozen=True)
class SupportContact:
    contact_id: int
    category: ContactCategory
    submitter: str
    message: str
    created_at: Optional[datetime] = None
