from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IdempotencyRecord:
    key: str
    order_id: str
    created_at: datetime
    request_hash: str = "NA"
