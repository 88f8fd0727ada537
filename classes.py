from typing import Optional

from pydantic import BaseModel, Field, StrictInt

# created_at is stored in a BIGINT column
BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


class TabRecord(BaseModel):
    id: str
    title: str
    content: str
    parent_id: Optional[str] = None
    created_at: StrictInt = Field(..., ge=BIGINT_MIN, le=BIGINT_MAX)
