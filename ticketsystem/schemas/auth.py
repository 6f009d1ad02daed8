from pydantic import BaseModel
from typing import Optional


class TokenData(BaseModel):
    identity: Optional[str] = None
