from pydantic import BaseModel
from typing import Optional


class UserToken(BaseModel):
    user_id: str
    workspace_id: Optional[str] = None
    role: Optional[str] = None
    exp: Optional[int] = None
