from typing import Optional

from pydantic import BaseModel


class Principal(BaseModel):
    id: str
    email: Optional[str] = None
