from __future__ import annotations

from pydantic import BaseModel


class DemoMessage(BaseModel):
    msg: str = "hello world"
