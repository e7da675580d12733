"""Pydantic model for the notes settings file."""

from __future__ import annotations

from pydantic import BaseModel


class Settings(BaseModel):
    notes_dir: str
    author: str | None = None
