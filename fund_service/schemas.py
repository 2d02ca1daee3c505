"""Pydantic schemas for service responses."""
from typing import Dict

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    database: str


class InfoResponse(BaseModel):
    name: str
    version: str
    endpoints: Dict[str, str]
