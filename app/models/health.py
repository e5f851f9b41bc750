# app/models/health.py

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
