"""AI Overview Schema."""

from pydantic import BaseModel


class OverviewResponse(BaseModel):
    overview: str
