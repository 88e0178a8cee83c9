"""Slot model definitions."""

from datetime import datetime

from pydantic import BaseModel


class Slot(BaseModel):
    """One candidate one-hour booking inside an availability window."""

    start: datetime
    time: str
    reserved: bool = False


class WindowSlots(BaseModel):
    """The bookable slots of a single availability window."""

    summary: str
    start: str
    end: str
    times: list[Slot]
