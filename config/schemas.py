# config/schemas.py
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from config.settings import (
    BLOCKED_CHAR,
    DEFAULT_G_WEIGHT,
    DEFAULT_H_WEIGHT,
    DEFAULT_MAX_LOOPS,
    DESTINATION_CHAR,
    OPEN_CHAR,
    PATH_CHAR,
    START_CHAR,
)

# --- Board legend ---

class BoardLegend(BaseModel):
    """Characters used by the text board format."""
    open: str = Field(OPEN_CHAR, description="Traversable cell.")
    blocked: str = Field(BLOCKED_CHAR, description="Impassable cell.")
    start: str = Field(START_CHAR, description="Start cell (traversable).")
    destination: str = Field(DESTINATION_CHAR, description="Destination cell (traversable).")
    path: str = Field(PATH_CHAR, description="Route marker, only used when rendering.")

    @field_validator("open", "blocked", "start", "destination", "path")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1 or value.isspace():
            raise ValueError(f"legend entries must be a single visible character, got {value!r}")
        return value

    @model_validator(mode="after")
    def _distinct_characters(self):
        chars = [self.open, self.blocked, self.start, self.destination, self.path]
        if len(set(chars)) != len(chars):
            raise ValueError(f"legend characters must be distinct, got {chars}")
        return self

# --- Pathfinder configuration ---

class PathFinderConfig(BaseModel):
    """Tunables of a PathFinder, usually loaded from pathfinder.yml."""
    g_weight: float = Field(DEFAULT_G_WEIGHT, gt=0, description="Multiplier applied to step distances (path cost).")
    h_weight: float = Field(DEFAULT_H_WEIGHT, ge=0, description="Multiplier applied to the straight-line estimate.")
    max_loops: Optional[int] = Field(DEFAULT_MAX_LOOPS, ge=0, description="Loop budget per search, None for unbounded.")
    use_priority_queue: bool = Field(False, description="Select the lowest-cost node with a heap instead of a full scan.")
    legend: BoardLegend = Field(default_factory=BoardLegend, description="Board characters.")
