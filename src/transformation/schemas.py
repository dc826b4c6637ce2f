"""
Transformation Layer Schemas

Inputs fed to the exercises and the shape of their collected results.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator
import polars as pl


class ExerciseInputs(BaseModel):
    """Inputs the handbook runner feeds to each exercise"""

    median_values: List[int] = Field(
        default_factory=lambda: [-5, 1, -4, 2, 5],
        description="Integers for the median and mode exercises",
    )
    pig_latin_text: str = Field("first", description="Phrase to convert")
    decrement_value: int = Field(10, description="Start value of the decrement")
    decrement_count: int = Field(3, ge=0, description="How many times to decrement")
    range_end: int = Field(10, ge=0, description="Upper bound of the range")
    range_inclusive: bool = Field(True, description="Include range_end itself")

    @field_validator("pig_latin_text")
    @classmethod
    def validate_pig_latin_text(cls, v):
        """Collapse surrounding whitespace"""
        return v.strip()


# =============================================================================
# Polars Schema for collected results
# =============================================================================

EXERCISE_RESULTS_SCHEMA = pl.Schema(
    [
        ("exercise", pl.String()),
        ("input", pl.String()),
        ("output", pl.String()),
        ("succeeded", pl.Boolean()),
        ("error", pl.String()),
    ]
)
