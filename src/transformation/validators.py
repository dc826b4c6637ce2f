"""
Data Validators

Pure functions checking the results table before it is reported.
"""

import polars as pl
from .schemas import EXERCISE_RESULTS_SCHEMA
import logging

logger = logging.getLogger(__name__)


def validate_results_schema(df: pl.DataFrame) -> bool:
    """
    Validate results data matches expected schema

    Args:
        df: Results DataFrame

    Returns:
        bool: True if valid, raises exception if invalid
    """
    if df.schema != EXERCISE_RESULTS_SCHEMA:
        raise ValueError(
            f"Schema mismatch: expected {EXERCISE_RESULTS_SCHEMA}, got {df.schema}"
        )

    # Check for null values in required fields
    required_fields = ["exercise", "input", "succeeded"]
    for field in required_fields:
        null_count = df.select(pl.col(field).is_null().sum()).item()
        if null_count > 0:
            raise ValueError(
                f"Null values found in required field '{field}': {null_count}"
            )

    # Failed rows carry an error message and no output
    inconsistent = df.filter(
        (~pl.col("succeeded") & pl.col("error").is_null())
        | (pl.col("succeeded") & pl.col("output").is_null())
    ).height
    if inconsistent > 0:
        raise ValueError(f"Inconsistent success flags in {inconsistent} rows")

    logger.info(f"Results validation passed: {df.height} records")
    return True
