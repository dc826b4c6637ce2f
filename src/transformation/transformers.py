"""
Result Transformers

Pure functions turning exercise result rows into a results table.
"""

import polars as pl
from typing import List, Dict, Any
from .schemas import EXERCISE_RESULTS_SCHEMA
import logging

logger = logging.getLogger(__name__)


def create_results_frame(rows: List[Dict[str, Any]]) -> pl.DataFrame:
    """
    Build the results table from exercise result rows

    Args:
        rows: Dicts with the EXERCISE_RESULTS_SCHEMA columns

    Returns:
        pl.DataFrame: One row per exercise run
    """
    results_df = pl.DataFrame(rows, schema=EXERCISE_RESULTS_SCHEMA)
    logger.info(f"Created {results_df.height} exercise result records")
    return results_df


def get_summary_stats(df: pl.DataFrame) -> Dict[str, Any]:
    """
    Get summary statistics for a results table

    Args:
        df: Results DataFrame

    Returns:
        Dict: Summary statistics
    """
    succeeded = df.filter(pl.col("succeeded")).height
    stats = {
        "total_runs": df.height,
        "succeeded": succeeded,
        "failed": df.height - succeeded,
        "exercises": sorted(df.get_column("exercise").unique().to_list()),
    }
    logger.info(f"Summary stats: {stats}")
    return stats
