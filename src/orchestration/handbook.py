"""
Handbook Runner - Exercise Orchestration

Runs the handbook exercises on configured inputs and collects one result
row per exercise. Inputs come from HANDBOOK_* environment variables (or a
.env file), falling back to the ExerciseInputs defaults.
"""

from typing import Any, Dict, List, Optional
import logging
import polars as pl

from src.coreutils.env import env_bool, env_get, env_int_list
from src.coreutils.logging import log_function_call
from src.transformation.aggregates import median, mode
from src.transformation.errors import InvalidArgumentError
from src.transformation.loops import bounded_decrement, inclusive_or_exclusive_range
from src.transformation.schemas import ExerciseInputs
from src.transformation.strings import pig_latin_text
from src.transformation.transformers import create_results_frame, get_summary_stats
from src.transformation.validators import validate_results_schema

logger = logging.getLogger(__name__)

EXERCISES = ["median", "mode", "pig_latin", "decrement", "range"]


def load_inputs_from_env() -> ExerciseInputs:
    """Build ExerciseInputs from HANDBOOK_* variables, skipping unset ones"""
    overrides: Dict[str, Any] = {
        "median_values": env_int_list("HANDBOOK_MEDIAN_VALUES"),
        "pig_latin_text": env_get("HANDBOOK_PIG_LATIN_TEXT"),
        "decrement_value": env_get("HANDBOOK_DECREMENT_VALUE"),
        "decrement_count": env_get("HANDBOOK_DECREMENT_COUNT"),
        "range_end": env_get("HANDBOOK_RANGE_END"),
        "range_inclusive": env_bool("HANDBOOK_RANGE_INCLUSIVE"),
    }
    return ExerciseInputs(**{k: v for k, v in overrides.items() if v is not None})


class HandbookRunner:
    """Runs the exercises and collects their results"""

    def __init__(self, inputs: Optional[ExerciseInputs] = None):
        """
        Initialize the runner

        Args:
            inputs: Exercise inputs (read from the environment if not provided)
        """
        self.inputs = inputs if inputs is not None else load_inputs_from_env()

    def _exercise_calls(self) -> Dict[str, tuple]:
        inputs = self.inputs
        return {
            "median": (median, (inputs.median_values,), inputs.median_values),
            "mode": (mode, (inputs.median_values,), inputs.median_values),
            "pig_latin": (
                pig_latin_text,
                (inputs.pig_latin_text,),
                inputs.pig_latin_text,
            ),
            "decrement": (
                bounded_decrement,
                (inputs.decrement_value, inputs.decrement_count),
                {"value": inputs.decrement_value, "n": inputs.decrement_count},
            ),
            "range": (
                lambda end, inclusive: list(inclusive_or_exclusive_range(end, inclusive)),
                (inputs.range_end, inputs.range_inclusive),
                {"end": inputs.range_end, "inclusive": inputs.range_inclusive},
            ),
        }

    def run_exercise(self, name: str) -> Dict[str, Any]:
        """
        Run one exercise and return its result row

        An InvalidArgumentError is recorded as a failed row; anything else
        propagates.
        """
        calls = self._exercise_calls()
        if name not in calls:
            raise ValueError(f"Unknown exercise: {name}")

        func, args, shown_input = calls[name]
        log_function_call(name, args=args)
        row = {
            "exercise": name,
            "input": str(shown_input),
            "output": None,
            "succeeded": False,
            "error": None,
        }

        try:
            row["output"] = str(func(*args))
            row["succeeded"] = True
            logger.info(f"✅ {name}: {shown_input} -> {row['output']}")
        except InvalidArgumentError as e:
            row["error"] = str(e)
            logger.error(f"❌ {name} rejected its input: {e}")
        except Exception as e:
            logger.error(f"❌ {name} failed: {e}")
            raise

        return row

    def run(self, exercises: Optional[List[str]] = None) -> pl.DataFrame:
        """
        Run the selected exercises (all of them by default)

        Returns:
            pl.DataFrame: Results conforming to EXERCISE_RESULTS_SCHEMA
        """
        selected = EXERCISES if exercises is None else exercises
        logger.info(f"🚀 Running {len(selected)} handbook exercises")

        rows = [self.run_exercise(name) for name in selected]
        results_df = create_results_frame(rows)
        validate_results_schema(results_df)

        stats = get_summary_stats(results_df)
        logger.info(
            f"🏁 Finished: {stats['succeeded']} succeeded, {stats['failed']} failed"
        )
        return results_df
