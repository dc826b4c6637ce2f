"""
Test Handbook Runner - exercises run on configured inputs and collected
into a results table
"""

import os
import sys
from unittest.mock import patch

import polars as pl
import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.orchestration.handbook import (
    EXERCISES,
    HandbookRunner,
    load_inputs_from_env,
)
from src.transformation.schemas import EXERCISE_RESULTS_SCHEMA, ExerciseInputs
from src.transformation.transformers import create_results_frame, get_summary_stats
from src.transformation.validators import validate_results_schema


def _clean_env(**overrides):
    """Environment without HANDBOOK_* variables, plus the given overrides"""
    env = {k: v for k, v in os.environ.items() if not k.startswith("HANDBOOK_")}
    env.update(overrides)
    return patch.dict(os.environ, env, clear=True)


def test_default_run_outputs():
    results = HandbookRunner(ExerciseInputs()).run()

    assert results.schema == EXERCISE_RESULTS_SCHEMA
    assert results.get_column("exercise").to_list() == EXERCISES
    assert results.get_column("succeeded").all()

    outputs = dict(
        zip(results.get_column("exercise"), results.get_column("output"))
    )
    assert outputs["median"] == "1"
    assert outputs["mode"] == "-5"
    assert outputs["pig_latin"] == "irst-fay"
    assert outputs["decrement"] == "7"
    assert outputs["range"] == str(list(range(11)))


def test_selected_exercises_only():
    results = HandbookRunner(ExerciseInputs()).run(["pig_latin"])
    assert results.height == 1
    assert results.row(0, named=True)["output"] == "irst-fay"


def test_explicit_empty_selection_runs_nothing():
    results = HandbookRunner(ExerciseInputs()).run([])
    assert results.height == 0
    assert results.schema == EXERCISE_RESULTS_SCHEMA


def test_empty_median_input_records_failed_row():
    runner = HandbookRunner(ExerciseInputs(median_values=[]))
    results = runner.run(["median", "mode", "decrement"])

    assert results.height == 3
    failed = results.filter(~pl.col("succeeded"))
    assert failed.get_column("exercise").to_list() == ["median", "mode"]
    assert failed.get_column("output").null_count() == 2
    assert all("empty" in message for message in failed.get_column("error"))

    decrement = results.filter(pl.col("exercise") == "decrement")
    assert decrement.row(0, named=True)["succeeded"] is True


def test_unknown_exercise_raises():
    with pytest.raises(ValueError):
        HandbookRunner(ExerciseInputs()).run_exercise("fizzbuzz")


def test_inputs_reject_negative_counts():
    with pytest.raises(ValidationError):
        ExerciseInputs(decrement_count=-1)
    with pytest.raises(ValidationError):
        ExerciseInputs(range_end=-3)


def test_load_inputs_defaults_when_unset():
    with _clean_env():
        inputs = load_inputs_from_env()
    assert inputs == ExerciseInputs()


def test_load_inputs_from_env_overrides():
    with _clean_env(
        HANDBOOK_MEDIAN_VALUES="1, 2,3,4",
        HANDBOOK_PIG_LATIN_TEXT=" first apple ",
        HANDBOOK_DECREMENT_VALUE="5",
        HANDBOOK_DECREMENT_COUNT="0",
        HANDBOOK_RANGE_END="0",
        HANDBOOK_RANGE_INCLUSIVE="false",
    ):
        inputs = load_inputs_from_env()

    assert inputs.median_values == [1, 2, 3, 4]
    assert inputs.pig_latin_text == "first apple"
    assert inputs.decrement_value == 5
    assert inputs.decrement_count == 0
    assert inputs.range_end == 0
    assert inputs.range_inclusive is False

    results = HandbookRunner(inputs).run()
    outputs = dict(
        zip(results.get_column("exercise"), results.get_column("output"))
    )
    assert outputs["median"] == "3"
    assert outputs["pig_latin"] == "irst-fay apple-hay"
    assert outputs["decrement"] == "5"
    assert outputs["range"] == "[]"


def test_load_inputs_rejects_bad_boolean():
    with _clean_env(HANDBOOK_RANGE_INCLUSIVE="maybe"):
        with pytest.raises(ValueError):
            load_inputs_from_env()


def test_summary_stats():
    results = HandbookRunner(ExerciseInputs(median_values=[])).run()
    stats = get_summary_stats(results)
    assert stats["total_runs"] == len(EXERCISES)
    assert stats["succeeded"] == len(EXERCISES) - 2
    assert stats["failed"] == 2
    assert stats["exercises"] == sorted(EXERCISES)


def test_validate_results_schema_rejects_inconsistent_rows():
    results = create_results_frame(
        [
            {
                "exercise": "median",
                "input": "[]",
                "output": None,
                "succeeded": False,
                "error": None,
            }
        ]
    )
    with pytest.raises(ValueError):
        validate_results_schema(results)


def test_validate_results_schema_rejects_wrong_schema():
    with pytest.raises(ValueError):
        validate_results_schema(pl.DataFrame({"exercise": ["median"]}))
