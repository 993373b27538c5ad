"""
Unit tests for the domain models.
"""
import pytest
from pydantic import ValidationError

from domain.models import Exercise, ExerciseSet, Metric, User, Workout


@pytest.mark.unit
class TestWorkout:
    def test_defaults(self):
        workout = Workout(user_id=1, start_time=1700000000)
        assert workout.id is None
        assert workout.exercises == []
        assert workout.version == 1

    def test_find_exercise(self):
        squat = Exercise(id=5, name="Squat")
        workout = Workout(user_id=1, exercises=[squat])
        assert workout.find_exercise(5) == squat
        assert workout.find_exercise(6) is None

    def test_nested_ids_cover_exercises_and_sets(self):
        workout = Workout(
            user_id=1,
            exercises=[
                Exercise(id=1, name="Squat", sets=[ExerciseSet(id=2), ExerciseSet(id=3)]),
                Exercise(id=4, name="Bench"),
            ],
        )
        assert workout.nested_ids() == {1, 2, 3, 4}

    def test_json_round_trip(self):
        workout = Workout(
            id=10,
            user_id=1,
            start_time=1700000000,
            exercises=[Exercise(id=5, name="Squat", sets=[ExerciseSet(id=6, reps=5, weight=100.0)])],
        )
        assert Workout.model_validate_json(workout.model_dump_json()) == workout


@pytest.mark.unit
class TestExercise:
    def test_name_required(self):
        with pytest.raises(ValidationError):
            Exercise(name="")

    def test_negative_reps_rejected(self):
        with pytest.raises(ValidationError):
            ExerciseSet(reps=-1)

    def test_find_set(self):
        exercise = Exercise(name="Squat", sets=[ExerciseSet(id=9, reps=1)])
        assert exercise.find_set(9).reps == 1
        assert exercise.find_set(10) is None

    def test_large_ids_survive_json(self):
        exercise = Exercise(id=2**63 - 1, name="Squat")
        assert Exercise.model_validate_json(exercise.model_dump_json()).id == 2**63 - 1


@pytest.mark.unit
class TestUser:
    def test_private_fields_not_dumped(self):
        user = User(id=1, username="alice", password_hash="$2b$hash", is_deleted=True)
        dumped = user.model_dump()
        assert "password_hash" not in dumped
        assert "is_deleted" not in dumped
        assert "$2b$hash" not in repr(user)

    def test_username_required(self):
        with pytest.raises(ValidationError):
            User(username="")


@pytest.mark.unit
class TestMetric:
    def test_day_required(self):
        with pytest.raises(ValidationError):
            Metric(user_id=1, day="")
