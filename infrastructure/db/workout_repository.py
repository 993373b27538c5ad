"""
Supabase implementation of WorkoutRepository.

Each workout is one row of the ``workouts`` table; its exercises and sets
are stored together in the ``exercises`` JSONB column and rewritten on
every update. ``version`` guards updates against concurrent writers.
"""
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client

from application.errors import StorageError
from domain.models import Workout
from infrastructure.db.errors import storage_failure

logger = logging.getLogger(__name__)

WORKOUTS_TABLE = "workouts"
WORKOUT_COLUMNS = "id, user_id, start_time, exercises, version"


def _exercises_document(workout: Workout) -> List[Dict[str, Any]]:
    return [exercise.model_dump(mode="json") for exercise in workout.exercises]


def _row_to_workout(row: Dict[str, Any]) -> Workout:
    exercises = row.get("exercises") or []
    try:
        if isinstance(exercises, str):
            # Rows written through a text cast come back as a JSON string
            exercises = json.loads(exercises)
        return Workout(
            id=row["id"],
            user_id=row["user_id"],
            start_time=row["start_time"],
            exercises=exercises,
            version=row.get("version") or 1,
        )
    except (KeyError, ValidationError, ValueError) as e:
        logger.error("Unreadable workout row %s: %s", row.get("id"), e)
        raise StorageError(
            developer_message=f"workout row {row.get('id')} is malformed: {e}"
        ) from e


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def create(self, workout: Workout) -> Workout:
        """Insert a workout and return it with its generated ID."""
        data = {
            "user_id": workout.user_id,
            "start_time": workout.start_time,
            "exercises": _exercises_document(workout),
            "version": 1,
        }
        try:
            result = self._client.table(WORKOUTS_TABLE).insert(data).execute()
        except Exception as e:
            raise storage_failure("create workout", e) from e

        if not result.data:
            raise StorageError(developer_message="insert into workouts returned no row")
        logger.info(f"Workout saved for user {workout.user_id}")
        return _row_to_workout(result.data[0])

    def get(self, workout_id: int) -> Optional[Workout]:
        """Get a single workout by ID."""
        try:
            result = (
                self._client.table(WORKOUTS_TABLE)
                .select(WORKOUT_COLUMNS)
                .eq("id", workout_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise storage_failure(f"get workout {workout_id}", e) from e

        if not result.data:
            return None
        return _row_to_workout(result.data[0])

    def list_for_user(self, user_id: int) -> List[Workout]:
        """Get all workouts of a user ordered by ID."""
        try:
            result = (
                self._client.table(WORKOUTS_TABLE)
                .select(WORKOUT_COLUMNS)
                .eq("user_id", user_id)
                .order("id")
                .execute()
            )
        except Exception as e:
            raise storage_failure("list workouts", e) from e

        return [_row_to_workout(row) for row in result.data or []]

    def update(self, workout: Workout) -> Optional[Workout]:
        """Write the workout if its stored version still matches."""
        data = {
            "user_id": workout.user_id,
            "start_time": workout.start_time,
            "exercises": _exercises_document(workout),
            "version": workout.version + 1,
        }
        try:
            result = (
                self._client.table(WORKOUTS_TABLE)
                .update(data)
                .eq("id", workout.id)
                .eq("version", workout.version)
                .execute()
            )
        except Exception as e:
            raise storage_failure(f"update workout {workout.id}", e) from e

        if not result.data:
            logger.warning(
                f"No workout {workout.id} at version {workout.version} (0 rows updated)"
            )
            return None
        return _row_to_workout(result.data[0])

    def delete(self, workout_id: int) -> bool:
        """Delete a workout."""
        try:
            logger.info(f"Attempting to delete workout {workout_id}")
            result = self._client.table(WORKOUTS_TABLE).delete().eq("id", workout_id).execute()
        except Exception as e:
            raise storage_failure(f"delete workout {workout_id}", e) from e

        deleted_count = len(result.data) if result.data else 0
        if deleted_count > 0:
            logger.info(f"Workout {workout_id} deleted successfully ({deleted_count} row(s))")
            return True

        logger.warning(f"No workout found with id {workout_id} (0 rows deleted)")
        return False
