"""
Supabase implementation of MetricRepository.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.errors import StorageError
from domain.models import Metric
from infrastructure.db.errors import storage_failure

logger = logging.getLogger(__name__)

METRICS_TABLE = "metrics"


def _row_to_metric(row: Dict[str, Any]) -> Metric:
    return Metric(
        id=str(row["id"]),
        user_id=row["user_id"],
        weight=row.get("weight"),
        calories_consumed=row.get("calories_consumed"),
        day=row["day"],
    )


def _metric_to_row(metric: Metric) -> Dict[str, Any]:
    return {
        "user_id": metric.user_id,
        "weight": metric.weight,
        "calories_consumed": metric.calories_consumed,
        "day": metric.day,
    }


class SupabaseMetricRepository:
    """
    Supabase implementation of MetricRepository protocol.

    The table uses a serial key; it is exposed as an opaque string.
    """

    def __init__(self, client: Client):
        self._client = client

    def create(self, metric: Metric) -> Metric:
        try:
            result = self._client.table(METRICS_TABLE).insert(_metric_to_row(metric)).execute()
        except Exception as e:
            raise storage_failure("create metric", e) from e

        if not result.data:
            raise StorageError(developer_message="insert into metrics returned no row")
        return _row_to_metric(result.data[0])

    def find_one(self, metric_id: str) -> Optional[Metric]:
        try:
            result = (
                self._client.table(METRICS_TABLE)
                .select("*")
                .eq("id", metric_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise storage_failure(f"get metric {metric_id}", e) from e

        return _row_to_metric(result.data[0]) if result.data else None

    def update(self, metric: Metric) -> bool:
        try:
            result = (
                self._client.table(METRICS_TABLE)
                .update(_metric_to_row(metric))
                .eq("id", metric.id)
                .execute()
            )
        except Exception as e:
            raise storage_failure(f"update metric {metric.id}", e) from e

        return bool(result.data)

    def delete(self, metric_id: str) -> bool:
        try:
            result = self._client.table(METRICS_TABLE).delete().eq("id", metric_id).execute()
        except Exception as e:
            raise storage_failure(f"delete metric {metric_id}", e) from e

        return bool(result.data)

    def find_all(self) -> List[Metric]:
        try:
            result = self._client.table(METRICS_TABLE).select("*").order("id").execute()
        except Exception as e:
            raise storage_failure("list metrics", e) from e

        return [_row_to_metric(row) for row in result.data or []]
