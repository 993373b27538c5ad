"""
Metric Repository Interface (Port).

Storage contract for daily body metrics. No router uses it yet.
"""
from typing import List, Optional, Protocol

from domain.models import Metric


class MetricRepository(Protocol):
    """Abstract interface for metric persistence, keyed by an opaque string ID."""

    def create(self, metric: Metric) -> Metric:
        """Insert a metric and return it with its generated ID."""
        ...

    def find_one(self, metric_id: str) -> Optional[Metric]:
        """Get a metric by ID, or None."""
        ...

    def update(self, metric: Metric) -> bool:
        """Overwrite the metric identified by ``metric.id``. False if none matched."""
        ...

    def delete(self, metric_id: str) -> bool:
        """Delete a metric. False if none matched."""
        ...

    def find_all(self) -> List[Metric]:
        """Get every stored metric."""
        ...
