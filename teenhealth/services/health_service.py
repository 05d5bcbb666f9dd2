"""Health dashboard, nutrition and fitness logic.

Health metrics are kept as a single record per user in ``HealthMetrics``;
updates merge into that record or create it on first write.
"""
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict

from teenhealth.services.record_store import Collections, RecordStore, UpsertResult, eq

NUTRITION_PLAN = MappingProxyType({
    "breakfast": "Oatmeal with fruits and nuts",
    "lunch": "Chicken salad with quinoa",
    "dinner": "Grilled salmon with vegetables",
})


class HealthService:
    def __init__(self, store: RecordStore):
        self.store = store

    def get_metrics(self, user_id: str) -> Dict[str, Any]:
        return self.store.find_first(
            Collections.HEALTH_METRICS, eq("userId", user_id), not_found="No health data found"
        )

    def update_metrics(self, user_id: str, metrics: Dict[str, Any]) -> UpsertResult:
        data = {k: v for k, v in metrics.items() if v is not None}
        data["updatedAt"] = datetime.now(timezone.utc)
        return self.store.upsert(Collections.HEALTH_METRICS, eq("userId", user_id), data)

    def nutrition_plan(self, user_id: str) -> Dict[str, str]:
        # Same plan for everyone until plans are personalised
        return dict(NUTRITION_PLAN)

    def log_fitness_activity(self, user_id: str, activity: Dict[str, Any]) -> Dict[str, Any]:
        return self.store.insert(
            Collections.FITNESS_ACTIVITIES,
            {**activity, "userId": user_id, "loggedAt": datetime.now(timezone.utc)},
        )
