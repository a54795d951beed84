import json, os, shutil, tempfile
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fitplan.infra.paths import PLAN_STORE_FILE
from fitplan.utilities.config import DEFAULT_DAYS_PER_WEEK
from fitplan.utilities.constants import STORED_PLAN_KEY
from fitplan.utilities.errors import StoredPlanError

logger = logging.getLogger(__name__)


class StoredPlan:
    """Last generated plan text plus the parameters it was generated with."""

    def __init__(self, text: str, params: Optional[Dict[str, Any]] = None):
        self.text = text
        self.params = dict(params) if params else {}

    @property
    def days_per_week(self) -> int:
        """Stored day count; the default when it is absent or not a positive number."""
        value = self.params.get("DaysPerWeek", self.params.get("days_per_week"))
        try:
            days = int(value)
        except (TypeError, ValueError):
            return DEFAULT_DAYS_PER_WEEK
        return days if days > 0 else DEFAULT_DAYS_PER_WEEK

    def to_dict(self):
        return {"text": self.text, "params": self.params}

    def __repr__(self) -> str:
        return f"StoredPlan(days_per_week={self.days_per_week}, chars={len(self.text)})"


class PlanRepository:
    """Keeps one opaque JSON blob under STORED_PLAN_KEY in a small key/value file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or PLAN_STORE_FILE)

    def _read_store(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                store = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoredPlanError(f"Cannot read plan store {self.path}: {e}") from e
        if not isinstance(store, dict):
            raise StoredPlanError(f"Plan store {self.path} is not a JSON object")
        return store

    def _atomic_write(self, store: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".plan_store_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def load(self) -> Optional[StoredPlan]:
        """Return the stored plan, None when nothing was saved yet.

        Raises StoredPlanError when a blob exists but cannot be decoded.
        """
        store = self._read_store()
        blob = store.get(STORED_PLAN_KEY)
        if blob is None:
            return None
        try:
            data = json.loads(blob) if isinstance(blob, str) else blob
        except json.JSONDecodeError as e:
            raise StoredPlanError(f"Stored plan is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StoredPlanError("Stored plan is not a JSON object")
        text = data.get("text")
        params = data.get("params") or {}
        if not isinstance(text, str):
            raise StoredPlanError("Stored plan has no text")
        if not isinstance(params, dict):
            raise StoredPlanError("Stored plan parameters are not an object")
        return StoredPlan(text, params)

    def save(self, text: str, params: Optional[Dict[str, Any]] = None) -> StoredPlan:
        plan = StoredPlan(text, params)
        try:
            store = self._read_store()
        except StoredPlanError:
            logger.warning("Overwriting unreadable plan store %s", self.path)
            store = {}
        store[STORED_PLAN_KEY] = json.dumps(plan.to_dict(), ensure_ascii=False)
        self._atomic_write(store)
        logger.info("Stored plan saved (%d chars, %d days)", len(text), plan.days_per_week)
        return plan

    def clear(self) -> bool:
        """Remove the stored plan. Returns False if there was none."""
        try:
            store = self._read_store()
        except StoredPlanError:
            store = {STORED_PLAN_KEY: None}
        if STORED_PLAN_KEY not in store:
            return False
        store.pop(STORED_PLAN_KEY, None)
        self._atomic_write(store)
        return True
