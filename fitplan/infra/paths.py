from fitplan.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
PLAN_STORE_FILE = DATA_DIR / 'stored_plan.json'

__all__ = ['DATA_DIR', 'PLAN_STORE_FILE']
