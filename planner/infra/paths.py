from planner.utilities.config import DATA_DIR as _CONFIG_DATA_DIR, TEMPLATES_DIR as _CONFIG_TEMPLATES_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIG_DATA_DIR.resolve()
TEMPLATES_DIR = _CONFIG_TEMPLATES_DIR.resolve()

__all__ = ['DATA_DIR', 'TEMPLATES_DIR']
