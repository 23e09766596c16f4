"""HealthProd - AI life companion.

HealthProd helps track daily habits with:
- Activity logging with streaks and weekly breakdowns
- Voice commands behind a wake phrase ("hey ai")
- AI daily reports, insights, task prioritization and chat (Anthropic)
- Reminders, a focus timer and a coin-based rewards store

Usage:
    python -m healthprod --profile dev
    python -m healthprod --mock --demo
"""

__version__ = "0.1.0"

from .config import HealthProdConfig
from .config.loader import load_config

__all__ = [
    "HealthProdConfig",
    "__version__",
    "load_config",
]
