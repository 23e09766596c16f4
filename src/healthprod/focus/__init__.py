"""Focus mode module for HealthProd."""

from .timer import FOCUS_TIMER_TITLE, FocusPhase, FocusTimer

__all__ = ["FOCUS_TIMER_TITLE", "FocusPhase", "FocusTimer"]
