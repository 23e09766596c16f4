"""Application module for HealthProd.

Provides the state container, the application wiring and the text shell.
"""

from .application import Dashboard, HealthProdApp
from .shell import HealthProdShell
from .state import AppState, AppStateView

__all__ = ["AppState", "AppStateView", "Dashboard", "HealthProdApp", "HealthProdShell"]
