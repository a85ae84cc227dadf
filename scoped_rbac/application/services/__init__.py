"""Application services.

Usage:
    from scoped_rbac.application.services import DecisionEngine, RBACSynchronizer
"""

from scoped_rbac.application.services.decision_engine import DecisionEngine
from scoped_rbac.application.services.rbac_synchronizer import RBACSynchronizer

__all__ = [
    "DecisionEngine",
    "RBACSynchronizer",
]
