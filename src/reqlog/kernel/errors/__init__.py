"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    ReqlogError                  (base.py)
    └── PreconditionViolationError  (precondition.py)
"""

from reqlog.kernel.errors.base import ReqlogError
from reqlog.kernel.errors.precondition import PreconditionViolationError, require_non_negative

__all__ = [
    "PreconditionViolationError",
    "ReqlogError",
    "require_non_negative",
]
