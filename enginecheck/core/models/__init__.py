"""
Domain models for the engine checker.

All models are re-exported here for convenient access:

    from enginecheck.core.models import Manifest, Tool, CheckResult
"""

from enginecheck.core.models.check import CheckResult, Tool
from enginecheck.core.models.manifest import Manifest

__all__ = [
    "CheckResult",
    "Manifest",
    "Tool",
]
