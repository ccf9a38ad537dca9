"""
A11yScout package initializer.
Defines package version and exposes the scan pipeline.
"""
__version__ = "0.1.0"

from a11y_scout.config import ScanArguments, load_config
from a11y_scout.engine import Engine
from a11y_scout.guard import ScanStateGuard
from a11y_scout.runner import ScanCommandRunner

__all__ = ["Engine", "ScanArguments", "ScanCommandRunner", "ScanStateGuard", "load_config", "__version__"]
