"""
ConfigKeeper - runtime configuration registry

Named, typed settings with metadata (default, type, location, visibility),
an XML load/save round trip, and a change pipeline that lets other
components veto a change before it is applied and react to it afterwards.

Package Structure:
- core/config/: registry, constraints, change pipeline, persistence, location tree
- core/utils/: logging, paths, event bus, translation lookup
- cli/: command-line interface and terminal settings editor
"""

__version__ = "0.1.0"

from configkeeper.core.config import (
    ChangeOutcome,
    ChangePipeline,
    ConfigManager,
    ConfigRegistry,
    ConstraintRegistry,
    EntryDescriptor,
    EntryType,
)
from configkeeper.core.errors import (
    ChangeDenied,
    ConfigKeeperError,
    DuplicateEntry,
    IOFailure,
    ParseFailure,
    UnknownEntry,
)

__all__ = [
    "ChangeDenied",
    "ChangeOutcome",
    "ChangePipeline",
    "ConfigKeeperError",
    "ConfigManager",
    "ConfigRegistry",
    "ConstraintRegistry",
    "DuplicateEntry",
    "EntryDescriptor",
    "EntryType",
    "IOFailure",
    "ParseFailure",
    "UnknownEntry",
    "__version__",
]
