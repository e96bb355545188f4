"""Config registry, change pipeline and persistence."""

from .coercion import EntryType, format_value, parse_value
from .registry import ConfigRegistry, EntryDescriptor
from .constraints import ConstraintRegistry, IntegerBounds
from .pipeline import ChangeOutcome, ChangePipeline, ChangeRequest, ChangeState
from .persistence import LoadReport, StoredRecord, dumps, load, loads, read_records, save
from .locations import LocationNode, build_location_index, entries_at
from .manager import ConfigManager, get_manager, reset_manager_for_tests, set_manager

__all__ = [
    "ChangeOutcome",
    "ChangePipeline",
    "ChangeRequest",
    "ChangeState",
    "ConfigManager",
    "ConfigRegistry",
    "ConstraintRegistry",
    "EntryDescriptor",
    "EntryType",
    "IntegerBounds",
    "LoadReport",
    "LocationNode",
    "StoredRecord",
    "build_location_index",
    "dumps",
    "entries_at",
    "format_value",
    "get_manager",
    "load",
    "loads",
    "parse_value",
    "read_records",
    "reset_manager_for_tests",
    "save",
    "set_manager",
]
