"""
Config file persistence.

The file is XML with one ``<field>`` per registered entry::

    <config>
     <fields>
      <field>
       <parameter>
        <name>volume</name>
        <value>80</value>
        <default>50</default>
        <type>count</type>
       </parameter>
      </field>
     </fields>
    </config>

``default`` and ``type`` are written for people reading the file; loading
parses ``value`` with the type of the *registered* descriptor.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from configkeeper.core.errors import IOFailure, ParseFailure
from configkeeper.core.utils.logger import log_info, log_warning

from .coercion import format_value
from .pipeline import ChangePipeline
from .registry import ConfigRegistry

PathLike = Union[str, Path]

ROOT_TAG = "config"
FIELDS_TAG = "fields"
FIELD_TAG = "field"
PARAMETER_TAG = "parameter"


@dataclass(frozen=True)
class StoredRecord:
    name: str
    value: str
    default: str
    type: str


@dataclass
class LoadReport:
    applied: List[str] = field(default_factory=list)
    skipped_unknown: List[str] = field(default_factory=list)
    skipped_invalid: List[str] = field(default_factory=list)


def _text(parent: ET.Element, tag: str) -> Optional[str]:
    node = parent.find(f".//{tag}")
    if node is None:
        return None
    return node.text or ""


def _build_tree(registry: ConfigRegistry) -> ET.ElementTree:
    root = ET.Element(ROOT_TAG)
    fields = ET.SubElement(root, FIELDS_TAG)
    for descriptor in registry.descriptors():
        parameter = ET.SubElement(ET.SubElement(fields, FIELD_TAG), PARAMETER_TAG)
        ET.SubElement(parameter, "name").text = descriptor.name
        ET.SubElement(parameter, "value").text = format_value(registry.get(descriptor.name))
        ET.SubElement(parameter, "default").text = descriptor.default
        ET.SubElement(parameter, "type").text = descriptor.type.value
    tree = ET.ElementTree(root)
    ET.indent(tree, space=" ")
    return tree


def dumps(registry: ConfigRegistry) -> str:
    """Serialize every registered entry, in registration order."""
    tree = _build_tree(registry)
    return ET.tostring(tree.getroot(), encoding="unicode", short_empty_elements=False) + "\n"


def save(registry: ConfigRegistry, path: PathLike) -> Path:
    target = Path(path)
    payload = dumps(registry)
    try:
        with open(target, "w", encoding="utf-8") as handle:
            handle.write(payload)
    except OSError as e:
        raise IOFailure(f"Cannot write config file: {target}", {"path": str(target)}) from e
    log_info("persistence", f"Saved {len(registry)} entries", context=str(target))
    return target


def _parse_root(text: str, source: str) -> ET.Element:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseFailure(f"Malformed config file: {e}", {"path": source}) from e
    if root.tag != ROOT_TAG:
        raise ParseFailure(
            f"Expected <{ROOT_TAG}> root element, found <{root.tag}>.", {"path": source}
        )
    if root.find(FIELDS_TAG) is None:
        raise ParseFailure(f"Config file has no <{FIELDS_TAG}> element.", {"path": source})
    return root


def _records(root: ET.Element) -> List[StoredRecord]:
    records: List[StoredRecord] = []
    for node in root.findall(f"./{FIELDS_TAG}/{FIELD_TAG}"):
        name = _text(node, "name")
        if not name:
            continue
        records.append(
            StoredRecord(
                name=name,
                value=_text(node, "value") or "",
                default=_text(node, "default") or "",
                type=_text(node, "type") or "",
            )
        )
    return records


def _read_text(path: PathLike) -> str:
    source = Path(path)
    try:
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseFailure(f"Config file is not valid UTF-8: {source}", {"path": str(source)}) from e
    except OSError as e:
        raise IOFailure(f"Cannot read config file: {source}", {"path": str(source)}) from e


def read_records(path: PathLike) -> List[StoredRecord]:
    """Parse a config file into records without applying them to a registry."""
    return _records(_parse_root(_read_text(path), str(path)))


def loads(
    registry: ConfigRegistry, pipeline: ChangePipeline, text: str, source: str = "<string>"
) -> LoadReport:
    """Apply every known record in ``text`` through the pipeline's apply+notify phases.

    A structurally invalid document aborts the whole load; a record whose
    value does not parse is logged and skipped.
    """
    report = LoadReport()
    for record in _records(_parse_root(text, source)):
        if not registry.has(record.name):
            report.skipped_unknown.append(record.name)
            continue
        try:
            pipeline.apply_trusted(record.name, record.value)
        except ParseFailure as e:
            log_warning(
                "persistence",
                f"Skipping {record.name}: {e.message}",
                context=source,
            )
            report.skipped_invalid.append(record.name)
            continue
        report.applied.append(record.name)
    return report


def load(registry: ConfigRegistry, pipeline: ChangePipeline, path: PathLike) -> LoadReport:
    report = loads(registry, pipeline, _read_text(path), str(path))
    log_info(
        "persistence",
        f"Loaded {len(report.applied)} entries",
        context=f"{path} (unknown={len(report.skipped_unknown)}, invalid={len(report.skipped_invalid)})",
    )
    return report
