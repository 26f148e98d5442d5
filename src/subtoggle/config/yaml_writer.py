"""Reading, merging and editing the YAML configuration file."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def read_yaml(path: Path) -> dict:
    """The file's top-level mapping; {} if it is missing, unreadable or not a mapping."""
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring {path}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def write_yaml(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))


def deep_merge(base: dict, override: dict) -> dict:
    """A copy of base with override laid over it; nested mappings merge, anything else is replaced."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def parse_value(text: str) -> Any:
    """
    Read a value typed after `/config set`.

    Booleans, numbers, null and flow collections ([a, b] or {k: v}) are read
    as YAML. Everything else is kept as typed, so "#", "?" and "%s" stay
    strings instead of turning into comments, keys or directives.
    """
    if text.strip() in ("null", "~"):
        return None
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text
    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, (list, dict)) and text.lstrip()[:1] in ("[", "{"):
        return value
    return text


def lookup(data: dict, dotted_key: str) -> Any:
    """data["a"]["b"] for "a.b", or None when any part is missing."""
    for key in dotted_key.split("."):
        if not isinstance(data, dict) or key not in data:
            return None
        data = data[key]
    return data


def assign(data: dict, dotted_key: str, value: Any) -> dict:
    """Set data["a"]["b"] for "a.b", creating or replacing parents as needed."""
    *parents, last = dotted_key.split(".")
    node = data
    for key in parents:
        if not isinstance(node.get(key), dict):
            node[key] = {}
        node = node[key]
    node[last] = value
    return data
