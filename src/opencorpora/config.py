"""Parser configuration, loadable from YAML."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from opencorpora.exceptions import ConfigError

DEFAULT_CHUNK_SIZE = 64 * 1024


class DuplicatePolicy(str, Enum):
    """What the reference index does with a key declared twice."""

    OVERWRITE = "overwrite"
    ERROR = "error"


@dataclass(frozen=True)
class ParserConfig:
    """Options for one parse.

    ``strict_link_kinds`` turns an unknown link type id into a
    ``LinkKindNotFoundError`` instead of the zero link kind.
    """

    strict_link_kinds: bool = False
    on_duplicate: DuplicatePolicy = DuplicatePolicy.OVERWRITE
    chunk_size: int = DEFAULT_CHUNK_SIZE


def load_config(source: str | Path | dict[str, Any]) -> ParserConfig:
    """Load a ParserConfig from a YAML file, YAML string, or mapping.

    Raises:
        ConfigError: If the YAML is invalid or holds unknown keys or bad values
        FileNotFoundError: If the file does not exist
    """
    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = _load_yaml(f)
    else:
        data = _load_yaml(source)

    return _parse_config(data)


def _is_file_path(s: str) -> bool:
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(stream: Any) -> dict[str, Any]:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e

    # An empty document means "all defaults"
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")
    return data


def _parse_config(data: dict[str, Any]) -> ParserConfig:
    known = {f.name for f in fields(ParserConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}

    if "strict_link_kinds" in data:
        strict = data["strict_link_kinds"]
        if not isinstance(strict, bool):
            raise ConfigError("Field 'strict_link_kinds' must be a boolean")
        kwargs["strict_link_kinds"] = strict

    if "on_duplicate" in data:
        try:
            kwargs["on_duplicate"] = DuplicatePolicy(data["on_duplicate"])
        except ValueError as e:
            choices = ", ".join(p.value for p in DuplicatePolicy)
            raise ConfigError(
                f"Field 'on_duplicate' must be one of: {choices}"
            ) from e

    if "chunk_size" in data:
        size = data["chunk_size"]
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigError("Field 'chunk_size' must be a positive integer")
        kwargs["chunk_size"] = size

    return ParserConfig(**kwargs)
