"""Configuration model and loader for the jsonbeautify CLI.

A config file is a JSON object; command-line flags override its values.
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INDENT = 2
DEFAULT_WIDTH = 80


class FormatConfig(BaseModel):
    """Layout settings for the format and check commands."""
    model_config = ConfigDict(extra="forbid")

    indent: Union[int, str] = DEFAULT_INDENT  # spaces, or a literal indent unit
    width: int = Field(default=DEFAULT_WIDTH, ge=0)  # single-line width budget
    keys: Optional[List[str]] = None  # member allow-list, in output order


def load_config(path: Optional[Path]) -> FormatConfig:
    """Load a FormatConfig from a JSON file, or defaults when path is None.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has invalid fields
            (pydantic.ValidationError is a ValueError)
    """
    if path is None:
        return FormatConfig()
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return FormatConfig(**data)


def merge_overrides(
    config: FormatConfig,
    indent: Union[int, str, None] = None,
    width: Optional[int] = None,
    keys: Optional[List[str]] = None,
) -> FormatConfig:
    """Return a copy of config with every non-None override applied."""
    updates = {}
    if indent is not None:
        updates["indent"] = indent
    if width is not None:
        updates["width"] = width
    if keys is not None:
        updates["keys"] = keys
    return FormatConfig(**{**config.model_dump(), **updates})
