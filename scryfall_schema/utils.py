"""
Scryfall Schema simple utilities
"""

import logging
import os
from typing import Any, Sequence, Union

from . import constants


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get("SCRYFALL_SCHEMA_DEBUG", "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format=constants.LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )


def format_path(loc: Sequence[Union[int, str]]) -> str:
    """
    Render a field location as a dotted accessor
    ("card_faces", 1, "name") => "card_faces[1].name"
    :param loc: Location segments, field names and list indices
    :return: Accessor string, empty for the document root
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def describe_type(value: Any) -> str:
    """
    Name a decoded-JSON value's type the way JSON would
    :param value: Any decoded value
    :return: JSON type name
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
