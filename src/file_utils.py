"""
File utility functions for the article service.
Common file operations shared by the storage backends.
"""
import json
import os
from typing import Any


def read_text_file(filepath: str) -> str:
    """
    Read a UTF-8 text file.

    Args:
        filepath: Path to the file

    Returns:
        File contents, or an empty string if the file doesn't exist
    """
    if not os.path.exists(filepath):
        return ""
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


def dump_json(data: Any) -> str:
    """
    Serialize data as pretty-printed JSON.

    Args:
        data: Data to serialize

    Returns:
        JSON text indented with two spaces
    """
    return json.dumps(data, ensure_ascii=False, indent=2)


def save_json_file(filepath: str, data: Any, ensure_dir: bool = True) -> None:
    """
    Save data to a JSON file, overwriting it in full.

    The data is written to a temporary file next to the target and then
    moved into place, so the target always holds a complete document.

    Args:
        filepath: Path to save the JSON file
        data: Data to save
        ensure_dir: Whether to create parent directory if it doesn't exist
    """
    directory = os.path.dirname(filepath)
    if ensure_dir and directory:
        os.makedirs(directory, exist_ok=True)
    tmp = f"{filepath}.tmp"
    with open(tmp, 'w', encoding='utf-8') as f:
        f.write(dump_json(data))
    os.replace(tmp, filepath)
