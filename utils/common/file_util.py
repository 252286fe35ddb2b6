from pathlib import Path
from typing import Any

import yaml


def file_exists_in_path(file_path: str | Path) -> bool:
    """
    Check if a file exists at the given path

    Args:
        file_path (str | Path): Path to the file

    Returns:
        bool: True if the file exists, False otherwise

    Raises:
        TypeError: If the input is not a string or Path object

    Examples:
        >>> file_exists_in_path("missing_settings.yaml")
        False
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object")
    return Path(file_path).is_file()


def load_yaml_file_in_path(file_path: str | Path) -> Any:
    """
    Load a YAML file from the given path and return its content

    Args:
        file_path (str | Path): Path to the YAML file

    Returns:
        Any: Data loaded from the YAML file, None for an empty file

    Raises:
        TypeError: If the input is not a string or Path object
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed as YAML
    """
    if not file_exists_in_path(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    with Path(file_path).open("r", encoding="utf-8") as file:
        try:
            return yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file: {file_path}") from e
