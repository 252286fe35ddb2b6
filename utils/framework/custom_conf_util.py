import os
from pathlib import Path
from typing import Any, Dict

from utils.common.dict_util import deep_merge_dicts
from utils.common.file_util import load_yaml_file_in_path

DEFAULT_SECTION = "default"


def load_layered_settings(file_path: Path, environment: str) -> Dict[str, Any]:
    """
    Load layered settings from a YAML file, the environment section overrides the defaults

    Args:
        file_path (Path): Path to the YAML file
        environment (str): The environment layer to load (e.g. 'local', 'test')

    Returns:
        Dict[str, Any]: Merged settings

    Raises:
        ValueError: If the file does not hold a mapping of sections
    """
    settings = load_yaml_file_in_path(file_path) or {}

    if not isinstance(settings, dict):
        raise ValueError(f"Settings file must contain a mapping of sections: {file_path}")

    default_settings = settings.get(DEFAULT_SECTION) or {}
    env_settings = settings.get(environment) or {}

    return deep_merge_dicts(default_settings, env_settings)


def load_env_vars(prefix: str = "CONF_") -> Dict[str, str]:
    """
    Load settings from environment variables prefixed with the provided prefix

    Args:
        prefix (str): The prefix to filter environment variables (default is 'CONF_')

    Returns:
        Dict[str, str]: A dictionary of settings loaded from environment variables
    """
    return {key: value for key, value in os.environ.items() if key.startswith(prefix)}


def normalize_env_var_keys(env_vars: Dict[str, str], prefix: str = "CONF_") -> Dict[str, str]:
    """
    Turn prefixed environment variable names into setting keys, CONF_LOG_LEVEL -> log_level

    Args:
        env_vars (Dict[str, str]): Environment variables, all starting with the prefix
        prefix (str): The prefix to strip

    Returns:
        Dict[str, str]: Settings keyed by lower-cased names without the prefix
    """
    return {key[len(prefix):].lower(): value for key, value in env_vars.items() if key[len(prefix):]}


def parse_sample_data(value: Any) -> list:
    """
    Accept the ordering sample either as a list or as a comma separated string

    Examples:
        >>> parse_sample_data("c, a,b")
        ['c', 'a', 'b']
    """
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise TypeError(f"Sample data must be a list or a comma separated string, got {type(value).__name__}")
