from typing import Any


def deep_merge_dicts(*dict_args: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple dictionaries into a new one, nested dictionaries are merged key by key
    and later dictionaries win on conflicting keys

    Args:
        *dict_args (dict[str, Any]): Any number of dictionaries to merge

    Returns:
        dict[str, Any]: The merged dictionary, none of the inputs are modified

    Examples:
        >>> deep_merge_dicts({"a": 1}, {"b": 2}, {"c": 3})
        {'a': 1, 'b': 2, 'c': 3}

        >>> deep_merge_dicts({"log": {"level": "INFO", "fmt": "x"}}, {"log": {"level": "DEBUG"}})
        {'log': {'level': 'DEBUG', 'fmt': 'x'}}
    """
    result: dict[str, Any] = {}
    for dictionary in dict_args:
        for key, value in dictionary.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = deep_merge_dicts(result[key], value)
            elif isinstance(value, dict):
                result[key] = deep_merge_dicts(value)
            else:
                result[key] = value
    return result
