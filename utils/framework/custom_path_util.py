from pathlib import Path


def find_project_root(start_path: Path, markers: list[str] | None = None) -> Path:
    """
    Recursively searches for the project root directory by looking for specific marker files.

    Args:
        start_path (Path): The starting path for the search.
        markers (list[str] | None): A list of marker files to identify the project root.

    Returns:
        Path: The path to the project root directory.

    Raises:
        FileNotFoundError: If the project root directory cannot be found.
    """
    if markers is None:
        markers = ["pyproject.toml"]

    current_path = start_path.resolve()

    if any((current_path / marker).exists() for marker in markers):
        return current_path

    if current_path.parent == current_path:
        raise FileNotFoundError("Project root not found.")

    return find_project_root(current_path.parent, markers)


def get_default_settings_path() -> Path:
    """
    Returns the path of the settings file shipped next to the configuration package.
    """
    return Path(__file__).resolve().parents[2] / "custom_conf" / "demo_settings.yaml"
