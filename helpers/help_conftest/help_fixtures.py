import sys
from pathlib import Path

from utils.framework.custom_logger_util import get_logger, setup_logging
from utils.framework.custom_path_util import find_project_root

LOGGER = get_logger()


class RecordingSink:
    """
    Effect sink that keeps every effect it receives, in order, for later assertions
    """

    def __init__(self):
        self.effects: list[str] = []

    def __call__(self, effect: str) -> None:
        self.effects.append(effect)

    def clear(self) -> None:
        self.effects.clear()


class ConftestHelper:
    def __init__(self):
        """
        Initialization can take place in future developments
        """

    @staticmethod
    def fix_any_path_issue_before_run():
        # Add the project root to sys.path for module resolution
        project_root = str(find_project_root(Path(__file__)))
        if project_root not in sys.path:
            sys.path.insert(0, project_root)
        LOGGER.info(f"Framework root path added to sys.path: {project_root}")

    @staticmethod
    def get_logger():
        return LOGGER

    @staticmethod
    def initiate_setup_config(config):
        setup_logging(config)

    @staticmethod
    def new_recording_sink() -> RecordingSink:
        return RecordingSink()
