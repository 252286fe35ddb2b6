from pathlib import Path
from typing import Any, Dict

from custom_conf.conf_manager import ConfManager
from utils.framework.custom_conf_util import (load_env_vars,
                                              load_layered_settings,
                                              normalize_env_var_keys,
                                              parse_sample_data)
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger()

ENV_VAR_PREFIX = "CONF_"


class HelpInitializeConfig:
    def __init__(
        self,
        conf_manager: ConfManager,
        environment: str,
        settings_path: Path,
        params: Dict[str, Any],
    ):
        self.conf_manager = conf_manager
        self.environment = environment
        self.settings_path = settings_path
        self.params = params

    def initialize(self) -> ConfManager:

        self._load_file_settings()

        if self.params.get("detect_env_vars"):
            self._load_env_vars()

        self._finalize_settings()

        return self.conf_manager

    def _load_file_settings(self) -> None:
        LOGGER.info(f"Loading '{self.environment}' settings from {self.settings_path}")
        file_settings = load_layered_settings(self.settings_path, self.environment)
        self.conf_manager.load(file_settings)

    def _load_env_vars(self) -> None:
        env_vars = normalize_env_var_keys(load_env_vars(ENV_VAR_PREFIX), ENV_VAR_PREFIX)
        if env_vars:
            LOGGER.debug(f"Overriding settings from environment: {', '.join(sorted(env_vars))}")
        self.conf_manager.load(env_vars)

    def _finalize_settings(self) -> None:
        sample_data = self.conf_manager.get_settings("ordering_sample_data")
        if sample_data is not None:
            self.conf_manager.set_settings("ordering_sample_data", parse_sample_data(sample_data))

        self.conf_manager.set_settings("environment", self.environment)
