import logging
from pathlib import Path

from custom_conf.conf_manager import ConfManager
from helpers.help_custom_conf.help_initialize_config import \
    HelpInitializeConfig
from utils.framework.custom_path_util import get_default_settings_path

LOGGER = logging.getLogger(__name__)


class ConfigInitializer:
    def __init__(
            self,
            environment: str = "local",
            settings_path: str | Path | None = None,
            detect_env_vars: bool | None = True
    ) -> None:
        """
        Initialize the ConfigInitializer with the environment and the settings source

        Args:
            environment (str): The settings section to layer over the defaults (example 'local', 'test')
            settings_path (str | Path | None): YAML settings file, the bundled demo settings by default
            detect_env_vars (bool | None): Flag to enable CONF_ environment variable overrides
        """
        self.params = {
            "detect_env_vars": detect_env_vars,
        }
        self.environment = environment
        self.settings_path = Path(settings_path) if settings_path else get_default_settings_path()

        # Create an instance of ConfManager to manage configuration settings
        self.conf_manager = ConfManager()

    def initialize(self) -> ConfManager:
        """
        Initialize the configuration using the HelpInitializeConfig helper class
        The helper loads the layered file settings and then any environment overrides

        Returns:
            ConfManager: The ConfManager instance with loaded configuration settings
        """
        helper = HelpInitializeConfig(self.conf_manager, self.environment, self.settings_path, self.params)

        conf_manager = helper.initialize()
        LOGGER.debug(f"Configuration initialized for environment '{self.environment}'")
        return conf_manager
