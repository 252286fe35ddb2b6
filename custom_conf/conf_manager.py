from threading import Lock

from helpers.help_custom_conf.help_conf_manager import HelpConfigManager

helper = HelpConfigManager()


class ConfManager:
    """
    ConfManager is responsible for managing configuration settings in a thread-safe way
    It allows loading, retrieving, updating, and clearing configuration settings
    """

    def __init__(self) -> None:
        """
        Initialize the ConfManager with an empty settings dictionary and a lock for thread safety
        """
        self.settings: dict[str, any] = {}
        self._lock = Lock()

    def load(self, loader: any) -> None:
        """
        Merge new settings over the current ones

        Args:
            loader (any): A dictionary or an object with a .load() method that provides the settings
        """
        with self._lock:
            self.settings = helper.get_merged_settings(loader, self.settings)

    def get_settings(self, key: str, default: any = None) -> any:
        """
        Retrieve a setting by key. If the key doesn't exist, return the default value (None by default)

        Args:
            key (str): The key of the setting to retrieve
            default (any): The default value to return if the key is not found

        Returns:
            any: The value of the setting or the default value if the key is not found
        """
        with self._lock:
            return self.settings.get(key, default)

    def set_settings(self, key: str, value: any) -> None:
        """
        Set a new key-value pair in the settings

        Args:
            key (str): The key of the setting to add or update
            value (any): The value of the setting to store
        """
        with self._lock:
            self.settings[key] = value

    def clear(self) -> None:
        """
        Clear all settings from the configuration manager
        """
        with self._lock:
            self.settings.clear()
