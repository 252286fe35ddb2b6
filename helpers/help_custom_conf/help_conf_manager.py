from utils.common.dict_util import deep_merge_dicts


class HelpConfigManager:
    def __init__(self):
        """
        Initialization can take place in future developments
        """

    @staticmethod
    def get_merged_settings(loader, settings):

        # Determine if loader is a dict or an object with .load() method
        if isinstance(loader, dict):
            new_settings = loader
        elif callable(getattr(loader, "load", None)):
            new_settings = loader.load()
        else:
            raise TypeError(f"Settings loader must be a dict or provide .load(), got {type(loader).__name__}")

        return deep_merge_dicts(settings, new_settings)
