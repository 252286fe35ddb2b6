import os

from custom_conf.initialize_config import ConfigInitializer
from orchestration.demonstration import run_demonstration
from utils.framework.custom_logger_util import setup_console_logging


def main() -> None:
    """
    Main entry point, runs the demonstration sequence once and prints every effect
    The settings section is picked with the DEMO_ENV environment variable
    """
    environment = os.environ.get("DEMO_ENV", "local")
    config = ConfigInitializer(environment=environment).initialize()

    setup_console_logging(config.get_settings("log_level", "INFO"), config.get_settings("log_format"))

    run_demonstration(print, config.get_settings("ordering_sample_data"))


if __name__ == "__main__":
    main()
