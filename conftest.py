import pytest

from custom_conf.initialize_config import ConfigInitializer
from helpers.help_conftest.help_fixtures import ConftestHelper

# use helper
helper = ConftestHelper()

# helper fix any path issues before run
helper.fix_any_path_issue_before_run()

# helper get logging capabilities
LOGGER = helper.get_logger()

"""
Pytest Configuration and Fixtures

Sets up the session log file and provides the fixtures shared by the
demonstration flow tests.

References:
    - Pytest documentation: https://docs.pytest.org/
"""


def pytest_configure(config):
    """
    Configure pytest settings before tests run

    Args:
        config (pytest.Config): The pytest configuration object
    """
    helper.initiate_setup_config(config)
    LOGGER.info("Pytest configuration and logging setup completed.")


@pytest.fixture
def recording_sink():
    """
    Fresh effect sink per test, collects every effect a host emits
    """
    return helper.new_recording_sink()


@pytest.fixture(scope="session")
def config_fixture():
    """
    Settings of the 'test' environment, without environment variable overrides
    """
    config = ConfigInitializer(environment="test", detect_env_vars=False).initialize()

    assert config is not None, "Configuration manager should not be None"
    assert hasattr(config, "settings"), "Configuration manager should have settings attribute"

    yield config

    LOGGER.info("Tearing down test configuration")
    config.clear()


def pytest_sessionfinish(session, exitstatus):
    """
    Hook that is called after the test session has completed.
    """
    LOGGER.info(f"Test session finished with exit status {exitstatus}")
