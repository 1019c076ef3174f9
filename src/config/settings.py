"""Runtime configuration, read from the environment / a .env file"""

import logging

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", case_sensitive=True)

    # Time control (per player, in minutes)
    MAX_BUDGET_MINUTES: int = 59
    DEFAULT_BUDGET_MINUTES: int = 10

    LOG_LEVEL: str = "INFO"


def configure_logging(config: Settings) -> None:
    """For a host process: the library itself never installs handlers."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
