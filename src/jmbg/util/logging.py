import logging
from typing import Literal

from jmbg.util.config import JmbgSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Logger the validator reports its rejection reasons on
VALIDATOR_LOGGER = "jmbg.service.validator"

LOG_FORMAT = "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"


class LoggingSettings(JmbgSettings):
    log_level: LogLevel = "WARNING"
    # Print why identifiers were rejected regardless of log_level. The
    # records name the failing check, never the identifier.
    log_rejections: bool = False


log_settings = LoggingSettings()


def setup_logging() -> None:
    """
    Initial logging setup.

    Sets default format and level to that specified by `JMBG_LOG_LEVEL`, or `WARNING` if not set. With
    `JMBG_LOG_REJECTIONS` the validator's debug records get a console handler of their own.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    default_handler = logging.StreamHandler()
    default_handler.setLevel(logging.getLevelName(log_settings.log_level))
    default_handler.setFormatter(formatter)

    # The root logger gets everything so that other handlers can pick up
    # records below the console level.
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )

    if log_settings.log_rejections:
        rejection_handler = logging.StreamHandler()
        rejection_handler.setLevel(logging.DEBUG)
        rejection_handler.setFormatter(formatter)

        validator_logger = logging.getLogger(VALIDATOR_LOGGER)
        validator_logger.addHandler(rejection_handler)
        # Otherwise warnings would print twice
        validator_logger.propagate = False
