import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
    # urllib3 logs full request URLs at DEBUG, and those carry API keys
    logging.getLogger("urllib3").setLevel(logging.WARNING)
