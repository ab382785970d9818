import logging
from synsplit.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

def setup_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
    # SQL echo is handled by the engine flag, keep the root quiet
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
