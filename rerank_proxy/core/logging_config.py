import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once at process start."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
