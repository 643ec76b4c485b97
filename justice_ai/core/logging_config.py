import logging

LOG_FORMAT = "%(asctime)s  %(levelname)-7s  %(name)-20s │ %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Basic console logging shared by the API and the Streamlit UI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
