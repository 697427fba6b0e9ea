import os
import logging
from logging.handlers import RotatingFileHandler


def setup_logging():
    """
    Attach console and rotating file handlers to the root logger.

    The log directory and level come from the log_dir and log_level
    environment variables, defaulting to ./logs and INFO.

    Returns:
        list: The handlers that were added
    """
    # Create logs directory if it doesn't exist
    logs_dir = os.getenv('log_dir', 'logs')
    if not os.path.exists(logs_dir):
        os.makedirs(logs_dir)
        print(f"Created logs directory: {logs_dir}. Absolute path: {os.path.abspath(logs_dir)}")

    log_level = getattr(logging, os.getenv('log_level', 'INFO').upper(), logging.INFO)

    # Set up root logger
    logger = logging.getLogger()
    logger.setLevel(log_level)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Rotating file handler
    file_handler = RotatingFileHandler(
        os.path.join(logs_dir, 'lunarphase.log'),
        maxBytes=1024*1024,  # 1MB
        backupCount=5
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return [console_handler, file_handler]
