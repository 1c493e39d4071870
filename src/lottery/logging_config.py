import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


def setup_logging(service_name, level: Union[int, str] = logging.INFO, log_dir: Optional[Path] = None):
    """
    Configures logging for the given service.

    Layout when log_dir is given:
    <log_dir>/
        {service_name}.log         - current log, rotated at 10 MB

    :param service_name: Logger name (string)
    :param level: Level for the logger and its handlers
    :param log_dir: Directory for the log file; console only when None
    :return: Logger for the service
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Drop handlers from earlier calls
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

        service_handler = RotatingFileHandler(
            str(log_dir / f'{service_name}.log'),
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        service_handler.setFormatter(formatter)
        service_handler.setLevel(level)
        logger.addHandler(service_handler)

    return logger
