"""
Logging setup for clipglot.
"""
import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path

from config import APP_DIR


def setup_logging(level=logging.INFO, log_dir=None):
    """Log to a dated file and the console; route uncaught exceptions to the log."""
    log_dir = Path(log_dir) if log_dir else APP_DIR / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f'clipglot_{datetime.now().strftime("%Y%m%d")}.log'

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

    def exception_handler(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return
        logging.critical("Uncaught exception:\n%s",
                         "".join(traceback.format_exception(exc_type, exc_value, exc_tb)))

    sys.excepthook = exception_handler
    logging.info("Log file: %s", log_file)

    return log_file
