import datetime
import logging
import os


class _ColorFormatter(logging.Formatter):
    ORANGE = "\033[33m"  # Orange/yellow in most terminals
    RED = "\033[91m"
    GREY = "\033[90m"
    RESET = "\033[0m"

    def format(self, record):
        line = super().format(record)
        if record.levelno == logging.DEBUG:
            return f"{self.GREY}{line}{self.RESET}"
        elif record.levelno == logging.WARNING:
            return f"{self.ORANGE}{line}{self.RESET}"
        elif record.levelno >= logging.ERROR:
            return f"{self.RED}{line}{self.RESET}"
        return line


_FORMAT = "%(asctime)s %(levelname)s: [%(filename)s:%(lineno)d] %(message)s"
_DATEFMT = "%H:%M:%S"


def setup_logging(level=logging.INFO, log_dir: str | None = None) -> None:
    """Sets up the root logger to log to console, and optionally to a file.

    If log_dir is given, a new log file is created there for the session.
    """
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_ColorFormatter(_FORMAT, _DATEFMT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []  # Clear previous handlers
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_filename = os.path.join(log_dir, f"hotspots_{timestamp}.txt")

        # No color in files.
        file_handler = logging.FileHandler(log_filename, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
        root_logger.addHandler(file_handler)
