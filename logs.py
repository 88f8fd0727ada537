import logging
import os
import codecs

from config import log_dir
from simple_utils import get_root


class SafeFileHandler(logging.FileHandler):
    def _open(self):
        return codecs.open(self.baseFilename, self.mode, "utf-8")

    def emit(self, record):
        try:
            super().emit(record)
        except UnicodeEncodeError:
            record.msg = str(record.msg).encode("utf-8", errors="replace").decode("utf-8")
            super().emit(record)


class Log:
    def __init__(self, logger_name, log_file):
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(logging.DEBUG)

        # modules are imported more than once under pytest, attach handlers only once
        if self.logger.handlers:
            return

        log_dir_path = get_root(log_dir())
        if not os.path.exists(log_dir_path):
            os.makedirs(log_dir_path)

        log_file_path = os.path.join(log_dir_path, log_file)
        f_handler = SafeFileHandler(log_file_path)
        f_handler.setLevel(logging.DEBUG)

        f_format = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s - [%(filename)s:%(lineno)d]"
        )
        f_handler.setFormatter(f_format)

        self.logger.addHandler(f_handler)

    def get_logger(self):
        return self.logger
