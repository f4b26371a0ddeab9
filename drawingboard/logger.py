import logging
from PyQt5.QtCore import QObject, pyqtSignal

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LogEmitter(QObject):
    log_record = pyqtSignal(str)


log_emitter = LogEmitter()


class QtHandler(logging.Handler):
    """Forwards formatted records to widgets through ``log_emitter``."""

    def emit(self, record):
        msg = self.format(record)
        log_emitter.log_record.emit(msg)


def setup_logging(level=logging.DEBUG):
    logger = logging.getLogger()
    if logger.handlers:
        return
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    qt_handler = QtHandler()
    qt_handler.setFormatter(fmt)
    logger.addHandler(qt_handler)
