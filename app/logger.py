import logging
import os
import sys
import time
import typing
from logging.handlers import RotatingFileHandler

_LogFormat = '%(asctime)s - %(levelname)s - %(message)s'

# Logging goes through the root logger so library modules can just call
# logging.debug etc. The file log is always UTC so logs from different
# machines can be compared.
def setupLogger(
        logDir: str,
        logFile: str,
        consoleStream: typing.Optional[typing.TextIO] = sys.stdout
        ) -> None:
    os.makedirs(logDir, exist_ok=True)
    logFile = os.path.join(logDir, logFile)
    fileHandler = RotatingFileHandler(
        logFile,
        maxBytes=1024 * 1024,
        backupCount=10)
    fileFormatter = logging.Formatter(_LogFormat)
    fileFormatter.converter = time.gmtime
    fileHandler.setFormatter(fileFormatter)
    logger = logging.getLogger()
    logger.addHandler(fileHandler)
    if consoleStream:
        logger.addHandler(logging.StreamHandler(consoleStream))
    logger.setLevel(logging.INFO)

def setLogLevel(logLevel: int) -> None:
    logger = logging.getLogger()
    logger.setLevel(logLevel)
