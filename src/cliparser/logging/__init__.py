from cliparser.logging.factory import DefaultLoggerFactory
from cliparser.logging.helpers import JsonLogFormatter, get_logger, setup_base_logger

__all__ = ['DefaultLoggerFactory', 'JsonLogFormatter', 'get_logger', 'setup_base_logger']
