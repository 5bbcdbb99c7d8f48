'''
Logging configuration for the list modules.

The library modules only create loggers; call setup_logger() from an
application or a test session to see their output.
'''
import logging
import os
import sys

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name='list_ops', level=None, format_string=None):
    '''
    Attaches a stdout handler to the named logger and returns it. Level comes
    from `level`, then the LOG_LEVEL environment variable, then INFO. A logger
    that already has handlers is returned untouched.
    '''
    level = level or os.getenv('LOG_LEVEL', 'INFO')
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string,
                                               datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False
    return logger
