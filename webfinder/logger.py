# -*- coding: utf-8 -*-
"""日志封装，日志输出到 stderr，stdout 留给进度和结果"""
import logging
import sys

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def get_logger(name='webfinder', level=logging.INFO, stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
