# -*- coding: utf-8 -*-
"""
异常模块

扫描开始前发现的配置问题统一以 ConfigurationError 抛出，
单个探测的失败不会抛到调用方。
"""

from typing import Any, Dict, Optional


class ConfigurationError(ValueError):
    """扫描配置无效，扫描不会开始"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidRangeError(ConfigurationError):
    """地址范围或掩码格式错误"""
