# -*- coding: utf-8 -*-
"""
webfinder包 - 局域网Web服务器发现工具

在指定的地址范围内并发探测 (地址, 端口, 协议) 组合，
用过滤器判断响应正文，返回可用的Web服务器地址。

使用方法：
```python
from webfinder import WebServerFinder

finder = WebServerFinder.from_network('192.168.31.0/24', max_workers=16, timeout=1)
servers = await finder.find()
```
"""

# 导入主要模块
from .finder import WebServerFinder, CompletionBarrier
from .models import Candidate, ProbeOutcome, ScanConfig, ScanStats
from .prober import HttpProber, normalize_url
from .filters import default_filter, any_content, prefix_filter, contains_filter, regex_filter
from .ranges import expand_range, expand_network, parse_targets
from .targets import build_candidates, is_dns_host
from .config import Config
from .exceptions import ConfigurationError, InvalidRangeError
from .main import run

# 版本信息
__version__ = '1.0.0'

# 导出列表
__all__ = [
    # 主要类
    'WebServerFinder',
    'CompletionBarrier',
    'HttpProber',
    'Config',
    # 数据模型
    'Candidate',
    'ProbeOutcome',
    'ScanConfig',
    'ScanStats',
    # 过滤器
    'default_filter',
    'any_content',
    'prefix_filter',
    'contains_filter',
    'regex_filter',
    # 工具函数
    'expand_range',
    'expand_network',
    'parse_targets',
    'build_candidates',
    'is_dns_host',
    'normalize_url',
    # 异常
    'ConfigurationError',
    'InvalidRangeError',
    # 主入口
    'run'
]
