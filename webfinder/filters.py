# -*- coding: utf-8 -*-
"""
响应内容过滤器

过滤器是 str -> bool 的函数，输入为响应正文。
"""

import re
from typing import Callable

ResponseFilter = Callable[[str], bool]

DOCTYPE_HTML = '<!doctype html>'


def default_filter(body: str) -> bool:
    """正文(忽略大小写)以 <!doctype html> 开头"""
    return body.lower().startswith(DOCTYPE_HTML)


def any_content(body: str) -> bool:
    return bool(body)


def prefix_filter(prefix: str) -> ResponseFilter:
    """正文以指定前缀开头(忽略大小写)"""
    prefix = prefix.lower()

    def _filter(body: str) -> bool:
        return body.lower().startswith(prefix)

    return _filter


def contains_filter(text: str) -> ResponseFilter:
    """正文包含指定文本(忽略大小写)"""
    text = text.lower()

    def _filter(body: str) -> bool:
        return text in body.lower()

    return _filter


def regex_filter(pattern: str) -> ResponseFilter:
    """正文中能搜索到正则(忽略大小写)"""
    compiled = re.compile(pattern, re.IGNORECASE)

    def _filter(body: str) -> bool:
        return compiled.search(body) is not None

    return _filter
