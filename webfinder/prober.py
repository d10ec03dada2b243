# -*- coding: utf-8 -*-
"""
HTTP探测模块

所有工作协程共享一个 aiohttp 会话，单次探测的任何失败都只算作"未匹配"。
"""

import asyncio
import logging
from typing import Dict, Optional

import aiohttp

from .filters import ResponseFilter
from .models import Candidate, ProbeOutcome, ScanConfig, DEFAULT_PORTS

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36',
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
}


class ProbeStatusError(Exception):
    """响应状态码不是2xx"""

    def __init__(self, url: str, status: int):
        super().__init__(f"{url} 返回状态码 {status}")
        self.url = url
        self.status = status


def normalize_url(candidate: Candidate) -> str:
    """去掉协议默认端口: http 的 :80 和 https 的 :443"""
    if DEFAULT_PORTS.get(candidate.scheme) == candidate.port:
        return f'{candidate.scheme}://{candidate.address}'
    return candidate.url


class HttpProber:
    """基于 aiohttp 的探测器"""

    def __init__(self, timeout: float = 2.0, connections: int = 16,
                 headers: Optional[Dict[str, str]] = None):
        self.timeout = timeout
        self.connections = connections
        self.headers = dict(DEFAULT_HEADERS)
        if headers:
            self.headers.update(headers)
        self.session = None

    @classmethod
    def from_config(cls, config: ScanConfig) -> 'HttpProber':
        return cls(timeout=config.timeout, connections=config.max_workers * 2)

    async def open(self):
        """创建共享会话，不校验证书"""
        connector = aiohttp.TCPConnector(limit=self.connections, ssl=False)
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        self.session = aiohttp.ClientSession(connector=connector, timeout=timeout,
                                             headers=self.headers)

    async def close(self):
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def fetch(self, url: str) -> str:
        """GET 并返回正文，不跟随重定向"""
        if self.session is None:
            raise RuntimeError("探测器会话未打开或已关闭")

        async with self.session.get(url, allow_redirects=False) as response:
            if not 200 <= response.status < 300:
                raise ProbeStatusError(url, response.status)
            return await response.text(errors='ignore')

    async def probe(self, candidate: Candidate, response_filter: ResponseFilter) -> ProbeOutcome:
        """探测单个目标"""
        url = candidate.url
        try:
            body = await self.fetch(url)
        except asyncio.TimeoutError:
            logger.debug(f"超时: {url}")
            return ProbeOutcome.ERROR
        except aiohttp.ClientError as e:
            logger.debug(f"请求错误: {url} - {str(e)}")
            return ProbeOutcome.ERROR
        except Exception as e:
            logger.debug(f"未知错误: {url} - {str(e)}")
            return ProbeOutcome.ERROR

        if not body or not body.strip():
            return ProbeOutcome.NO_MATCH

        try:
            matched = response_filter(body)
        except Exception as e:
            logger.warning(f"过滤器处理 {url} 时出错: {str(e)}")
            return ProbeOutcome.ERROR

        return ProbeOutcome.MATCH if matched else ProbeOutcome.NO_MATCH
