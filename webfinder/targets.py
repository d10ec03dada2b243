# -*- coding: utf-8 -*-
"""
探测目标生成模块
"""

from typing import Iterable, List

from .models import Candidate, ScanConfig, SCHEME_HTTP, SCHEME_HTTPS


def is_dns_host(address: str) -> bool:
    """以 .1 结尾的地址视为网关/DNS服务器"""
    return address.split('.')[-1] == '1'


def build_candidates(addresses: Iterable[str], config: ScanConfig) -> List[Candidate]:
    """地址 x 端口 x 协议 的全部组合"""
    candidates = []
    for address in addresses:
        if config.skip_dns and is_dns_host(address):
            continue

        for port in config.ports:
            candidates.append(Candidate(SCHEME_HTTP, address, port))
            if config.include_https:
                candidates.append(Candidate(SCHEME_HTTPS, address, port))

    return candidates
