# -*- coding: utf-8 -*-
"""
地址范围展开模块

支持三种写法:
- 起止地址: expand_range('192.168.0.10', '192.168.0.20')
- 地址/掩码: expand_network('192.168.0.0/24') 或 '192.168.0.0/255.255.255.0'
- 命令行字符串: parse_targets('192.168.0.10-192.168.0.20')
"""

import ipaddress
from typing import List

from .exceptions import InvalidRangeError


def _to_ipv4(text: str) -> ipaddress.IPv4Address:
    try:
        return ipaddress.IPv4Address(text.strip())
    except (ipaddress.AddressValueError, AttributeError) as e:
        raise InvalidRangeError(f"无效的IPv4地址: {text!r}", {'address': text}) from e


def expand_range(start_ip: str, end_ip: str) -> List[str]:
    """展开起止地址(包含两端)，起始地址大于结束地址时返回空列表"""
    start = int(_to_ipv4(start_ip))
    end = int(_to_ipv4(end_ip))
    return [str(ipaddress.IPv4Address(ip)) for ip in range(start, end + 1)]


def expand_network(ip_range: str) -> List[str]:
    """展开 "地址/掩码" 写法，网络地址和广播地址都包含在内"""
    if not isinstance(ip_range, str) or '/' not in ip_range:
        raise InvalidRangeError(f"地址范围应为 ip/mask 格式，例如 192.168.0.0/24: {ip_range!r}",
                                {'range': ip_range})
    try:
        network = ipaddress.IPv4Network(ip_range.strip(), strict=False)
    except (ipaddress.AddressValueError, ipaddress.NetmaskValueError, ValueError) as e:
        raise InvalidRangeError(f"无效的地址范围: {ip_range!r}", {'range': ip_range}) from e
    return [str(ip) for ip in network]


def parse_targets(text: str) -> List[str]:
    """解析命令行目标: ip/mask、start-end 或单个地址"""
    text = (text or '').strip()
    if not text:
        raise InvalidRangeError("目标地址不能为空")
    if '/' in text:
        return expand_network(text)
    if '-' in text:
        start_ip, end_ip = text.split('-', 1)
        return expand_range(start_ip, end_ip)
    return [str(_to_ipv4(text))]
