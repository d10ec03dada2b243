# -*- coding: utf-8 -*-
"""
数据模型模块
"""

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Callable, Dict, Tuple

SCHEME_HTTP = 'http'
SCHEME_HTTPS = 'https'

# 协议对应的默认端口，结果中不显示
DEFAULT_PORTS = {
    SCHEME_HTTP: 80,
    SCHEME_HTTPS: 443,
}


class ProbeOutcome(Enum):
    """单次探测结果"""
    MATCH = 'match'
    NO_MATCH = 'no_match'
    ERROR = 'error'


@dataclass(frozen=True)
class Candidate:
    """探测目标: 协议 + 地址 + 端口"""
    scheme: str
    address: str
    port: int

    @property
    def url(self) -> str:
        return f'{self.scheme}://{self.address}:{self.port}'

    def __str__(self) -> str:
        return self.url


@dataclass(frozen=True)
class ScanConfig:
    """一次扫描期间不变的配置快照"""
    ports: Tuple[int, ...]
    filter: Callable[[str], bool]
    timeout: float
    include_https: bool
    skip_dns: bool
    max_workers: int


@dataclass
class ScanStats:
    """扫描统计信息"""
    candidates: int = 0
    probes: int = 0
    matches: int = 0
    errors: int = 0
    workers: int = 0
    start_time: float = 0.0
    end_time: float = 0.0
    outcomes: Dict[str, int] = field(default_factory=dict)

    @property
    def duration(self) -> float:
        if not self.end_time:
            return 0.0
        return self.end_time - self.start_time

    def record(self, outcome: ProbeOutcome):
        """记录一次探测结果"""
        self.probes += 1
        if outcome is ProbeOutcome.MATCH:
            self.matches += 1
        elif outcome is ProbeOutcome.ERROR:
            self.errors += 1
        self.outcomes[outcome.value] = self.outcomes.get(outcome.value, 0) + 1

    def to_dict(self) -> Dict:
        """转换为字典"""
        result_dict = asdict(self)
        result_dict['duration'] = self.duration
        result_dict['probes_per_second'] = self.probes / self.duration if self.duration > 0 else 0
        return result_dict
