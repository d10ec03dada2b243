# -*- coding: utf-8 -*-
"""
扫描器模块

WebServerFinder 把地址范围展开成探测目标，放入共享队列，
由固定数量的工作协程并发探测，全部工作协程退出后返回匹配结果。
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Dict, Iterable, List, Optional, Sequence, Set

from .exceptions import ConfigurationError
from .filters import ResponseFilter, default_filter
from .models import Candidate, ProbeOutcome, ScanConfig, ScanStats
from .prober import HttpProber, normalize_url
from .ranges import expand_network, expand_range
from .targets import build_candidates

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, ProbeOutcome], None]


class CompletionBarrier:
    """完成屏障

    每个工作协程退出循环时调用 arrive()，计数达到 parties 的那一个
    执行 on_release(关闭共享会话)并唤醒等待方，整个过程只发生一次。
    parties 为 0 时，wait() 直接释放。
    """

    def __init__(self, parties: int, on_release: Optional[Callable[[], Awaitable[None]]] = None):
        self.parties = parties
        self.count = 0
        self._on_release = on_release
        self._lock = asyncio.Lock()
        self._released = asyncio.Event()

    @property
    def released(self) -> bool:
        return self._released.is_set()

    async def arrive(self) -> bool:
        """返回 True 表示本次调用触发了释放"""
        async with self._lock:
            self.count += 1
            if self.count != self.parties:
                return False
            await self._release()
            return True

    async def wait(self):
        if self.parties == 0:
            async with self._lock:
                if not self.released:
                    await self._release()
        await self._released.wait()

    async def _release(self):
        try:
            if self._on_release is not None:
                await self._on_release()
        finally:
            self._released.set()


class WebServerFinder:
    """Web服务器发现器"""

    def __init__(self, addresses: Iterable[str], ports: Sequence[int] = (80,),
                 filter: ResponseFilter = default_filter, timeout: float = 2.0,
                 include_https: bool = False, skip_dns: bool = True, max_workers: int = 8,
                 on_progress: Optional[ProgressCallback] = None,
                 prober_factory: Optional[Callable[[ScanConfig], HttpProber]] = None):
        """
        :param addresses: 待扫描的地址序列
        :param ports: Web服务监听的端口
        :param filter: 判断响应正文是否符合要求
        :param timeout: 每个目标的超时时间(秒)
        :param include_https: 是否同时探测 HTTPS
        :param skip_dns: 是否跳过以 .1 结尾的地址(通常是网关/DNS服务器)
        :param max_workers: 并发工作协程数量
        :param on_progress: 每次探测结束后的回调 (url, outcome)
        :param prober_factory: 根据配置创建探测器，默认 HttpProber.from_config
        """
        self.addresses = list(addresses)
        self.ports = list(ports)
        self.filter = filter
        self.timeout = timeout
        self.include_https = include_https
        self.skip_dns = skip_dns
        self.max_workers = max_workers
        self.on_progress = on_progress
        self.prober_factory = prober_factory or HttpProber.from_config

        self.stats = ScanStats()

        # 尽早暴露配置错误
        self._snapshot()

    @classmethod
    def from_range(cls, start_ip: str, end_ip: str, **options) -> 'WebServerFinder':
        """按起止地址创建"""
        return cls(expand_range(start_ip, end_ip), **options)

    @classmethod
    def from_network(cls, ip_range: str, **options) -> 'WebServerFinder':
        """按 "ip/mask" 创建，例如 192.168.0.0/24"""
        return cls(expand_network(ip_range), **options)

    def _snapshot(self) -> ScanConfig:
        """校验当前属性并生成本次扫描的配置快照"""
        ports = tuple(self.ports)
        for port in ports:
            if isinstance(port, bool) or not isinstance(port, int) or not 1 <= port <= 65535:
                raise ConfigurationError(f"无效的端口: {port!r}", {'port': port})

        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) \
                or self.max_workers < 1:
            raise ConfigurationError(f"并发数必须为正整数: {self.max_workers!r}",
                                     {'max_workers': self.max_workers})

        if not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ConfigurationError(f"超时时间必须大于0: {self.timeout!r}",
                                     {'timeout': self.timeout})

        if not callable(self.filter):
            raise ConfigurationError("过滤器必须是可调用对象")

        return ScanConfig(
            ports=ports,
            filter=self.filter,
            timeout=float(self.timeout),
            include_https=bool(self.include_https),
            skip_dns=bool(self.skip_dns),
            max_workers=self.max_workers,
        )

    def candidates(self) -> List[Candidate]:
        """按当前配置生成的全部探测目标"""
        return build_candidates(self.addresses, self._snapshot())

    async def find(self) -> Set[str]:
        """扫描并返回匹配的URL集合"""
        config = self._snapshot()
        candidates = build_candidates(self.addresses, config)

        queue = asyncio.Queue()
        for candidate in candidates:
            queue.put_nowait(candidate)

        results = set()
        stats = ScanStats(candidates=len(candidates), workers=config.max_workers,
                          start_time=time.time())
        self.stats = stats
        logger.info(f"开始扫描，共 {len(candidates)} 个目标，{config.max_workers} 个工作协程")

        prober = self.prober_factory(config)
        await prober.open()
        barrier = CompletionBarrier(config.max_workers, on_release=prober.close)

        workers = [
            asyncio.create_task(self._worker(queue, prober, config, results, barrier, stats))
            for _ in range(config.max_workers)
        ]

        try:
            await barrier.wait()
        except asyncio.CancelledError:
            for task in workers:
                task.cancel()
            raise

        await asyncio.gather(*workers)

        stats.end_time = time.time()
        logger.info(f"扫描完成，发现 {len(results)} 个Web服务器，用时 {stats.duration:.2f} 秒")
        return results

    def find_sync(self) -> Set[str]:
        """同步调用 find()"""
        return asyncio.run(self.find())

    async def _worker(self, queue: asyncio.Queue, prober: HttpProber, config: ScanConfig,
                      results: Set[str], barrier: CompletionBarrier, stats: ScanStats):
        """工作协程: 取目标、探测、记录，队列为空时退出"""
        try:
            while not queue.empty():
                try:
                    candidate = queue.get_nowait()
                except asyncio.QueueEmpty:
                    # 没取到，重新判断队列是否耗尽
                    continue

                outcome = await prober.probe(candidate, config.filter)
                stats.record(outcome)
                if outcome is ProbeOutcome.MATCH:
                    results.add(normalize_url(candidate))
                self._notify(candidate, outcome)
        finally:
            await barrier.arrive()

    def _notify(self, candidate: Candidate, outcome: ProbeOutcome):
        if self.on_progress is None:
            return
        try:
            self.on_progress(candidate.url, outcome)
        except Exception as e:
            logger.warning(f"进度回调出错: {str(e)}")

    def get_stats(self) -> Dict:
        """获取最近一次扫描的统计信息"""
        return self.stats.to_dict()

    def print_summary(self):
        """打印扫描摘要"""
        stats = self.get_stats()

        print("\n=== 扫描完成 ===")
        print(f"扫描时长: {stats['duration']:.2f} 秒")
        print(f"目标数: {stats['candidates']}")
        print(f"探测次数: {stats['probes']}")
        print(f"失败次数: {stats['errors']}")
        print(f"匹配数: {stats['matches']}")
        print(f"探测速率: {stats['probes_per_second']:.2f} 次/秒")
