# -*- coding: utf-8 -*-
"""
主入口模块
"""

import argparse
import asyncio
import logging
import re
import sys
from typing import List, Optional

from .config import Config
from .exceptions import ConfigurationError
from .filters import contains_filter, default_filter, regex_filter
from .finder import WebServerFinder
from .logger import get_logger
from .models import ProbeOutcome
from .ranges import parse_targets


def parse_ports(text: str) -> List[int]:
    """解析端口列表，例如 80,8080,8000-8003"""
    ports = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        try:
            if '-' in part:
                low, high = part.split('-', 1)
                ports.extend(range(int(low), int(high) + 1))
            else:
                ports.append(int(part))
        except ValueError:
            raise argparse.ArgumentTypeError(f"无效的端口: {part}")
    if not ports:
        raise argparse.ArgumentTypeError("端口列表不能为空")
    return ports


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='局域网Web服务器发现工具')
    parser.add_argument('target', help='扫描范围: 192.168.0.0/24、192.168.0.10-192.168.0.20 或单个地址')
    parser.add_argument('-p', '--ports', type=parse_ports, help='端口列表 (例如: 80,8080,8000-8003)')
    parser.add_argument('-T', '--timeout', type=float, help='每个目标的超时时间 (秒，默认: 2)')
    parser.add_argument('-t', '--threads', type=int, dest='max_workers', help='并发数 (默认: 8)')
    parser.add_argument('--https', action='store_true', default=None, dest='include_https',
                        help='同时探测HTTPS')
    parser.add_argument('--no-skip-dns', action='store_false', default=None, dest='skip_dns',
                        help='不跳过以 .1 结尾的地址')
    match_group = parser.add_mutually_exclusive_group()
    match_group.add_argument('--match', help='响应正文包含该文本即视为匹配 (忽略大小写)')
    match_group.add_argument('--regex', help='响应正文匹配该正则即视为匹配 (忽略大小写)')
    parser.add_argument('-c', '--config', help='YAML配置文件路径')
    parser.add_argument('-q', '--quiet', action='store_true', help='不显示进度')
    parser.add_argument('-v', '--verbose', action='store_true', help='显示调试日志')
    return parser


def build_finder(args: argparse.Namespace) -> WebServerFinder:
    """合并配置文件与命令行参数，命令行优先"""
    config = Config(args.config)
    options = config.finder_options()
    for key in ('ports', 'timeout', 'max_workers', 'include_https', 'skip_dns'):
        value = getattr(args, key)
        if value is not None:
            options[key] = value

    response_filter = default_filter
    if args.match:
        response_filter = contains_filter(args.match)
    elif args.regex:
        try:
            response_filter = regex_filter(args.regex)
        except re.error as e:
            raise ConfigurationError(f"无效的正则: {args.regex} - {e}") from e

    on_progress = None if args.quiet else _print_tick
    return WebServerFinder(parse_targets(args.target), filter=response_filter,
                           on_progress=on_progress, **options)


def _print_tick(url: str, outcome: ProbeOutcome):
    sys.stdout.write('#')
    sys.stdout.flush()


async def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    get_logger('webfinder', logging.DEBUG if args.verbose else logging.WARNING)

    try:
        finder = build_finder(args)
    except ConfigurationError as e:
        print(f"配置错误: {e.message}")
        return 2

    print("开始探测...")
    servers = await finder.find()

    if servers:
        print("\n全部完成，发现以下可用地址:")
        for server in sorted(servers):
            print(server)
    else:
        print("\n全部完成，没有发现可用的服务器")

    finder.print_summary()
    return 0


def run():
    """运行函数，处理Windows平台的兼容性"""
    # 在Windows平台上，使用不同的事件循环策略
    if sys.platform == 'win32':
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        print("\n扫描被用户中断")
        code = 130
    sys.exit(code)


if __name__ == '__main__':
    run()
