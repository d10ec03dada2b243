#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
局域网Web服务器发现工具 - 入口脚本

用法示例:
    python scan.py 192.168.31.0/24 -t 16 -T 1
    python scan.py 192.168.31.200-192.168.31.255 -p 80,8080 --https
"""

import sys
import os

# 添加当前目录到Python路径，确保可以导入webfinder包
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == '__main__':
    try:
        from webfinder.main import run
    except ImportError as e:
        print(f"错误: 无法导入webfinder包 - {str(e)}")
        print("请确保webfinder包已正确安装或位于当前目录下")
        sys.exit(1)
    run()
