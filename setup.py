#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
webfinder包的安装脚本
"""

from setuptools import setup, find_packages
import os

# 获取包的版本号
try:
    with open(os.path.join('webfinder', '__init__.py'), 'r', encoding='utf-8') as f:
        for line in f:
            if line.startswith('__version__'):
                version = line.strip().split('=')[1].strip().strip('"').strip("'")
                break
        else:
            version = '0.1.0'
except OSError:
    version = '0.1.0'

# 读取README文件内容
try:
    with open('README.md', 'r', encoding='utf-8') as f:
        long_description = f.read()
except OSError:
    long_description = "局域网Web服务器发现工具"

# 定义依赖项
install_requires = [
    'aiohttp>=3.8.0',
    'PyYAML>=6.0',
]

tests_require = [
    'pytest>=7.0',
    'pytest-asyncio>=0.21',
]

# 设置包的配置
setup(
    name='webfinder',
    version=version,
    description='局域网Web服务器发现工具',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='PyHack-Lab',
    author_email='',
    url='',
    packages=find_packages(include=['webfinder', 'webfinder.*']),
    package_data={'webfinder': ['default_config.yaml']},
    include_package_data=True,
    install_requires=install_requires,
    extras_require={'test': tests_require},
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'webfinder=webfinder.main:run',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Security',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: System :: Networking',
        'Topic :: Utilities',
    ],
    keywords='web-server-discovery, network-scanner, lan, security',
)
