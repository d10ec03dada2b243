# -*- coding: utf-8 -*-
"""配置管理：从 YAML 加载默认配置并提供访问接口"""
from pathlib import Path

import yaml

from .exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'default_config.yaml'

# YAML 键 -> WebServerFinder 构造参数
FINDER_OPTIONS = ('ports', 'timeout', 'include_https', 'skip_dns', 'max_workers')


class Config:
    def __init__(self, path: str = None):
        self.path = Path(path) if path else DEFAULT_CONFIG_PATH
        self._data = {}
        self.load()

    def load(self):
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            data = {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"无法解析配置文件 {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"配置文件 {self.path} 顶层必须是映射")
        self._data = data

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value

    def as_dict(self):
        return dict(self._data)

    def finder_options(self):
        """取出 WebServerFinder 认识的配置项"""
        options = {k: self._data[k] for k in FINDER_OPTIONS if self._data.get(k) is not None}
        if 'ports' in options:
            ports = options['ports']
            options['ports'] = [ports] if isinstance(ports, int) else list(ports)
        return options
