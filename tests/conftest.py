import asyncio
import sys
import pathlib
from collections import Counter

import aiohttp
import pytest

# Ensure project root is on sys.path so 'import webfinder' works when pytest runs from
# different working directories or when running individual tests.
_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from webfinder.prober import HttpProber


class FakeProber(HttpProber):
    """Answers from a url -> body map; anything else behaves like a refused connection.

    Set ``hang=True`` to make every fetch run into the per-probe timeout instead.
    """

    instances = []

    def __init__(self, timeout=2.0, responses=None, hang=False, delay=0.0):
        super().__init__(timeout=timeout)
        self.responses = dict(responses or {})
        self.hang = hang
        self.delay = delay
        self.fetched = []
        self.open_calls = 0
        self.close_calls = 0
        self.fetches_after_close = 0
        self.in_flight = 0
        self.max_in_flight = 0
        FakeProber.instances.append(self)

    async def open(self):
        self.open_calls += 1

    async def close(self):
        self.close_calls += 1

    async def fetch(self, url):
        if self.close_calls:
            self.fetches_after_close += 1
        self.fetched.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.hang:
                await asyncio.sleep(self.timeout)
                raise asyncio.TimeoutError()
            if self.delay:
                await asyncio.sleep(self.delay)
            if url not in self.responses:
                raise aiohttp.ClientConnectionError(f"connection refused: {url}")
            return self.responses[url]
        finally:
            self.in_flight -= 1

    @property
    def fetch_counts(self):
        return Counter(self.fetched)


@pytest.fixture
def fake_prober_factory():
    """Returns a factory builder; the built probers are collected on FakeProber.instances."""
    FakeProber.instances = []

    def make(responses=None, hang=False, delay=0.0):
        def factory(config):
            return FakeProber(timeout=config.timeout, responses=responses, hang=hang, delay=delay)
        return factory

    return make
