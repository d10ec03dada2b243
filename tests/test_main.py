import argparse

import pytest

from webfinder import main as cli
from webfinder.finder import WebServerFinder
from webfinder.models import ProbeOutcome


def test_parse_ports():
    assert cli.parse_ports('80') == [80]
    assert cli.parse_ports('80, 8080,8000-8002') == [80, 8080, 8000, 8001, 8002]


@pytest.mark.parametrize('text', ['', 'http', '80-x'])
def test_parse_ports_rejects(text):
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_ports(text)


def test_build_finder_defaults():
    args = cli.build_parser().parse_args(['192.168.31.0/24'])
    finder = cli.build_finder(args)

    assert len(finder.addresses) == 256
    assert finder.ports == [80]
    assert finder.max_workers == 8
    assert finder.skip_dns is True
    assert finder.include_https is False
    assert finder.on_progress is not None


def test_build_finder_flags_override_config(tmp_path):
    path = tmp_path / 'webfinder.yaml'
    path.write_text('ports: [8000]\nmax_workers: 4\ninclude_https: true\n', encoding='utf-8')

    args = cli.build_parser().parse_args([
        '10.0.0.0-10.0.0.3', '-c', str(path), '-p', '80,8080', '-t', '16', '-T', '0.5',
        '--no-skip-dns', '--match', 'router', '-q',
    ])
    finder = cli.build_finder(args)

    assert finder.addresses == ['10.0.0.0', '10.0.0.1', '10.0.0.2', '10.0.0.3']
    assert finder.ports == [80, 8080]
    assert finder.max_workers == 16
    assert finder.timeout == 0.5
    assert finder.include_https is True
    assert finder.skip_dns is False
    assert finder.on_progress is None
    assert finder.filter('<title>Router Login</title>')


def test_regex_flag():
    args = cli.build_parser().parse_args(['10.0.0.2', '--regex', r'(A|a)ccess (P|p)oint'])
    finder = cli.build_finder(args)
    assert finder.filter('<h1>access point</h1>')


@pytest.mark.asyncio
async def test_main_prints_servers(monkeypatch, capsys):
    async def fake_find(self):
        return {'http://10.0.0.2', 'http://10.0.0.3:8080'}

    monkeypatch.setattr(WebServerFinder, 'find', fake_find)

    assert await cli.main(['10.0.0.0/30', '-q']) == 0
    out = capsys.readouterr().out
    assert 'http://10.0.0.2\nhttp://10.0.0.3:8080' in out
    assert '扫描完成' in out


@pytest.mark.asyncio
async def test_main_no_servers(monkeypatch, capsys):
    async def fake_find(self):
        return set()

    monkeypatch.setattr(WebServerFinder, 'find', fake_find)

    assert await cli.main(['10.0.0.2']) == 0
    assert '没有发现' in capsys.readouterr().out


@pytest.mark.asyncio
@pytest.mark.parametrize('argv', [['not-an-ip'], ['10.0.0.0/40'], ['10.0.0.2', '-t', '0'],
                                  ['10.0.0.2', '--regex', '(']])
async def test_main_configuration_error(argv, capsys):
    assert await cli.main(argv) == 2
    assert '配置错误' in capsys.readouterr().out


def test_progress_tick(capsys):
    cli._print_tick('http://10.0.0.2:80', ProbeOutcome.NO_MATCH)
    cli._print_tick('http://10.0.0.3:80', ProbeOutcome.MATCH)
    assert capsys.readouterr().out == '##'
