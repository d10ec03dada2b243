from webfinder.filters import any_content, contains_filter, default_filter, prefix_filter, regex_filter


def test_default_filter_is_case_insensitive():
    assert default_filter('<!DOCTYPE HTML><html>...</html>')
    assert default_filter('<!doctype html>\n<html></html>')
    assert default_filter('<!DocType Html>')


def test_default_filter_requires_prefix():
    assert not default_filter('<html></html>')
    assert not default_filter('  <!doctype html>')
    assert not default_filter('{"status": "ok"}')


def test_any_content():
    assert any_content('ok')
    assert not any_content('')


def test_prefix_and_contains_filters():
    assert prefix_filter('<?XML')('<?xml version="1.0"?>')
    assert not prefix_filter('<?xml')('<html>')
    assert contains_filter('Access Point')('<title>access point login</title>')
    assert not contains_filter('router')('<title>printer</title>')


def test_regex_filter():
    matcher = regex_filter(r'(a|A)ccess (p|P)oint')
    assert matcher('<h1>ACCESS POINT</h1>')
    assert not matcher('<h1>gateway</h1>')
