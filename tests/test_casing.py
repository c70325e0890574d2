from __future__ import annotations

import pytest

from namedargs import to_camel_case


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("--name", "name"),
        ("--foo-bar", "fooBar"),
        ("--foo-bar-baz", "fooBarBaz"),
        ("--snake_case", "snakeCase"),
        ("--Foo-Bar", "fooBar"),
        ("--FOO", "foo"),
        ("--foo-BAR", "fooBar"),
        ("--http-URL-path", "httpUrlPath"),
        ("--foo-barBaz", "fooBarBaz"),
        ("--alreadyCamel", "alreadyCamel"),
        ("name", "name"),
        ("--", ""),
    ],
)
def test_to_camel_case(raw, expected):
    assert to_camel_case(raw) == expected
