"""Tests for identifier sanitizing."""

import pytest

from resource_generator.core.identifiers import SWIFT_KEYWORDS, SymbolName, sanitize


class TestSanitize:
    """Test cases for sanitize()."""

    @pytest.mark.parametrize('raw,expected', [
        ('icon-add.png', 'iconAddPng'),
        ('Hello World', 'helloWorld'),
        ('settings.title', 'settingsTitle'),
        ('2x_Logo', 'x_Logo'),
        ('URL', 'URL'),
        ('Icon', 'icon'),
        ('snake_case_name', 'snake_case_name'),
    ])
    def test_sanitize_examples(self, raw, expected):
        """Illegal characters split the name into camel cased components."""
        assert sanitize(raw).raw == expected

    def test_keeps_leading_case_when_disabled(self):
        assert sanitize('Icon', lowercase_leading=False).raw == 'Icon'

    def test_keywords_are_escaped(self):
        """Keywords keep their raw name and gain backticks in source."""
        symbol = sanitize('class')
        assert symbol.raw == 'class'
        assert symbol.value == '`class`'

    def test_all_keywords_escaped(self):
        for keyword in SWIFT_KEYWORDS:
            assert SymbolName(keyword).value == f'`{keyword}`'

    @pytest.mark.parametrize('raw', ['!!!', '123', '', ' - ', '.'])
    def test_empty_result(self, raw):
        """Names without any usable character produce an empty symbol."""
        assert sanitize(raw).is_empty

    def test_emoji_are_kept(self):
        assert sanitize('😀 smile').raw == '😀Smile'

    @pytest.mark.parametrize('raw', [
        'icon-add.png', 'Hello World', '2x_Logo', 'URL', 'class', 'ABC def',
        'A1', 'über straße', '😀 smile', 'Icon', 'x', '_',
    ])
    def test_idempotent(self, raw):
        """Sanitizing a sanitized name changes nothing."""
        once = sanitize(raw)
        assert sanitize(once.raw) == once

    def test_deterministic(self):
        assert sanitize('some file.json') == sanitize('some file.json')


class TestSymbolName:
    """Test cases for SymbolName."""

    def test_qualify(self):
        assert (SymbolName('_R') + SymbolName('image')).value == '_R.image'

    def test_qualify_escapes_keywords(self):
        assert (SymbolName('_R') + SymbolName('default')).value == '_R.`default`'

    def test_ordering(self):
        names = [SymbolName('b'), SymbolName('a'), SymbolName('c')]
        assert [n.raw for n in sorted(names)] == ['a', 'b', 'c']

    def test_str(self):
        assert str(SymbolName('in')) == '`in`'
