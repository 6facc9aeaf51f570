"""Tests for the localization table builder."""

from resource_generator.core.identifiers import SymbolName
from resource_generator.core.models import (
    FormatParam,
    FormatSpecifier,
    LocalizableStrings,
    LocalizedEntry,
    LocaleReference,
)
from resource_generator.features.formats import parse_format_params
from resource_generator.features.strings import StringsGenerator
from resource_generator.frameworks.swift_printer import SwiftPrinter

ROOT = SymbolName('_R')


def table(locale, entries, filename='Localizable'):
    return LocalizableStrings(
        filename=filename,
        locale=LocaleReference.parse(locale),
        dictionary={key: LocalizedEntry(value, tuple(parse_format_params(value))) for key, value in entries.items()},
    )


class TestComputeStrings:
    """Test cases for StringsGenerator.compute_strings()."""

    def test_format_specifier_mismatch(self):
        """greeting is %@ in Base and %d in nl: skipped everywhere, one warning."""
        warnings = []
        generator = StringsGenerator('en', warnings.append)
        tables = [table('Base', {'greeting': 'Hello %@'}), table('nl', {'greeting': 'Hallo %d'})]

        assert generator.compute_strings('Localizable', tables) == []
        assert warnings == [
            "Skipping string for key greeting (Localizable), "
            "format specifiers don't match for all locales: Base, nl"
        ]

    def test_unified_params(self):
        generator = StringsGenerator('en', lambda message: None)
        tables = [table('en', {'count': '%1$@ has %2$d'}), table('nl', {'count': '%2$d heeft %1$@'})]

        strings = generator.compute_strings('Localizable', tables)
        assert len(strings) == 1
        assert [p.spec for p in strings[0].params] == [FormatSpecifier.STRING, FormatSpecifier.INT]
        assert strings[0].fallback_value == '%1$@ has %2$d'

    def test_non_consecutive_specifiers(self):
        """One locale with a gap drops the key in every locale."""
        warnings = []
        generator = StringsGenerator('en', warnings.append)
        tables = [table('en', {'x': '%1$@ %2$@'}), table('nl', {'x': '%2$@'})]

        assert generator.compute_strings('Localizable', tables) == []
        assert warnings == [
            "Skipping string x in 'Localizable' (nl), not all format specifiers are consecutive"
        ]

    def test_keys_outside_primary_are_dropped(self):
        warnings = []
        generator = StringsGenerator('en', warnings.append)
        tables = [table('Base', {'A': 'a', 'B': 'b'}), table('nl', {'A': 'a', 'C': 'c'})]

        strings = generator.compute_strings('Localizable', tables)
        assert [s.key for s in strings] == ['A', 'B']
        assert warnings == [
            "Strings file 'Localizable' (nl) is missing translations for keys: 'B'",
            "Strings file 'Localizable' (nl) has extra translations (not in Base) for keys: 'C'",
        ]

    def test_sorted_by_key(self):
        generator = StringsGenerator(None, lambda message: None)
        strings = generator.compute_strings('Localizable', [table(None, {'b': '', 'a': '', 'c': ''})])
        assert [s.key for s in strings] == ['a', 'b', 'c']

    def test_duplicate_keys_within_locale(self):
        warnings = []
        generator = StringsGenerator(None, warnings.append)
        strings = generator.compute_strings('Localizable', [table('en', {'a.b': 'x', 'aB': 'y'})])

        assert [s.key for s in strings] == ['a.b']
        assert warnings == [
            "Skipping 2 strings in 'Localizable' (en) because symbol 'aB' "
            "would be generated for all of these keys: a.b, aB"
        ]


class TestGenerateStruct:
    """Test cases for StringsGenerator.generate_struct()."""

    def test_struct_shape(self):
        generator = StringsGenerator('en', lambda message: None)
        tables = [
            table('en', {'hello': 'Hello %@', 'title': 'Title'}),
            table('nl', {'hello': 'Hallo %@', 'title': 'Titel'}),
        ]
        struct = generator.generate_struct(tables, ROOT)

        assert struct.name.value == 'string'
        assert [s.name.value for s in struct.structs] == ['localizable']

        text = SwiftPrinter().render(struct)
        assert 'var localizable: localizable { .init(bundle: bundle, locale: bundle.firstPreferredLocale) }' in text
        assert 'func localizable(preferredLanguages: [String]) -> localizable {' in text
        assert 'var hello: RswiftResources.StringResource1<String> {' in text
        assert 'var title: RswiftResources.StringResource {' in text
        assert '/// en translation: Hello %@' in text
        assert '/// Locales: en, nl' in text
        assert 'let locale: Foundation.Locale' in text

    def test_named_params_get_function(self):
        generator = StringsGenerator(None, lambda message: None)
        entry = LocalizedEntry('Hi %@', (FormatParam(FormatSpecifier.STRING, 'name'),))
        tables = [LocalizableStrings('Localizable', LocaleReference.none(), {'hi': entry})]

        text = SwiftPrinter().render(generator.generate_struct(tables, ROOT))
        assert 'func hi(name value1: String) -> String {' in text

    def test_escaped_values(self):
        generator = StringsGenerator(None, lambda message: None)
        text = SwiftPrinter().render(generator.generate_struct([table(None, {'quote': 'Say "hi"\n'})], ROOT))
        assert 'defaultValue: "Say \\"hi\\"\\n"' in text

    def test_duplicate_table_names(self):
        warnings = []
        generator = StringsGenerator(None, warnings.append)
        tables = [table(None, {'a': 'a'}, 'Main-Strings'), table(None, {'b': 'b'}, 'Main.Strings')]
        struct = generator.generate_struct(tables, ROOT)

        assert len(struct.structs) == 1
        assert warnings == [
            "Skipping 2 strings files because symbol 'mainStrings' would be generated "
            "for all of these files: Main-Strings, Main.Strings"
        ]
