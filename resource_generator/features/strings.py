"""Typed accessors for localization tables."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..core.code_model import (
    BUNDLE,
    INIT_BUNDLE,
    INIT_BUNDLE_LOCALE,
    LOCALE,
    RSWIFT_RESOURCES,
    STRING,
    STRING_ARRAY,
    Function,
    FunctionParameter,
    Struct,
    TypeReference,
    VarGetter,
)
from ..core.grouping import group_by, group_by_identifier
from ..core.identifiers import SymbolName, sanitize
from ..core.models import FormatParam, LocalizableStrings, LocaleReference
from ..frameworks.swift import comment_string, escape_string_literal
from .formats import has_unresolved_params, unify_all
from .locales import LocalePolicy, LocalizedValue

WarningSink = Callable[[str], None]


@dataclass(frozen=True)
class LocalizedString:
    """A key that survived format unification, with its values per locale."""
    key: str
    params: Tuple[FormatParam, ...]
    table_name: str
    values: Tuple[LocalizedValue, ...]
    fallback_value: str
    preferred: Tuple[LocalizedValue, ...]

    @property
    def symbol(self) -> SymbolName:
        return sanitize(self.key)

    @property
    def type_reference(self) -> TypeReference:
        name = f"StringResource{len(self.params)}" if self.params else 'StringResource'
        return TypeReference(
            name=name,
            module=RSWIFT_RESOURCES,
            generic_args=tuple(p.spec.type_reference for p in self.params),
        )

    @property
    def has_named_params(self) -> bool:
        return any(p.name is not None for p in self.params)

    @property
    def comments(self) -> Tuple[str, ...]:
        results = []

        if self.preferred:
            locale, value = self.preferred[0]
            if locale.locale_description is not None:
                results.append(comment_string(f"{locale.locale_description} translation: {value}"))
            else:
                results.append(comment_string(f"Value: {value}"))

        if results:
            results.append('')
        results.append(comment_string(f"Key: {self.key}"))

        if not any(locale.is_none for locale, _ in self.values):
            results.append('')
            locales = [locale.locale_description for locale, _ in self.values]
            results.append(f"Locales: {', '.join(locales)}")

        return tuple(results)

    def var_getter(self) -> VarGetter:
        code = (
            f'.init(key: "{escape_string_literal(self.key)}", '
            f'tableName: "{escape_string_literal(self.table_name)}", bundle: bundle, locale: locale, '
            f'defaultValue: "{escape_string_literal(self.fallback_value)}", comment: nil)'
        )
        return VarGetter(
            name=self.symbol,
            type_reference=self.type_reference,
            value_code=code,
            comments=self.comments,
        )

    def function(self) -> Function:
        params = tuple(
            FunctionParameter(
                name=p.name or '_',
                local_name=f"value{index + 1}",
                type_reference=p.spec.type_reference,
            )
            for index, p in enumerate(self.params)
        )
        args = ['format: format', 'locale: locale'] + [f"value{index + 1}" for index in range(len(self.params))]
        body = (
            f'let format = NSLocalizedString("{escape_string_literal(self.key)}", '
            f'tableName: "{escape_string_literal(self.table_name)}", bundle: bundle, '
            f'value: "{escape_string_literal(self.fallback_value)}", comment: "")\n'
            f"return String({', '.join(args)})"
        )
        return Function(
            name=self.symbol,
            params=params,
            return_type=STRING,
            body=body,
            comments=self.comments,
        )


class StringsGenerator:
    """
    Build the ``string`` struct for all localization tables of a project.

    Tables are grouped by filename. Per table, keys are checked per locale
    for consecutive format specifiers and then unified across locales; keys
    that fail either step are skipped in every locale.
    """

    def __init__(self, development_language: Optional[str], warning: WarningSink):
        self.development_language = development_language
        self.warning = warning

    def generate_struct(self, tables: Sequence[LocalizableStrings], prefix: SymbolName) -> Struct:
        struct_name = sanitize('string', lowercase_leading=False)
        qualified_name = prefix + struct_name

        by_filename = list(group_by(tables, lambda t: t.filename).items())
        grouped = group_by_identifier(by_filename, lambda item: item[0])
        grouped.report_warnings('strings file', 'file', self.warning)

        members: List = [INIT_BUNDLE]
        for symbol, (filename, _) in grouped.uniques:
            members.extend(self._table_accessors(symbol, filename))

        for _, (filename, resources) in grouped.uniques:
            members.append(self._table_struct(filename, resources, qualified_name))

        comments = (
            f"This `{qualified_name.value}` struct is generated, and contains static references "
            f"to {len(grouped.uniques)} localization tables.",
        )
        return Struct(
            name=struct_name,
            members=tuple(members),
            comments=comments,
            module_references=(RSWIFT_RESOURCES,),
        )

    def _table_accessors(self, symbol: SymbolName, table_name: str) -> List:
        table_type = TypeReference(symbol.value)
        preferred_languages_body = (
            f'let (bundle, locale) = bundle.firstBundleAndLocale(tableName: "{escape_string_literal(table_name)}", '
            f'preferredLanguages: preferredLanguages) ?? (bundle, bundle.firstPreferredLocale)\n'
            f'return .init(bundle: bundle, locale: locale)'
        )
        return [
            VarGetter(
                name=symbol,
                type_reference=table_type,
                value_code='.init(bundle: bundle, locale: bundle.firstPreferredLocale)',
            ),
            Function(
                name=symbol,
                params=(FunctionParameter('bundle', BUNDLE), FunctionParameter('locale', LOCALE)),
                return_type=table_type,
                body='.init(bundle: bundle, locale: locale)',
            ),
            Function(
                name=symbol,
                params=(FunctionParameter('preferredLanguages', STRING_ARRAY),),
                return_type=table_type,
                body=preferred_languages_body,
            ),
        ]

    def _table_struct(self, filename: str, tables: Sequence[LocalizableStrings], prefix: SymbolName) -> Struct:
        struct_name = sanitize(filename)
        qualified_name = prefix + struct_name

        strings = self.compute_strings(filename, tables)

        # A key can still clash with a differently spelled key of another locale
        grouped = group_by_identifier(strings, lambda s: s.key)
        grouped.report_warnings('string', 'key', self.warning, container=f"in '{filename}'")

        var_getters = [s.var_getter() for s in grouped.items]
        functions = [s.function() for s in grouped.items if s.has_named_params]

        comments = (
            f"This `{qualified_name.value}` struct is generated, and contains static references "
            f"to {len(var_getters)} localization keys.",
        )
        return Struct(
            name=struct_name,
            members=(INIT_BUNDLE_LOCALE, *var_getters, *functions),
            comments=comments,
        )

    def compute_strings(self, filename: str, tables: Sequence[LocalizableStrings]) -> List[LocalizedString]:
        """
        Resolve the keys of one table across its locales.

        Args:
            filename: Table name
            tables: One table per locale

        Returns:
            Keys with a unified signature, sorted by key
        """
        policy = LocalePolicy(filename, tables, self.development_language)
        all_params: Dict[str, List[Tuple[LocaleReference, str, Tuple[FormatParam, ...]]]] = {}

        for table in tables:
            grouped = group_by_identifier(list(table.dictionary), lambda key: key)
            grouped.report_warnings(
                'string', 'key', self.warning,
                container=f"in {table.locale.debug_description(filename)}",
            )

            for key in grouped.items:
                entry = table.dictionary[key]
                all_params.setdefault(key, []).append((table.locale, entry.original_value, tuple(entry.params)))

        policy.report_diagnostics({key for table in tables for key in table.dictionary}, self.warning)

        results = []
        mismatched_keys = []

        for key in sorted(k for k in all_params if policy.includes(k)):
            key_params = all_params[key]

            non_consecutive = [locale for locale, _, params in key_params if has_unresolved_params(params)]
            for locale in non_consecutive:
                self.warning(
                    f"Skipping string {key} in {locale.debug_description(filename)}, "
                    f"not all format specifiers are consecutive"
                )
            if non_consecutive:
                continue

            unified = unify_all([params for _, _, params in key_params])
            if unified is None:
                mismatched_keys.append(key)
                continue

            values = tuple((locale, value) for locale, value, _ in key_params)
            results.append(LocalizedString(
                key=key,
                params=tuple(unified),
                table_name=filename,
                values=values,
                fallback_value=policy.fallback_value(values),
                preferred=tuple(policy.preferred_values(values)),
            ))

        for key in mismatched_keys:
            locales = ', '.join(
                locale.locale_description
                for locale, _, _ in all_params[key]
                if locale.locale_description is not None
            )
            self.warning(
                f"Skipping string for key {key} ({filename}), "
                f"format specifiers don't match for all locales: {locales}"
            )

        return results
