"""Primary language selection and translation diagnostics for one table."""

from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.grouping import group_by
from ..core.models import LocalizableStrings, LocaleReference

LocalizedValue = Tuple[LocaleReference, str]


class LocalePolicy:
    """
    Locale resolution for all tables sharing one filename.

    The Base table's keys are authoritative when one exists, otherwise the
    development language table's keys, otherwise every key is accepted.

    Attributes:
        primary_keys: Authoritative key set, None when there is none
        primary_language: 'Base', the development language or None
    """

    def __init__(
        self,
        filename: str,
        tables: Sequence[LocalizableStrings],
        development_language: Optional[str] = None
    ):
        self.filename = filename
        self.tables = list(tables)
        self.development_language = development_language

        bases = [t for t in self.tables if t.locale.is_base]
        developments = [
            t for t in self.tables
            if development_language is not None and t.locale.locale_description == development_language
        ]

        self.primary_keys: Optional[Set[str]]
        self.primary_language: Optional[str]

        if bases:
            self.primary_keys = {key for table in bases for key in table.dictionary}
            self.primary_language = 'Base'
        elif developments:
            self.primary_keys = {key for table in developments for key in table.dictionary}
            self.primary_language = development_language
        else:
            self.primary_keys = None
            self.primary_language = development_language

    def includes(self, key: str) -> bool:
        """Keys outside the primary key set are not generated."""
        return self.primary_keys is None or key in self.primary_keys

    def source_keys(self, all_keys: Iterable[str]) -> Set[str]:
        if self.primary_keys is not None:
            return set(self.primary_keys)
        return set(all_keys)

    def locale_keys(self, locale: LocaleReference) -> Set[str]:
        return {key for t in self.tables if t.locale == locale for key in t.dictionary}

    def missing_keys(self, locale: LocaleReference, all_keys: Iterable[str]) -> List[str]:
        """Sorted keys the locale should translate but does not."""
        return sorted(self.source_keys(all_keys) - self.locale_keys(locale))

    def extra_keys(self, locale: LocaleReference, all_keys: Iterable[str]) -> List[str]:
        """Sorted keys the locale translates but the primary language lacks."""
        return sorted(self.locale_keys(locale) - self.source_keys(all_keys))

    def report_diagnostics(self, all_keys: Iterable[str], warning: Callable[[str], None]) -> None:
        """
        Warn about missing and extra translations per locale.

        Args:
            all_keys: Every key seen in any locale of this table
            warning: Warning sink
        """
        all_keys = set(all_keys)
        locales = list(group_by(self.tables, lambda t: t.locale))

        for locale in locales:
            missing = self.missing_keys(locale, all_keys)
            if missing:
                warning(
                    f"Strings file {locale.debug_description(self.filename)} "
                    f"is missing translations for keys: {_quoted(missing)}"
                )

        for locale in locales:
            extra = self.extra_keys(locale, all_keys)
            if not extra:
                continue
            if self.primary_language is not None:
                warning(
                    f"Strings file {locale.debug_description(self.filename)} has extra translations "
                    f"(not in {self.primary_language}) for keys: {_quoted(extra)}"
                )
            else:
                warning(
                    f"Strings file {locale.debug_description(self.filename)} "
                    f"has extra translations for keys: {_quoted(extra)}"
                )

    def preferred_values(self, values: Sequence[LocalizedValue]) -> List[LocalizedValue]:
        """Base values first, then development language values, then all in input order."""
        bases = [v for v in values if v[0].is_base]
        developments = [
            v for v in values
            if self.development_language is not None and v[0].locale_description == self.development_language
        ]
        return bases + developments + list(values)

    def fallback_value(self, values: Sequence[LocalizedValue]) -> str:
        """Display value of a key, used for comments and default text only."""
        preferred = self.preferred_values(values)
        return preferred[0][1] if preferred else ''


def _quoted(keys: Sequence[str]) -> str:
    return ', '.join(f"'{key}'" for key in keys)
