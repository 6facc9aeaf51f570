"""Grouping of resources by generated identifier and conflict reporting."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from .identifiers import SymbolName, sanitize

T = TypeVar('T')
K = TypeVar('K', bound=Hashable)

WarningSink = Callable[[str], None]


def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> Dict[K, List[T]]:
    """Bucket items by key, buckets and their contents keep first-seen order."""
    groups: Dict[K, List[T]] = {}
    for item in items:
        groups.setdefault(key_fn(item), []).append(item)
    return groups


@dataclass
class IdentifierGroups(Generic[T]):
    """
    Items grouped by the identifier their key sanitizes to.

    Attributes:
        uniques: First item for every identifier, in first-seen order
        duplicates: Identifiers generated by more than one distinct raw key,
            with the sorted raw keys
        empties: Raw keys that produce no identifier at all
        collapsed: Number of items dropped behind a unique representative
    """
    uniques: List[Tuple[SymbolName, T]] = field(default_factory=list)
    duplicates: List[Tuple[SymbolName, List[str]]] = field(default_factory=list)
    empties: List[str] = field(default_factory=list)
    collapsed: int = 0

    @property
    def items(self) -> List[T]:
        return [item for _, item in self.uniques]

    @property
    def symbols(self) -> List[SymbolName]:
        return [symbol for symbol, _ in self.uniques]

    def report_warnings(
        self,
        source: str,
        result: str,
        warning: WarningSink,
        container: Optional[str] = None
    ) -> None:
        """
        Report duplicates and empties to a warning sink.

        Args:
            source: What is skipped, e.g. 'image' or 'strings file'
            result: What would have been generated, e.g. 'image' or 'key'
            warning: Warning sink
            container: Optional location, e.g. "in 'Localizable' (nl)"
        """
        location = f"{container} " if container else ''

        for symbol, names in self.duplicates:
            warning(
                f"Skipping {len(names)} {source}s {location}because symbol '{symbol.value}' "
                f"would be generated for all of these {result}s: {', '.join(names)}"
            )

        if self.empties:
            count = len(self.empties)
            names = ', '.join(sorted(f"'{name}'" for name in self.empties))
            sources = source if count == 1 else f"{source}s"
            results = result if count == 1 else f"{result}s"
            warning(
                f"Skipping {count} {sources} {location}because no swift identifier "
                f"can be generated for {results}: {names}"
            )


def group_by_identifier(
    items: Iterable[T],
    key_fn: Callable[[T], str],
    lowercase_leading: bool = True
) -> IdentifierGroups[T]:
    """
    Group items by the identifier of their key.

    Every bucket keeps its first item. A bucket reached from more than one
    distinct raw key is a duplicate; identical raw keys collapse silently.

    Args:
        items: Items in input order
        key_fn: Raw name of an item
        lowercase_leading: Passed to the sanitizer

    Returns:
        IdentifierGroups
    """
    groups: IdentifierGroups[T] = IdentifierGroups()
    buckets = group_by(items, lambda item: sanitize(key_fn(item), lowercase_leading))

    for symbol, bucket in buckets.items():
        if symbol.is_empty:
            groups.empties.extend(key_fn(item) for item in bucket)
            continue

        groups.uniques.append((symbol, bucket[0]))
        groups.collapsed += len(bucket) - 1

        names = list(dict.fromkeys(key_fn(item) for item in bucket))
        if len(names) > 1:
            groups.duplicates.append((symbol, sorted(names)))

    return groups
