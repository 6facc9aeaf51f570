"""Hierarchical asset namespaces and their merging."""

from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from .grouping import group_by
from .identifiers import SymbolName, sanitize


@dataclass(frozen=True)
class Namespace:
    """
    One folder of an asset catalog.

    Attributes:
        images: Image records directly in this namespace
        colors: Color records directly in this namespace
        data_assets: Data records directly in this namespace
        subnamespaces: Child namespaces by raw folder name, in input order
    """
    images: Tuple = ()
    colors: Tuple = ()
    data_assets: Tuple = ()
    subnamespaces: Dict[str, 'Namespace'] = field(default_factory=dict)

    def merging(self, other: 'Namespace') -> 'Namespace':
        """
        Merge two namespaces.

        Resource lists are concatenated (self first) so duplicates across
        sources are still caught by grouping later. Same-name children merge
        recursively.
        """
        subnamespaces = dict(self.subnamespaces)
        for name, namespace in other.subnamespaces.items():
            if name in subnamespaces:
                subnamespaces[name] = subnamespaces[name].merging(namespace)
            else:
                subnamespaces[name] = namespace

        return Namespace(
            images=tuple(self.images) + tuple(other.images),
            colors=tuple(self.colors) + tuple(other.colors),
            data_assets=tuple(self.data_assets) + tuple(other.data_assets),
            subnamespaces=subnamespaces,
        )

    def is_empty(self, kind: str) -> bool:
        """True when neither this namespace nor any child holds records of kind."""
        if getattr(self, kind):
            return False
        return all(child.is_empty(kind) for child in self.subnamespaces.values())

    def pruned(self, kind: str) -> 'Namespace':
        """Copy without the children that hold no records of kind."""
        return Namespace(
            images=self.images,
            colors=self.colors,
            data_assets=self.data_assets,
            subnamespaces={
                name: child.pruned(kind)
                for name, child in self.subnamespaces.items()
                if not child.is_empty(kind)
            },
        )


def merge_namespaces(namespaces: Iterable[Namespace]) -> Namespace:
    """Left fold of namespaces through ``merging``, starting empty."""
    return reduce(lambda merged, namespace: merged.merging(namespace), namespaces, Namespace())


class MergedNamespaces:
    """
    Child namespaces keyed by generated identifier.

    Folders whose names sanitize to the same identifier are merged. Folders
    that would clash with a sibling resource identifier are dropped.
    """

    def __init__(self, subnamespaces: Dict[str, Namespace], other_identifiers: Sequence[SymbolName]):
        self.duplicates: List[Tuple[SymbolName, List[str]]] = []
        self.conflicts: List[Tuple[str, SymbolName]] = []
        self.empties: List[str] = []

        by_symbol = group_by(sorted(subnamespaces), sanitize)
        merged: Dict[SymbolName, Namespace] = {}

        for symbol, names in by_symbol.items():
            if symbol.is_empty:
                self.empties.extend(names)
                continue
            if len(names) > 1:
                self.duplicates.append((symbol, names))
            merged[symbol] = merge_namespaces(subnamespaces[name] for name in names)

        for symbol in other_identifiers:
            if symbol in merged:
                del merged[symbol]
                self.conflicts.extend((name, symbol) for name in by_symbol[symbol])

        self.namespaces: List[Tuple[SymbolName, Namespace]] = sorted(
            merged.items(), key=lambda item: item[0].value
        )

    def report_warnings(self, result: str, warning: Callable[[str], None]) -> None:
        for symbol, names in self.duplicates:
            warning(
                f"Merging {len(names)} asset namespaces because symbol '{symbol.value}' "
                f"would be generated for all of these namespaces: {', '.join(names)}"
            )
        for name, symbol in self.conflicts:
            warning(
                f"Skipping asset namespace '{name}' because symbol '{symbol.value}' "
                f"would conflict with {result}: {symbol.value}"
            )
        if self.empties:
            names = ', '.join(f"'{name}'" for name in self.empties)
            warning(
                f"Skipping {len(self.empties)} asset namespaces because no swift identifier "
                f"can be generated for namespaces: {names}"
            )
