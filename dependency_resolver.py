#!python3
"""Dependency and reverse dependency resolution over control paragraphs."""
from dataclasses import asdict, dataclass, field

from deb_control_parser import DebControlParser


class OrderedSet:
    """Insertion ordered set of hashable values."""

    def __init__(self, values=()):
        self._items = {}
        for value in values:
            self.add(value)

    def add(self, value) -> None:
        self._items.setdefault(value, None)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"


@dataclass
class DependencyToken:
    """A dependency name and whether the control file defines it."""

    name: str
    found: bool


@dataclass
class PackageIndex:
    """Everything collected about one queried package in a single scan."""

    summary: str = ""
    description: str = ""
    dependency_tokens: list = field(default_factory=list)
    dependents: list = field(default_factory=list)
    all_names: OrderedSet = field(default_factory=OrderedSet)


@dataclass
class DependencyQueryResult:
    """Details of a package as handed to the presentation layer."""

    summary: str = ""
    description: str = ""
    depends: list = field(default_factory=list)
    dependents: list = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready form of the result."""
        return asdict(self)


class PackageIndexBuilder:
    """Scan every paragraph once for a single package query."""

    def __init__(self, parser=None):
        self._parser = parser or DebControlParser()

    def build(self, paragraphs, package_name: str) -> PackageIndex:
        """Collect fields, dependents and known names for ``package_name``.

        The whole file is scanned. When several paragraphs share the queried
        name, the last of them supplies summary, description and
        dependencies. Every other paragraph whose dependency tokens contain
        the name is reported as a dependent.

        Parameters
        ----------
        paragraphs : iterable of str
            Control paragraphs in file order.
        package_name : str
            Name of the package to look up.

        Returns
        -------
        PackageIndex
            The collected data; empty fields when the name is unknown.
        """
        index = PackageIndex()

        for paragraph in paragraphs:
            record = self._parser.extract_record(paragraph)
            if not record.name:
                continue
            index.all_names.add(record.name)

            if record.name == package_name:
                index.summary = record.summary
                index.description = record.description
                index.dependency_tokens = record.dependency_tokens
                continue

            if package_name in record.dependency_tokens:
                index.dependents.append(record.name)

        return index


class DependencyResolver:
    """Mark each dependency of a package as present or missing."""

    @staticmethod
    def resolve(index: PackageIndex) -> DependencyQueryResult:
        """Build the query result from a package index.

        Dependency tokens are deduplicated in first-occurrence order. The
        ``|`` divider goes through the same lookup as package names.

        Parameters
        ----------
        index : PackageIndex
            Output of ``PackageIndexBuilder.build``.

        Returns
        -------
        DependencyQueryResult
            Summary, description, resolved dependencies and dependents.
        """
        depends = [
            DependencyToken(name=token, found=token in index.all_names)
            for token in OrderedSet(index.dependency_tokens)
        ]
        return DependencyQueryResult(
            summary=index.summary,
            description=index.description,
            depends=depends,
            dependents=list(index.dependents),
        )
