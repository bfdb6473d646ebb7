"""Core data models for nodemanifest."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _read_only(values: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Wrap a private copy of values in a read-only view."""
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class Engines:
    """Runtime constraints declared under ``engines``."""

    node: str = ""


@dataclass(frozen=True)
class PackageJson:
    """A parsed package.json manifest.

    The dependency and script collections are read-only views: item
    assignment and deletion raise TypeError, and the view has no mutating
    methods at all. ``PackageJson()`` is a valid empty manifest.
    """

    dependencies: Mapping[str, str] = field(default_factory=_read_only)
    dev_dependencies: Mapping[str, str] = field(default_factory=_read_only)
    scripts: Mapping[str, str] = field(default_factory=_read_only)
    engines: Engines = field(default_factory=Engines)
    main: str = ""
    package_manager: str | None = None  # None means not declared

    def __post_init__(self):
        # Callers may hand in plain dicts; never keep a reference to them.
        for name in ("dependencies", "dev_dependencies", "scripts"):
            object.__setattr__(self, name, _read_only(getattr(self, name)))

    def find_dependency(self, name: str) -> str | None:
        """Return the version spec of a package from either dependency section."""
        version = self.dependencies.get(name)
        if version is None:
            version = self.dev_dependencies.get(name)
        return version

    def has_script(self, name: str) -> bool:
        return name in self.scripts
