"""Fixture file loading.

Fixture files are read from a directory and keyed by base file name with the
suffix stripped (``widgets.json`` -> ``"widgets"``). Each suffix maps to a
loader function in a ``FixtureLoaderRegistry``:

- ``.json``: parsed as JSON.
- ``.py``: executed as a module from its path. The module defines either
  ``FIXTURES`` or a zero-argument ``fixtures()`` callable, so fixture files
  can carry comments and computed values.

Loading is synchronous and blocks the calling thread. Call it from test
setup, not from inside a running event loop that other work shares.

Usage:
    from fixture_testkit.infrastructure.fixtures import load_fixtures

    fixtures = load_fixtures("tests/fixtures")
    fixtures["widgets"]  # document or list of documents
"""

import importlib.util
import json
import sys
from collections.abc import Callable, Iterator, MutableMapping
from os import PathLike
from pathlib import Path
from typing import Any

from fixture_testkit.core.constants import (
    FIXTURE_MODULE_ATTRIBUTE,
    FIXTURE_MODULE_FACTORY,
)
from fixture_testkit.core.errors import (
    FixtureModuleError,
    UnsupportedFixtureFormatError,
)

FixtureLoader = Callable[[Path], Any]
"""Reads one fixture file and returns its document(s)."""

_SKIPPED_NAMES = frozenset({"__init__.py", "__pycache__"})


def load_json_fixture(path: Path) -> Any:
    """Parse a JSON fixture file."""
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def load_python_fixture(path: Path) -> Any:
    """Execute a Python fixture module and return its documents.

    The module is executed fresh on every call, so callers always receive
    new objects they are free to mutate.

    Args:
        path: Path to the ``.py`` fixture file.

    Returns:
        Value of ``FIXTURES``, or the result of calling ``fixtures()``.

    Raises:
        FixtureModuleError: If the module defines neither name.
    """
    module_name = f"fixture_testkit_fixtures.{path.parent.name}.{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise FixtureModuleError(path)

    module = importlib.util.module_from_spec(spec)
    # visible in sys.modules only while executing
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    finally:
        sys.modules.pop(module_name, None)

    if hasattr(module, FIXTURE_MODULE_ATTRIBUTE):
        return getattr(module, FIXTURE_MODULE_ATTRIBUTE)

    factory = getattr(module, FIXTURE_MODULE_FACTORY, None)
    if callable(factory):
        return factory()

    raise FixtureModuleError(path)


class FixtureLoaderRegistry(MutableMapping[str, FixtureLoader]):
    """Mapping from file suffix (``".json"``) to loader function.

    Suffixes are matched case-insensitively.

    Example:
        >>> registry = FixtureLoaderRegistry.default()
        >>> registry[".txt"] = lambda path: path.read_text().splitlines()
    """

    def __init__(self, loaders: dict[str, FixtureLoader] | None = None) -> None:
        self._loaders: dict[str, FixtureLoader] = {}
        for suffix, loader in (loaders or {}).items():
            self[suffix] = loader

    @classmethod
    def default(cls) -> "FixtureLoaderRegistry":
        """Registry with the built-in JSON and Python loaders."""
        return cls({".json": load_json_fixture, ".py": load_python_fixture})

    @staticmethod
    def _key(suffix: str) -> str:
        suffix = suffix.lower()
        return suffix if suffix.startswith(".") else f".{suffix}"

    def __getitem__(self, suffix: str) -> FixtureLoader:
        return self._loaders[self._key(suffix)]

    def __setitem__(self, suffix: str, loader: FixtureLoader) -> None:
        self._loaders[self._key(suffix)] = loader

    def __delitem__(self, suffix: str) -> None:
        del self._loaders[self._key(suffix)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._loaders)

    def __len__(self) -> int:
        return len(self._loaders)

    def load(self, path: Path) -> Any:
        """Load one fixture file with the loader registered for its suffix.

        Raises:
            UnsupportedFixtureFormatError: If no loader matches the suffix.
        """
        try:
            loader = self[path.suffix]
        except KeyError:
            raise UnsupportedFixtureFormatError(path) from None
        return loader(path)


def _fixture_files(directory: Path) -> list[Path]:
    return [
        entry
        for entry in sorted(directory.iterdir())
        if entry.is_file()
        and entry.name not in _SKIPPED_NAMES
        and not entry.name.startswith(".")
    ]


def load_fixtures(
    directory: str | PathLike[str],
    registry: FixtureLoaderRegistry | None = None,
) -> dict[str, Any]:
    """Load every fixture file in a directory, keyed by base file name.

    Errors from the filesystem (missing or unreadable directory) and from
    loaders (malformed JSON, a failing module) propagate unchanged.

    Args:
        directory: Directory holding the fixture files.
        registry: Suffix-to-loader mapping (defaults to JSON + Python).

    Returns:
        dict: ``{file stem: document or list of documents}``.
    """
    registry = registry if registry is not None else FixtureLoaderRegistry.default()
    return {
        path.stem: registry.load(path) for path in _fixture_files(Path(directory))
    }
