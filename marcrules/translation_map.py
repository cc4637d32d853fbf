"""Controlled-vocabulary translation maps.

A translation map normalizes extracted values, for example turning MARC
language codes into language names. Maps are looked up by name on a
search path, or built directly from a dict.

Map files
---------
- ``<name>.yaml`` / ``<name>.yml``: a YAML mapping, loaded with PyYAML
- ``<name>.properties``: ``key = value`` lines, ``#`` or ``!`` comments

Special keys
------------
- ``__default__``: value returned for keys the map does not contain
- ``__default__: __passthrough__``: unknown keys are returned unchanged

Without a default, unknown keys translate to nothing and are dropped.

Examples
--------
>>> languages = TranslationMap("marc_languages")
>>> languages["eng"]
'English'
>>> values = ["eng", "xxx", "fre"]
>>> languages.translate_in_place(values)
>>> values
['English', 'French']
"""

import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import yaml

from .errors import ConfigurationError, TranslationMapNotFound

logger = logging.getLogger(__name__)

__all__ = ["TranslationMap", "DEFAULT_KEY", "PASSTHROUGH", "MAP_PATH_ENV"]

DEFAULT_KEY = "__default__"
PASSTHROUGH = "__passthrough__"
MAP_PATH_ENV = "MARCRULES_TRANSLATION_MAPS"

_BUNDLED_MAPS = Path(__file__).parent / "translation_maps"
_EXTENSIONS = (".yaml", ".yml", ".properties")
_UNSET = object()


def _parse_properties(text: str) -> Dict[str, str]:
    """Parse Java-style ``key = value`` / ``key: value`` lines."""
    result = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line[0] in "#!":
            continue
        positions = [p for p in (line.find("="), line.find(":")) if p >= 0]
        if not positions:
            result[line] = ""
            continue
        split_at = min(positions)
        result[line[:split_at].strip()] = line[split_at + 1:].strip()
    return result


def _load_file(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".properties":
        return _parse_properties(text)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Translation map {path} is not valid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Translation map {path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return {str(k): v for k, v in data.items()}


class TranslationMap:
    """A read-only lookup table with a configurable miss policy.

    Args:
        source: A map name to resolve on the search path, a mapping, or
            another TranslationMap.
        default: Value for keys the map lacks; overrides any ``__default__``
            entry in the source. ``PASSTHROUGH`` returns the key itself.

    Raises:
        TranslationMapNotFound: If ``source`` names a map that is not on
            the search path.
        ConfigurationError: If a map file cannot be parsed.
    """

    _cache: Dict[str, Dict[str, Any]] = {}
    _cache_lock = threading.Lock()

    def __init__(self, source: Union[str, Mapping, "TranslationMap"], default: Any = _UNSET):
        if isinstance(source, TranslationMap):
            self.name = source.name
            table = dict(source._table)
            if source._default is not _UNSET:
                table[DEFAULT_KEY] = source._default
        elif isinstance(source, Mapping):
            self.name = None
            table = {str(k): v for k, v in source.items()}
        elif isinstance(source, str):
            self.name = source
            table = dict(self._load(source))
        else:
            raise ConfigurationError(
                f"Translation map must be a name or a mapping, got {type(source).__name__}"
            )

        if default is _UNSET:
            default = table.pop(DEFAULT_KEY, _UNSET)
        else:
            table.pop(DEFAULT_KEY, None)
        self._table = table
        self._default = default

    def __repr__(self) -> str:
        label = repr(self.name) if self.name else f"<{len(self._table)} entries>"
        return f"TranslationMap({label})"

    # -- search path and loading ------------------------------------------

    @staticmethod
    def search_paths() -> List[Path]:
        """Directories searched for named maps, in priority order."""
        paths = [Path(p) for p in os.environ.get(MAP_PATH_ENV, "").split(os.pathsep) if p]
        paths.append(Path.cwd() / "translation_maps")
        paths.append(_BUNDLED_MAPS)
        return paths

    @classmethod
    def find(cls, name: str) -> Path:
        """Return the file a map name resolves to.

        Raises:
            TranslationMapNotFound: If no directory on the search path holds
                a file for ``name``.
        """
        if not name or os.sep in name or (os.altsep and os.altsep in name):
            raise TranslationMapNotFound(f"Invalid translation map name {name!r}")

        searched = cls.search_paths()
        for directory in searched:
            for extension in _EXTENSIONS:
                candidate = directory / f"{name}{extension}"
                if candidate.is_file():
                    return candidate
        raise TranslationMapNotFound(
            f"No translation map named '{name}'. Looked for "
            f"{', '.join(name + ext for ext in _EXTENSIONS)} in: "
            f"{', '.join(str(d) for d in searched)}"
        )

    @classmethod
    def _load(cls, name: str) -> Dict[str, Any]:
        path = cls.find(name)
        key = str(path.resolve())
        with cls._cache_lock:
            table = cls._cache.get(key)
            if table is None:
                table = _load_file(path)
                logger.debug("Loaded translation map %r from %s (%d entries)",
                             name, path, len(table))
                cls._cache[key] = table
        return table

    @classmethod
    def clear_cache(cls) -> None:
        """Forget every map file loaded so far."""
        with cls._cache_lock:
            cls._cache.clear()

    # -- lookup -----------------------------------------------------------

    @property
    def default(self) -> Any:
        """The miss value, or ``None`` when misses are dropped."""
        return None if self._default is _UNSET else self._default

    def lookup(self, key: str) -> Any:
        """Translate one key, applying the miss policy.

        Returns ``None`` when the key is unknown and the map has no default.
        """
        if key in self._table:
            return self._table[key]
        if self._default is _UNSET:
            return None
        if self._default == PASSTHROUGH:
            return key
        return self._default

    def __getitem__(self, key: str) -> Any:
        return self.lookup(key)

    def __contains__(self, key: str) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def to_dict(self) -> Dict[str, Any]:
        """Return a copy of the entries, with the default under ``__default__``."""
        result = dict(self._table)
        if self._default is not _UNSET:
            result[DEFAULT_KEY] = self._default
        return result

    def translate_array(self, values: Iterable[str]) -> List[str]:
        """Translate every value, keeping order.

        List-valued entries expand in place; dropped values leave no gap.
        """
        result = []
        for value in values:
            translated = self.lookup(value)
            if translated is None:
                continue
            if isinstance(translated, (list, tuple)):
                result.extend(str(v) for v in translated if v is not None)
            else:
                result.append(str(translated))
        return result

    def translate_in_place(self, values: List[str]) -> None:
        """Replace the contents of ``values`` with their translations."""
        values[:] = self.translate_array(values)


def resolve(source: Optional[Union[str, Mapping, TranslationMap]]) -> Optional[TranslationMap]:
    """Return a TranslationMap for ``source``, reusing one that is already built."""
    if source is None or isinstance(source, TranslationMap):
        return source
    return TranslationMap(source)
