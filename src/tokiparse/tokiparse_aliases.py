"""
Provides the `AliasMapper` class for alternative spellings of toki pona words.

Some words have common variant spellings (``ali`` for ``ale``) and some
writers use their own shorthand. An alias mapper resolves such spellings to a
vocabulary word before classification, without widening the vocabulary itself.

Classes:
    - AliasMapper: Maps alias spellings to vocabulary words.
    - MappingError: Raised when configuration or alias conflicts occur.

Features:
    - Alias groups: a key may be a string, a comma-separated string, or any
      iterable of strings, all mapping to one vocabulary word
    - Detects and reports conflicting aliases
    - Rejects targets outside the vocabulary and aliases that shadow real words
    - Loads mappings from JSON files or from the `TOKIPARSE_ALIASES` environment variable

Usage:
    >>> mapper = AliasMapper.from_defaults()
    >>> mapper.resolve("ali")
    'ale'
"""

import json
import os
from collections.abc import Mapping
from typing import Any

from tokiparse.tokiparse_constants import ALIASES_ENV_VAR
from tokiparse.tokiparse_word import word_hashmap

DEFAULT_ALIASES: dict[str, str] = {"ali": "ale"}


class MappingError(Exception):
    """Raised when an alias configuration is invalid or contains conflicts.

    Attributes:
        conflicts (list[str]): Human-readable descriptions of each conflicting alias.

    Example:
        raise MappingError("Alias collision(s) detected", ["'ali' → ale vs ala"])
    """

    def __init__(self, message: str, conflicts: list[str] | None = None):
        super().__init__(message)
        self.conflicts = conflicts or []


class AliasMapper:
    """Manages alias-to-word mappings.

    Attributes:
        alias_map (dict[str, str]): Maps lower-case alias spellings to vocabulary words.
    """

    def __init__(self) -> None:
        self.alias_map: dict[str, str] = {}

    def resolve(self, alias: str) -> str | None:
        """Returns the vocabulary spelling for an alias, or None if unknown."""
        return self.alias_map.get(alias.lower())

    def report(self) -> str:
        """Returns one ``alias → word`` line per configured alias, sorted."""
        return "\n".join(
            f"{alias:>12} → {word}" for alias, word in sorted(self.alias_map.items())
        )

    def summary(self) -> dict[str, str]:
        return dict(self.alias_map)

    def _extract_aliases(self, entry: Any) -> list[str]:
        """Flattens a configuration key into a list of alias spellings.

        Strings are split on commas; lists, tuples and sets are walked recursively.
        """
        if isinstance(entry, str):
            return [a.strip().lower() for a in entry.split(",") if a.strip()]
        if isinstance(entry, (list, tuple, set, frozenset)):
            aliases: list[str] = []
            for item in entry:
                aliases.extend(self._extract_aliases(item))
            return aliases
        return []

    @classmethod
    def from_defaults(cls) -> "AliasMapper":
        """Constructs a mapper preloaded with `DEFAULT_ALIASES`."""
        instance = cls()
        instance.configure(DEFAULT_ALIASES)
        return instance

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AliasMapper":
        """Constructs a default mapper, extended from the JSON file named by
        `TOKIPARSE_ALIASES` when that variable is set.

        Raises:
            MappingError: If the file cannot be loaded or is invalid.
        """
        env = os.environ if environ is None else environ
        instance = cls.from_defaults()
        path = env.get(ALIASES_ENV_VAR)
        if path:
            instance.load_from_json(path)
        return instance

    def load_from_json(self, path: str) -> None:
        """Loads alias mappings from a JSON file and applies them via `configure`.

        Example JSON structure:
            {
                "ali": "ale",
                "nimisin,sinsin": "sin"
            }

        Raises:
            MappingError: If the file cannot be loaded or the configuration is invalid.
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw_cfg = json.load(f)
        except (OSError, ValueError) as e:
            raise MappingError(f"Failed to load alias file: {e}") from e
        if not isinstance(raw_cfg, dict):
            raise MappingError("Alias file must contain a JSON object")
        self.configure(raw_cfg)

    def configure(self, cfg: dict[Any, str]) -> None:
        """Applies alias groups to the mapper.

        Args:
            cfg: Maps alias groups (str, comma-separated str, list, tuple, set)
                to a vocabulary word.

        Raises:
            MappingError: If any of the following occur:
                - The configuration is not a dict
                - A target word is not in the vocabulary
                - An alias is itself a vocabulary word
                - An alias maps to more than one word
            Nothing is applied when an error is raised.
        """
        if not isinstance(cfg, dict):
            raise MappingError("Configuration must be a dict")

        new_alias_map: dict[str, str] = {}
        conflicts: list[str] = []

        for alias_group, target in cfg.items():
            word = str(target).strip().lower()
            if word not in word_hashmap:
                raise MappingError(f"Unknown vocabulary word: {target}")
            for alias in self._extract_aliases(alias_group):
                if alias in word_hashmap:
                    conflicts.append(f"'{alias}' → shadows the vocabulary word")
                    continue
                existing = new_alias_map.get(alias) or self.alias_map.get(alias)
                if existing is not None and existing != word:
                    conflicts.append(
                        f"'{alias}' → conflict between {existing} and {word}"
                    )
                else:
                    new_alias_map[alias] = word

        if conflicts:
            raise MappingError("Alias collision(s) detected", conflicts)

        self.alias_map.update(new_alias_map)


__all__ = ["DEFAULT_ALIASES", "AliasMapper", "MappingError"]
