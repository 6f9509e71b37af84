"""
Naming utilities for generated declarations.

Every emitted symbol name is derived once, up front, by wrapping the
schema name in the configured prefix and suffix. Later stages only look
names up through the resulting maps.
"""

from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .config import GeneratorConfig
from .schema import Datamodel, SchemaConsistencyError


def apply_affixes(name: str, prefix: str = "", suffix: str = "") -> str:
    """Return the emitted name for a schema name."""
    return f"{prefix}{name}{suffix}"


def _build_map(names: Iterable[str], prefix: str, suffix: str) -> Mapping[str, str]:
    return MappingProxyType({name: apply_affixes(name, prefix, suffix) for name in names})


@dataclass(frozen=True)
class NameMaps:
    """Read-only lookups from schema name to emitted name, one per category."""

    enums: Mapping[str, str]
    models: Mapping[str, str]
    types: Mapping[str, str]

    def resolve_enum(self, name: str) -> str:
        """Emitted name of an enum referenced by a field."""
        try:
            return self.enums[name]
        except KeyError:
            raise SchemaConsistencyError(f"Unknown enum name: {name}") from None

    def resolve_relation(self, name: str) -> str:
        """Emitted name of a model, or failing that a composite type."""
        if name in self.models:
            return self.models[name]
        if name in self.types:
            return self.types[name]
        raise SchemaConsistencyError(f"Unknown model/type name: {name}")

    def all_names(self) -> List[Tuple[str, str, str]]:
        """(category, schema name, emitted name) for every known item."""
        names = []
        for category, mapping in (
            ("enum", self.enums),
            ("model", self.models),
            ("type", self.types),
        ):
            names.extend((category, name, emitted) for name, emitted in mapping.items())
        return names


def build_name_maps(datamodel: Datamodel, config: GeneratorConfig) -> NameMaps:
    """Derive the emitted names of all enums, models and composite types."""
    return NameMaps(
        enums=_build_map(
            (e.name for e in datamodel.enums), config.enum_prefix, config.enum_suffix
        ),
        models=_build_map(
            (m.name for m in datamodel.models), config.model_prefix, config.model_suffix
        ),
        types=_build_map(
            (t.name for t in datamodel.types), config.type_prefix, config.type_suffix
        ),
    )


def find_name_collisions(name_maps: NameMaps) -> Dict[str, List[str]]:
    """
    Find emitted names shared by more than one schema item.

    Collisions are reported, never renamed: the generated file would hold
    duplicate declarations for these names.

    Returns:
        Emitted name mapped to the "category:schema name" items producing it
    """
    owners = defaultdict(list)
    for category, name, emitted in name_maps.all_names():
        owners[emitted].append(f"{category}:{name}")

    return {emitted: items for emitted, items in owners.items() if len(items) > 1}
