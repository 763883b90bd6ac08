"""Theme model: definitions as authored and their compiled runtime form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from theme_cascade.model.diagnostic import Diagnostic
from theme_cascade.model.override import CompiledOverride

PROP_MAP_KEYS = ("variant", "size", "color")


@dataclass(frozen=True)
class PropClassMaps:
    """Lookup tables projecting semantic props onto class names."""

    variant: dict[str, str] = field(default_factory=dict)
    size: dict[str, str] = field(default_factory=dict)
    color: dict[str, str] = field(default_factory=dict)

    def lookup(self, prop: str, value: object) -> str | None:
        """Return the class name for ``prop=value``, or None if unmapped."""
        if prop not in PROP_MAP_KEYS or not isinstance(value, str):
            return None
        return getattr(self, prop).get(value) or None

    def merged_with(self, other: PropClassMaps | None) -> PropClassMaps:
        """Overlay *other* table-by-table; a non-empty table replaces ours."""
        if other is None:
            return self
        return PropClassMaps(
            variant=other.variant or self.variant,
            size=other.size or self.size,
            color=other.color or self.color,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> PropClassMaps:
        if not data:
            return cls()
        tables: dict[str, dict[str, str]] = {}
        for key in PROP_MAP_KEYS:
            table = data.get(key)
            if isinstance(table, Mapping):
                tables[key] = {str(k): str(v) for k, v in table.items()}
        return cls(**tables)


DEFAULT_PROP_MAPS = PropClassMaps(
    variant={
        "solid": "variant-solid",
        "outline": "variant-outline",
        "ghost": "variant-ghost",
        "soft": "variant-soft",
        "link": "variant-link",
    },
    size={
        "xs": "text-xs px-2 py-1",
        "sm": "text-sm px-3 py-1.5",
        "md": "text-base px-4 py-2",
        "lg": "text-lg px-5 py-2.5",
        "xl": "text-xl px-6 py-3",
    },
    color={
        "primary": "text-primary-600 bg-primary-50 border-primary-300",
        "secondary": "text-secondary-600 bg-secondary-50 border-secondary-300",
        "success": "text-green-600 bg-green-50 border-green-300",
        "error": "text-red-600 bg-red-50 border-red-300",
        "warning": "text-yellow-600 bg-yellow-50 border-yellow-300",
        "info": "text-blue-600 bg-blue-50 border-blue-300",
    },
)


@dataclass(frozen=True)
class ThemeDefinition:
    """Author-facing theme: a name plus selector-keyed overrides.

    ``overrides`` values are expected to be property mappings; anything else
    is reported by validation rather than rejected here.
    """

    name: str
    overrides: dict[str, Any] = field(default_factory=dict)
    prop_maps: dict[str, Any] | None = None
    display_name: str = ""
    description: str = ""
    is_default: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThemeDefinition:
        """Build a definition from a decoded JSON object (camelCase keys)."""
        overrides = data.get("overrides") or {}
        prop_maps = data.get("propMaps", data.get("prop_maps"))
        return cls(
            name=str(data.get("name", "")),
            overrides=dict(overrides) if isinstance(overrides, Mapping) else {},
            prop_maps=dict(prop_maps) if isinstance(prop_maps, Mapping) else prop_maps,
            display_name=str(data.get("displayName", data.get("display_name", ""))),
            description=str(data.get("description", "")),
            is_default=bool(data.get("isDefault", data.get("is_default", False))),
        )


@dataclass(frozen=True)
class CompiledTheme:
    """Runtime form of a theme: overrides sorted by descending specificity."""

    name: str
    overrides: tuple[CompiledOverride, ...] = ()
    prop_maps: PropClassMaps = DEFAULT_PROP_MAPS
    display_name: str = ""
    description: str = ""
    is_default: bool = False


@dataclass(frozen=True)
class ThemeCompilationResult:
    """Outcome of compiling one theme definition."""

    name: str
    theme: CompiledTheme | None
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.theme is not None and not self.errors
