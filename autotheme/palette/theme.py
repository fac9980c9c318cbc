from __future__ import annotations
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from ..colors.oklch import OKLCHColor
from ..types.color_type import ColorType, ColorTypeLike, to_color_type
from ..types.theme_types import ROLES, ShadeLike, shade_index, to_role, to_shade

Palette = Dict[str, str]

# Wire names, in field-declaration order
COLOR_TYPE_FIELD = "colorType"
BASE_COLOR_FIELD = "baseColor"


class Theme:
    """
    A generated palette set: the output color type, the base color and one
    shade -> color palette per role.

    Themes are immutable. Regenerating (another output type, another shade
    range) returns a new instance; see :meth:`convert_to` and
    :meth:`with_shade_range`.

    Every color string in a theme uses :attr:`color_type`.
    """
    __slots__ = ('_color_type', '_base_color', '_palettes', '_base', '_canonical', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        color_type: ColorTypeLike,
        base_color: str,
        palettes: Mapping[str, Mapping[str, str]],
        base: OKLCHColor,
        canonical: Optional[Mapping[str, Mapping[str, OKLCHColor]]] = None,
    ) -> None:
        unknown = set(palettes) - set(ROLES)
        if unknown:
            raise ValueError(f"Unknown roles: {sorted(unknown)}")

        self._color_type = to_color_type(color_type)
        self._base_color = base_color
        self._base = base
        self._palettes = {
            role: MappingProxyType(self._ordered(palettes.get(role, {})))
            for role in ROLES
        }
        canonical = canonical or {}
        self._canonical = {
            role: MappingProxyType(self._ordered(canonical.get(role, {})))
            for role in ROLES
        }

        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _ordered(shades: Mapping[str, Any]) -> Dict[str, Any]:
        """Copy a shade mapping with keys validated and sorted by shade order."""
        items = [(to_shade(k), v) for k, v in shades.items()]
        return dict(sorted(items, key=lambda kv: shade_index(kv[0])))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def color_type(self) -> ColorType:
        return self._color_type

    @property
    def base_color(self) -> str:
        return self._base_color

    @property
    def base(self) -> OKLCHColor:
        """The canonical base color the theme was generated from."""
        return self._base

    @property
    def primary(self) -> Mapping[str, str]:
        return self._palettes["primary"]

    @property
    def secondary(self) -> Mapping[str, str]:
        return self._palettes["secondary"]

    @property
    def tertiary(self) -> Mapping[str, str]:
        return self._palettes["tertiary"]

    @property
    def accent(self) -> Mapping[str, str]:
        return self._palettes["accent"]

    @property
    def neutral(self) -> Mapping[str, str]:
        return self._palettes["neutral"]

    @property
    def shades(self) -> Tuple[str, ...]:
        """Shade labels present in the theme, lightest first."""
        present = {shade for palette in self._palettes.values() for shade in palette}
        return tuple(sorted(present, key=shade_index))

    def palette(self, role: str) -> Mapping[str, str]:
        return self._palettes[to_role(role)]

    def canonical(self, role: str, shade: ShadeLike) -> OKLCHColor:
        """The unrounded canonical color behind ``palette(role)[shade]``."""
        return self._canonical[to_role(role)][to_shade(shade)]

    def fields(self) -> Iterator[Tuple[str, Any]]:
        """``(wire name, value)`` pairs in field-declaration order."""
        yield COLOR_TYPE_FIELD, self._color_type.value
        yield BASE_COLOR_FIELD, self._base_color
        for role in ROLES:
            yield role, self._palettes[role]

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict keyed by wire names."""
        return {
            key: dict(value) if isinstance(value, Mapping) else value
            for key, value in self.fields()
        }

    # ------------------ REGENERATION ------------------
    def convert_to(self, color_type: ColorTypeLike) -> Theme:
        """Regenerate this theme with every color rendered as ``color_type``."""
        from .generator import regenerate_theme
        return regenerate_theme(self, output_type=color_type)

    def with_shade_range(self, min_shade: ShadeLike, max_shade: ShadeLike) -> Theme:
        """Regenerate this theme over another inclusive shade range."""
        from .generator import regenerate_theme
        return regenerate_theme(self, min_shade=min_shade, max_shade=max_shade)

    @classmethod
    def from_serialized(cls, text: str, escape_char: str = "|") -> Theme:
        """
        Rebuild a theme from :func:`autotheme.codec.serialize_theme` output.

        Color strings are kept verbatim; canonical values are re-parsed from
        them (so they carry the quantization of the stored format).
        """
        from ..codec.serializer import deserialize_theme
        from ..conversions.wrapper import parse_to_canonical

        data = deserialize_theme(text, escape_char)
        color_type = to_color_type(data.get(COLOR_TYPE_FIELD, ColorType.HEX))
        base_color = data.get(BASE_COLOR_FIELD, "")
        palettes = {role: data[role] for role in ROLES if isinstance(data.get(role), dict)}
        canonical = {
            role: {shade: parse_to_canonical(value, color_type) for shade, value in shades.items()}
            for role, shades in palettes.items()
        }
        return cls(color_type, base_color, palettes, parse_to_canonical(base_color, color_type), canonical)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        shades = self.shades
        span = f"{shades[0]}-{shades[-1]}" if shades else "empty"
        return f"{self.__class__.__name__}(color_type={self._color_type.value!r}, base_color={self._base_color!r}, shades={span})"
