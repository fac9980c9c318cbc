"""Basic AutoTheme usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from autotheme import (
    ColorType,
    ROLES,
    Theme,
    convert,
    deserialize_theme,
    generate_theme,
    parse_to_canonical,
    serialize_theme,
)


def demonstrate_conversions() -> None:
    # Every format goes through the canonical OKLCH record.
    purple = parse_to_canonical("#a855f7", ColorType.HEX)
    print("Canonical:", purple)

    for color_type in ColorType:
        print(f"  {color_type.value:>5}:", convert("#a855f7", "hex", color_type))


def demonstrate_theme() -> None:
    # Five roles, eleven shades each.
    theme = generate_theme("#a855f7", "hex", "hex", "50", "950")
    print("Base:", theme.base_color)
    for role in ROLES:
        print(f"  {role:>9}:", " ".join(theme.palette(role).values()))

    # Same palette, rendered as oklch, restricted to the mid shades.
    mid = theme.convert_to("oklch").with_shade_range("300", "700")
    print("OKLCH primary 300-700:", dict(mid.primary))


def demonstrate_codec() -> None:
    theme = generate_theme("#336699", "hex", "rgb", "100", "900")
    text = serialize_theme(theme)
    print("Serialized:", text[:80], "...")

    data = deserialize_theme(text)
    print("Deserialized base color:", data["baseColor"])

    # A custom delimiter that also appears inside rgb values gets escaped.
    text = serialize_theme(theme, ",")
    assert Theme.from_serialized(text, ",") == theme


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_theme()
    demonstrate_codec()
