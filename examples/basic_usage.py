"""Basic okchroma usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from okchroma import (
    RGBA,
    HSLA,
    OKLCH,
    Color,
    convert,
    contrast,
    apca_contrast,
    ensure_contrast,
    get_readability_level,
    mix_colors,
)


def demonstrate_colors() -> None:
    # Build colors from any space; everything is stored as OKLCH.
    accent = Color(RGBA(255, 128, 64))
    print("Accent:", accent)
    print("Accent as HSL:", accent.to_hsla())
    print("Accent as P3:", accent.to_p3())

    # Plain tuples convert without the facade.
    print("HSL -> OKLCH:", convert(HSLA(200, 0.8, 0.4), "oklch"))


def demonstrate_manipulation() -> None:
    base = Color.from_oklch(0.65, 0.15, 250)
    print("Lighter:", base.lighten(0.1).to_rgba())
    print("Complement:", base.complement().to_rgba())

    # Hue takes the short way around: 350 -> 10 passes through 0.
    warm = Color(OKLCH(0.7, 0.12, 350)).mix(OKLCH(0.7, 0.12, 10))
    print("Mixed hue:", round(warm.h, 2))

    palette = mix_colors([RGBA(255, 0, 0), RGBA(0, 0, 255), RGBA(0, 255, 0)])
    print("Palette average:", palette.to_rgba())

    # Too much chroma for sRGB: output is gamut-mapped at constant L and h.
    vivid = Color.from_oklch(0.8, 0.3, 145)
    print("In sRGB gamut:", vivid.is_in_gamut(), "->", vivid.to_rgba())


def demonstrate_accessibility() -> None:
    white = RGBA(255, 255, 255)
    text = RGBA(150, 150, 150)
    print("WCAG ratio:", round(contrast(text, white), 2), get_readability_level(text, white))
    print("APCA Lc:", round(apca_contrast(text, white), 1))

    fixed = ensure_contrast(text, white, 4.5)
    print("Adjusted:", fixed, round(contrast(fixed, white), 2), get_readability_level(fixed, white))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_manipulation()
    demonstrate_accessibility()
