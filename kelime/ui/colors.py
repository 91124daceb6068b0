"""Theme colors and color utilities for the UI."""


class HomeColors:
    """Light theme palette."""

    BG_TOP = "#dbeafe"
    BG_BOTTOM = "#ffffff"

    PRIMARY = "#1d4ed8"
    PRIMARY_LIGHT = "#60a5fa"
    PRIMARY_DARK = "#1e3a8a"

    STAR = "#f5b400"
    SUCCESS = "#2f855a"
    ERROR = "#d64545"

    CARD_BG = "rgba(255, 255, 255, 0.92)"
    CARD_BORDER = "rgba(15, 23, 42, 0.10)"
    LIST_BG = "rgba(148, 163, 184, 0.10)"

    TEXT_PRIMARY = "#1f2933"
    TEXT_SECONDARY = "#64748b"


# Badge colour per proficiency level, easy (green) to hard (red).
LEVEL_COLORS = {
    "A1": "#2f855a",
    "A2": "#38a169",
    "B1": "#d69e2e",
    "B2": "#dd6b20",
    "C1": "#c53030",
    "C2": "#9b2c2c",
}


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except (ValueError, TypeError):
        return a


def level_badge_colors(level: str) -> tuple[str, str]:
    """Return (background, text) colors for a level badge."""
    base = LEVEL_COLORS.get(level, HomeColors.PRIMARY)
    return blend_hex(base, "#FFFFFF", 0.8), base
