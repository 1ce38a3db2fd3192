"""App-wide display constants."""

from types import MappingProxyType

RELATIONSHIP_TYPE_COLORS = MappingProxyType(
    {
        "family": "#FF6B6B",
        "friend": "#6C5CE7",
        "colleague": "#00D2FF",
        "acquaintance": "#FFD740",
        "other": "#9090A8",
    }
)

# 1 = worst, 5 = best
SENTIMENT_COLORS = MappingProxyType(
    {
        1: "#FF5252",
        2: "#FF6E40",
        3: "#FFD740",
        4: "#69F0AE",
        5: "#00E676",
    }
)
NEUTRAL_COLOR = SENTIMENT_COLORS[3]
