"""Built-in named palettes (hex stops, low to high)."""

from __future__ import annotations

PALETTES: dict[str, tuple[str, ...]] = {
    "viridis": ("#440154", "#3B528B", "#21908C", "#5DC863", "#FDE725"),
    "magma": ("#000004", "#51127C", "#B63679", "#FB8861", "#FCFDBF"),
    "plasma": ("#0D0887", "#7E03A8", "#CC4778", "#F89540", "#F0F921"),
    "Blues": (
        "#F7FBFF", "#DEEBF7", "#C6DBEF", "#9ECAE1", "#6BAED6",
        "#4292C6", "#2171B5", "#08519C", "#08306B",
    ),
    "Reds": (
        "#FFF5F0", "#FEE0D2", "#FCBBA1", "#FC9272", "#FB6A4A",
        "#EF3B2C", "#CB181D", "#A50F15", "#67000D",
    ),
    "Greens": (
        "#F7FCF5", "#E5F5E0", "#C7E9C0", "#A1D99B", "#74C476",
        "#41AB5D", "#238B45", "#006D2C", "#00441B",
    ),
    "RdYlGn": ("#D7191C", "#FDAE61", "#FFFFBF", "#A6D96A", "#1A9641"),
    "Set1": (
        "#E41A1C", "#377EB8", "#4DAF4A", "#984EA3", "#FF7F00",
        "#FFFF33", "#A65628", "#F781BF", "#999999",
    ),
    "Dark2": (
        "#1B9E77", "#D95F02", "#7570B3", "#E7298A",
        "#66A61E", "#E6AB02", "#A6761D", "#666666",
    ),
    "Pastel1": (
        "#FBB4AE", "#B3CDE3", "#CCEBC5", "#DECBE4", "#FED9A6",
        "#FFFFCC", "#E5D8BD", "#FDDAEC", "#F2F2F2",
    ),
}
