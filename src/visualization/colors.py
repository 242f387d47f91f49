"""
Chart palettes
"""

PALETTE = [
    "#0ea5e9",
    "#06b6d4",
    "#10b981",
    "#8b5cf6",
    "#f59e0b",
    "#ef4444",
    "#6366f1",
    "#ec4899",
]

PRIMARY = PALETTE[0]
SECONDARY = PALETTE[1]
