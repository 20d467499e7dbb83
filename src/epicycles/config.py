"""
Configuration & Constants
=========================
This module serves as the central registry for the numeric constants shared by
the engines and the views.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (time steps, layout paddings, colours)
   from being scattered through the engines and the painters.
2. Consistency: The decomposition rows, the result panel and the labels must
   agree on the same layout, so they all read it from here.

Exports:
    BASE_TIME_STEP (float): Time advanced per frame at speed 1.0.
    PALETTE (tuple[str, ...]): Harmonic colours, cycled by row index.
"""

# --- Animation ---
BASE_TIME_STEP: float = 0.025
DECOMPOSITION_TIME_STEP: float = 0.01  # time between neighbouring samples of a row
FRAME_INTERVAL_MS: int = 16  # ~60 FPS

# --- Parameter ranges ---
ORDER_MIN: int = 1
ORDER_MAX: int = 30
DEFAULT_ORDER: int = 1

SPEED_MIN: float = 0.1
SPEED_MAX: float = 5.0
SPEED_STEP: float = 0.1
DEFAULT_SPEED: float = 1.0

# --- Epicycle layout (fractions of the canvas) ---
EPICYCLE_CANVAS_HEIGHT: int = 500
CHAIN_ORIGIN_X_RATIO: float = 0.3
WAVE_START_X_RATIO: float = 0.55

# --- Decomposition layout (px) ---
ROW_HEIGHT: int = 80
RESULT_AREA_HEIGHT: int = 166
LEFT_LABEL_WIDTH: int = 60
RIGHT_LABEL_WIDTH: int = 100
WAVE_PADDING: int = 15
ROW_FILL_RATIO: float = 0.85  # part of the half row a full-amplitude wave may use

# --- Colours ---
BACKGROUND_COLOR: str = "#1f2937"
PALETTE: tuple[str, ...] = (
    "#ef4444",  # red
    "#f59e0b",  # amber
    "#3b82f6",  # blue
    "#10b981",  # emerald
    "#8b5cf6",  # violet
    "#ec4899",  # pink
    "#f472b6",  # light pink
    "#60a5fa",  # light blue
    "#a78bfa",  # lavender
    "#facc15",  # yellow
)
CIRCLE_ALPHA: float = 0x99 / 255
SPOKE_COLOR: str = "#e5e7eb"
SPOKE_ALPHA: float = 0xAA / 255
GUIDE_COLOR: str = "#6b7280"
WAVE_COLOR: str = "#fde68a"
CENTER_LINE_COLOR: str = "#4b5563"
ROW_LABEL_COLOR: str = "#e5e7eb"
RESULT_LABEL_COLOR: str = "#f3f4f6"
INFO_LABEL_COLOR: str = "#9ca3af"
