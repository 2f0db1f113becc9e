"""
Cell geometry and zoom handling.
Turns configured rem sizes into the pixel metrics used for marquee hit-testing.
"""

from .config import BoardConfig
from .models import CellGeometry


def zoom_in(zoom: float, config: BoardConfig) -> float:
    return round(min(zoom + config.zoom_step, config.zoom_max), 2)


def zoom_out(zoom: float, config: BoardConfig) -> float:
    return round(max(zoom - config.zoom_step, config.zoom_min), 2)


def zoom_reset() -> float:
    return 1.0


def clamp_zoom(zoom: float, config: BoardConfig) -> float:
    return max(config.zoom_min, min(config.zoom_max, zoom))


def centering_offset(
    total_cols: int, cell_width: float, gap: float, padding: float, viewport_width: float
) -> float:
    """Horizontal shift of a grid narrower than the viewport; 0 otherwise."""
    grid_width = total_cols * (cell_width + gap) - gap
    available = viewport_width - padding * 2
    if grid_width < available:
        return (available - grid_width) / 2
    return 0.0


def build_geometry(
    config: BoardConfig,
    zoom: float = 1.0,
    total_cols: int = 0,
    viewport_width: float = 0.0,
) -> CellGeometry:
    rem = config.root_font_px
    zoom = clamp_zoom(zoom, config)
    cell_width = config.base_cell_width * zoom * rem
    cell_height = config.base_cell_height * zoom * rem
    gap = config.gap_size * rem
    if config.scale_gap:
        gap *= zoom
    padding = config.padding * rem

    offset = 0.0
    if total_cols > 0 and viewport_width > 0:
        offset = centering_offset(total_cols, cell_width, gap, padding, viewport_width)

    return CellGeometry(
        cell_width=cell_width,
        cell_height=cell_height,
        gap=gap,
        padding=padding,
        centering_offset=offset,
    )
