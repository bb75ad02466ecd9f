"""Landscape PDF export of a puzzle and, optionally, its solution."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from project_config import get_config
from sudoku_grid import Grid

INCH_PER_CM = 0.3937007874


def _pdf_config() -> Dict[str, Any]:
    section = get_config().get("pdf", {})
    return section if isinstance(section, dict) else {}


def _draw_grid(ax, grid: Grid, givens: Optional[Grid], font_size: int) -> None:
    ax.tick_params(axis="both", which="both", bottom=False, top=False, left=False, right=False,
                   labelbottom=False, labelleft=False)
    for idx in range(10):
        linewidth = 1.0 if idx % 3 else 2.5
        ax.axvline(idx / 9, color="k", linewidth=linewidth)
        ax.axhline(idx / 9, color="k", linewidth=linewidth)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    for r, c, value in grid.cells():
        if not value:
            continue
        # digits filled in by the solver are greyed out against the clues
        color = "k" if givens is None or givens[r, c] else "0.45"
        ax.text((c + 0.5) / 9, 1 - (r + 0.5) / 9, str(value),
                ha="center", va="center", fontsize=font_size, color=color)


def export_pdf(
    path: str | Path,
    puzzle: Grid,
    solution: Optional[Grid] = None,
    *,
    title: str = "Sudoku",
) -> Path:
    """Write one page for ``puzzle`` and one for ``solution`` when given."""

    from matplotlib.backends.backend_pdf import PdfPages
    import matplotlib.pyplot as plt

    cfg = _pdf_config()
    page_w_in = float(cfg.get("width_cm", 29.7)) * INCH_PER_CM
    page_h_in = float(cfg.get("height_cm", 21.0)) * INCH_PER_CM
    margin_in = float(cfg.get("margin_cm", 3.0)) * INCH_PER_CM
    font_scale = float(cfg.get("font_scale_factor", 0.65))

    size_in = max(1.0, min(page_w_in, page_h_in) - 2 * margin_in)
    left_in = (page_w_in - size_in) / 2
    bottom_in = margin_in
    font_size = max(1, int(font_scale * size_in * 72 / 9))

    pages: List[Tuple[str, Grid, Optional[Grid]]] = [(title, puzzle, None)]
    if solution is not None:
        pages.append((f"{title} - solution", solution, puzzle))

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with PdfPages(out_path) as pdf:
        for heading, grid, givens in pages:
            fig = plt.figure(figsize=(page_w_in, page_h_in))
            ax = fig.add_axes(
                [left_in / page_w_in, bottom_in / page_h_in, size_in / page_w_in, size_in / page_h_in],
                frameon=False,
            )
            _draw_grid(ax, grid, givens, font_size)
            fig.text(0.5, 1 - (margin_in / 2) / page_h_in, heading, ha="center", va="center", fontsize=14)
            pdf.savefig(fig)
            plt.close(fig)
    return out_path


__all__ = ["export_pdf"]
