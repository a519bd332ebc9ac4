"""HTMLExporter: write the demo strips as a standalone HTML page."""

from __future__ import annotations

import base64
import pathlib
from typing import Sequence

import jinja2

from .._logging import logger
from .strips import DemoConfig, Strip

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"


class HTMLExporter:
    """Export strips as a self-contained HTML file.

    Each strip is sampled once per pixel column; the RGBA bytes are embedded
    base64-encoded and painted onto a ``<canvas>`` by inline JS. No external
    resources are referenced.
    """

    @staticmethod
    def export(
        path: str | pathlib.Path,
        strips: Sequence[Strip],
        config: DemoConfig | None = None,
        title: str = "colorramp",
    ) -> None:
        """Write a standalone HTML file.

        Parameters
        ----------
        path : str or Path
            Output file path.
        strips : sequence of Strip
            Strips in top-to-bottom order.
        config : DemoConfig, optional
            Page width and height; each strip gets an equal share of the height.
        title : str
            HTML page title.
        """
        config = config or DemoConfig()
        if not strips:
            raise ValueError("No strips to export. Provide at least one Strip.")
        path = pathlib.Path(path)

        strip_height = max(1, config.height // len(strips))
        payload = HTMLExporter.encode_strips(strips, config.width)

        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=True,
        )
        template = env.get_template("strips.html.j2")
        html = template.render(
            title=title,
            width=config.width,
            strip_height=strip_height,
            strips=payload,
        )

        path.write_text(html, encoding="utf-8")
        logger.info("Exported %d strips to %s", len(strips), path)

    @staticmethod
    def encode_strips(strips: Sequence[Strip], width: int) -> list[dict]:
        """Sample every strip at ``width`` columns and base64 the RGBA bytes."""
        return [
            {
                "label": s.label,
                "rgba_b64": base64.b64encode(
                    s.colormap.sample(width).tobytes()
                ).decode("ascii"),
            }
            for s in strips
        ]
