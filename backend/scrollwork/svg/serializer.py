"""Write a standalone SVG document for a generated scene.

Paint order: filled outline underlay, motifs clipped to the outline (one
group per motif in generation order), then the outline stroked on top.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from xml.sax.saxutils import quoteattr

from scrollwork.engine.curves import PATH_PRECISION

if TYPE_CHECKING:
    from scrollwork.engine.generator import Scene

SVG_NS = "http://www.w3.org/2000/svg"
CLIP_ID = "clipOutline"
OUTLINE_STROKE_WIDTH = 2.4
LEAF_STROKE_RATIO = 0.8


def _num(value: float) -> str:
    """Shortest stable text for an attribute number (2.4 not 2.4000000000000004)."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _tag(name: str, attrs: dict[str, Any], close: bool = True) -> str:
    attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
    return f"<{name} {attr_str}{' /' if close else ''}>"


def render_scene(scene: Scene, height: int | str = 700, precision: int = PATH_PRECISION) -> str:
    """Render the scene to SVG markup."""
    cfg = scene.config
    style = scene.style
    outline_d = scene.outline.path_data
    outline_width = _num(OUTLINE_STROKE_WIDTH * cfg.thickness)
    spiral_width = _num(style.stroke_width * cfg.thickness)
    leaf_width = _num(style.stroke_width * LEAF_STROKE_RATIO * cfg.thickness)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        _tag(
            "svg",
            {
                "xmlns": SVG_NS,
                "viewBox": scene.region.view_box(),
                "width": "100%",
                "height": height,
            },
            close=False,
        ),
        "  <defs>",
        "    " + _tag("clipPath", {"id": CLIP_ID, "clipPathUnits": "userSpaceOnUse"}, close=False),
        "      " + _tag("path", {"d": outline_d, "fill": "#000", "fill-rule": "evenodd"}),
        "    </clipPath>",
        "  </defs>",
        "  "
        + _tag(
            "path",
            {
                "d": outline_d,
                "fill": "#000" if cfg.invert else "#fff",
                "fill-rule": "evenodd",
                "stroke": "#000",
                "stroke-width": outline_width,
            },
        ),
        "  " + _tag("g", {"clip-path": f"url(#{CLIP_ID})"}, close=False),
    ]

    for motif in scene.motifs:
        lines.append("    <g>")
        if not motif.spiral.is_empty:
            lines.append(
                "      "
                + _tag(
                    "path",
                    {
                        "d": motif.spiral.to_path_data(precision),
                        "stroke": style.stroke_color,
                        "fill": "none",
                        "stroke-width": spiral_width,
                        "stroke-linecap": "round",
                    },
                )
            )
        for leaf in motif.leaves:
            lines.append(
                "      "
                + _tag(
                    "path",
                    {
                        "d": leaf.to_path_data(precision),
                        "stroke": style.stroke_color,
                        "fill": "none",
                        "stroke-width": leaf_width,
                        "stroke-linecap": "round",
                    },
                )
            )
        lines.append("    </g>")

    lines.append("  </g>")
    lines.append(
        "  "
        + _tag(
            "path",
            {
                "d": outline_d,
                "fill": "none",
                "stroke": "#fff" if cfg.invert else "#000",
                "stroke-width": outline_width,
            },
        )
    )
    lines.append("</svg>")
    return "\n".join(lines)
