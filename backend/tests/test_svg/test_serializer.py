"""Tests for SVG export."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from scrollwork.engine.config import GenerationConfig
from scrollwork.engine.curves import EMPTY_CURVE
from scrollwork.engine.generator import Scene, ScrollworkGenerator
from scrollwork.engine.layout import Motif
from scrollwork.svg.serializer import render_scene

NS = {"svg": "http://www.w3.org/2000/svg"}


def _scene(square_path: str, **cfg) -> Scene:
    gen = ScrollworkGenerator(outline=square_path)
    return gen.generate(GenerationConfig(**cfg))


def test_document_structure(square_path):
    scene = _scene(square_path, style_name="Minimal", intricacy=10, seed=1)
    root = ET.fromstring(render_scene(scene).split("\n", 1)[1])

    assert root.get("viewBox") == "-20 -20 140 140"
    assert root.get("height") == "700"
    clip = root.find("svg:defs/svg:clipPath", NS)
    assert clip.get("id") == "clipOutline"
    assert clip.find("svg:path", NS).get("fill-rule") == "evenodd"

    top_level = list(root)
    assert [el.tag.split("}")[-1] for el in top_level] == ["defs", "path", "g", "path"]
    underlay, group, overlay = top_level[1], top_level[2], top_level[3]
    assert underlay.get("fill") == "#fff"
    assert overlay.get("fill") == "none"
    assert overlay.get("stroke") == "#000"
    assert group.get("clip-path") == "url(#clipOutline)"
    assert len(group) == len(scene.motifs)


def test_motif_paths_in_generation_order(square_path):
    scene = _scene(square_path, style_name="Acanthus", intricacy=10, seed=4)
    root = ET.fromstring(render_scene(scene).split("\n", 1)[1])
    groups = list(root.find("svg:g", NS))
    for motif, group in zip(scene.motifs, groups):
        paths = group.findall("svg:path", NS)
        assert paths[0].get("d") == motif.spiral.to_path_data()
        assert [p.get("d") for p in paths[1:]] == [leaf.to_path_data() for leaf in motif.leaves]


def test_stroke_widths_scale_with_thickness(square_path):
    scene = _scene(square_path, style_name="Minimal", intricacy=20, seed=11, thickness=1.0)
    svg = render_scene(scene)
    assert 'stroke-width="2.4"' in svg
    assert 'stroke-width="1.4"' in svg

    thick = render_scene(_scene(square_path, style_name="Acanthus", intricacy=20, seed=11, thickness=2.0))
    assert 'stroke-width="4.8"' in thick
    assert 'stroke-width="3.2"' in thick
    assert 'stroke-width="2.56"' in thick


def test_invert_swaps_fill_and_stroke(square_path):
    svg = render_scene(_scene(square_path, intricacy=10, invert=True))
    root = ET.fromstring(svg.split("\n", 1)[1])
    underlay = root.findall("svg:path", NS)[0]
    overlay = root.findall("svg:path", NS)[1]
    assert underlay.get("fill") == "#000"
    assert overlay.get("stroke") == "#fff"


def test_empty_spiral_is_skipped(square_path):
    scene = _scene(square_path, intricacy=10, seed=2)
    motif = scene.motifs[0]
    hollow = Scene(
        config=scene.config,
        outline=scene.outline,
        region=scene.region,
        style=scene.style,
        motifs=(Motif(EMPTY_CURVE, (), motif.center, 0.0, motif.initial_radius, 0.0),),
    )
    root = ET.fromstring(render_scene(hollow).split("\n", 1)[1])
    assert len(root.find("svg:g", NS)) == 1
    assert root.find("svg:g/svg:g/svg:path", NS) is None


def test_custom_height(square_path):
    svg = render_scene(_scene(square_path, intricacy=10), height=400)
    assert 'height="400"' in svg
