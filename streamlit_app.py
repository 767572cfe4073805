from __future__ import annotations

import logging

import numpy as np
import plotly.graph_objects as go
import streamlit as st

from tileworld.config import StreamingConfig
from tileworld.render import iter_placements
from tileworld.samples import sample_level, sample_tile_map
from tileworld.streaming import ChunkStreamer
from ui.styles import inject_global_styles
from viz.export import array_to_npy_bytes, tile_grid, tile_grid_to_png_bytes

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

st.set_page_config(
    page_title="Tile World Streamer",
    page_icon="~",
    layout="wide",
)

inject_global_styles()


def _qp_get(name: str, default: str) -> str:
    try:
        raw = st.query_params.get(name)
    except Exception:
        raw = None

    if raw is None:
        return default
    if isinstance(raw, list):
        return str(raw[0]) if raw else default
    return str(raw)


def _qp_int(name: str, default: int, *, min_value: int, max_value: int) -> int:
    try:
        v = int(float(_qp_get(name, str(default))))
    except ValueError:
        v = default
    return max(min_value, min(max_value, v))


def _streamer(cfg: StreamingConfig, level_w: int, level_h: int) -> ChunkStreamer:
    # One streamer per configuration, kept across reruns so the cache persists.
    key = ("streamer", cfg, level_w, level_h)
    if st.session_state.get("streamer_key") != key:
        level = sample_level(width=level_w, height=level_h, tile_size=cfg.tile_size)
        st.session_state["streamer"] = ChunkStreamer(
            sample_tile_map(size=cfg.tile_size), level, cfg
        )
        st.session_state["streamer_key"] = key
    return st.session_state["streamer"]


def _source_figure(streamer: ChunkStreamer) -> go.Figure:
    chunks = streamer.chunks()
    xs = sorted({int(c.coord[0]) for c in chunks})
    ys = sorted({int(c.coord[1]) for c in chunks})
    z = np.zeros((len(ys), len(xs)), dtype=np.float64)
    for c in chunks:
        z[ys.index(int(c.coord[1])), xs.index(int(c.coord[0]))] = (
            1.0 if c.source == "legacy" else 0.0
        )
    fig = go.Figure(
        go.Heatmap(
            z=z,
            x=xs,
            y=ys,
            zmin=0.0,
            zmax=1.0,
            colorscale=[[0.0, "#0f766e"], [1.0, "#f59e0b"]],
            showscale=False,
            hovertemplate="chunk (%{x}, %{y})<extra></extra>",
        )
    )
    fig.update_yaxes(autorange="reversed", scaleanchor="x")
    fig.update_layout(
        height=320, margin=dict(l=10, r=10, t=30, b=10), title="Chunk source"
    )
    return fig


with st.sidebar:
    st.header("Streaming")
    chunk_size = st.number_input(
        "Chunk size (tiles)",
        min_value=4,
        max_value=64,
        value=_qp_int("chunk_size", 16, min_value=4, max_value=64),
    )
    tile_size = st.number_input(
        "Tile size (px)",
        min_value=8,
        max_value=64,
        value=_qp_int("tile_size", 32, min_value=8, max_value=64),
    )
    render_distance = st.slider(
        "Render distance (chunks)",
        min_value=0,
        max_value=6,
        value=_qp_int("render_distance", 3, min_value=0, max_value=6),
    )
    st.header("Legacy level")
    level_w = st.slider(
        "Width (tiles)", 8, 256, _qp_int("level_w", 40, min_value=8, max_value=256)
    )
    level_h = st.slider(
        "Height (tiles)", 8, 256, _qp_int("level_h", 30, min_value=8, max_value=256)
    )
    st.header("Observer")
    span = int(chunk_size) * int(tile_size) * 12
    obs_x = st.slider("x (px)", -span, span, 0, step=int(tile_size))
    obs_y = st.slider("y (px)", -span, span, 0, step=int(tile_size))
    show_deco = st.checkbox("Show decorations", value=True)

cfg = StreamingConfig(
    chunk_size=int(chunk_size),
    tile_size=int(tile_size),
    render_distance=int(render_distance),
)
streamer = _streamer(cfg, int(level_w), int(level_h))
plan = streamer.update(int(obs_x), int(obs_y))

st.title("Tile World Streamer")

c0, c1, c2, c3 = st.columns(4)
c0.metric("Loaded chunks", streamer.loaded_chunk_count())
c1.metric("Observer chunk", str(tuple(streamer.center or ())))
c2.metric("Added", len(plan.to_add))
c3.metric("Evicted", len(plan.to_remove))

base, left, top = tile_grid(streamer.chunks(), layer=0)
deco, _, _ = tile_grid(streamer.chunks(), layer=1)
png = tile_grid_to_png_bytes(base, overlay=deco if show_deco else None)

view, side = st.columns([3, 2], vertical_alignment="top")
with view:
    st.image(
        png, caption=f"Window origin tile ({left}, {top})", use_container_width=True
    )
    st.download_button(
        "Download layer 0 (.npy)",
        data=array_to_npy_bytes(base),
        file_name="tiles_layer0.npy",
        mime="application/octet-stream",
    )
with side:
    st.plotly_chart(_source_figure(streamer), use_container_width=True)
    n_placements = sum(1 for _ in iter_placements(streamer.chunks()))
    st.caption(f"{n_placements} tile placements in the window")
