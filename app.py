from dataclasses import replace
from typing import List, Optional
from pyrsistent import thaw
import streamlit as st

from blockies import IdenticonError
from blockies.config import IdenticonConfig
from blockies.identicon import DEFAULT_SIZE
from blockies.renderer import DEFAULT_SCALE
from blockies.seed import random_seed


st.set_page_config(layout="wide", page_title="Blockies")
st.markdown(
    """
    <style>
        header, footer, #MainMenu { visibility: hidden; }
        .stMainBlockContainer {
            padding-top: 0;
            padding-bottom: 0;
        }
    </style>
""",
    unsafe_allow_html=True,
)


def set_default_config() -> None:
    if "identicon_config" not in st.session_state:
        st.session_state["identicon_config"] = IdenticonConfig(
            seed=random_seed(),
            size=DEFAULT_SIZE,
            scale=DEFAULT_SCALE,
        )
    if "seed" not in st.session_state:
        st.session_state["seed"] = st.session_state["identicon_config"].seed


def randomize_seed() -> None:
    # Runs before the rerun, so the seed widget can still be written
    seed = random_seed()
    st.session_state["seed"] = seed
    st.session_state["identicon_config"] = replace(
        st.session_state["identicon_config"], seed=seed
    )


def override_input(label: str, value: Optional[str], key: str) -> Optional[str]:
    use_override: bool = st.checkbox(
        f"Override {label}", value=value is not None, key=f"{key}_enabled"
    )
    if not use_override:
        return None
    return st.text_input(f"{label} (CSS color)", value=value or "#000000", key=key)


def get_config_from_widgets() -> IdenticonConfig:
    config: IdenticonConfig = st.session_state["identicon_config"]

    st.subheader("Seed")
    seed: str = st.text_input("Seed", key="seed")

    st.subheader("Grid")
    size: int = st.slider("Grid size (cells)", 1, 32, config.size, key="size")
    scale: int = st.slider("Scale (pixels per cell)", 1, 32, config.scale, key="scale")

    st.subheader("Color overrides")
    color = override_input("Foreground", config.color, "color")
    bg_color = override_input("Background", config.bg_color, "bg_color")
    spot_color = override_input("Spot", config.spot_color, "spot_color")

    return IdenticonConfig(
        seed=seed,
        size=size,
        scale=scale,
        color=color,
        bg_color=bg_color,
        spot_color=spot_color,
    )


# --------- Main App ---------
set_default_config()
tab_preview, tab_config, tab_state = st.tabs(["Preview", "Config", "Descriptor"])

with tab_config:
    st.session_state["identicon_config"] = get_config_from_widgets()

config: IdenticonConfig = st.session_state["identicon_config"]

with tab_preview:
    left_col, right_col = st.columns([0.5, 0.5])
    with right_col:
        st.button(
            "🔄 Random seed",
            key="random_seed_btn",
            on_click=randomize_seed,
            use_container_width=True,
        )
        st.info(f"**Seed:** `{config.seed}`")

    with left_col:
        try:
            st.image(config.render())
        except IdenticonError as exc:
            st.error(str(exc))

    st.divider()
    neighbours: List[IdenticonConfig] = [
        replace(config, seed=f"{config.seed}{suffix}") for suffix in range(8)
    ]
    for col, neighbour in zip(st.columns(len(neighbours)), neighbours):
        with col:
            try:
                st.image(neighbour.render(), caption=neighbour.seed)
            except IdenticonError as exc:
                st.error(str(exc))

with tab_state:
    try:
        st.json(thaw(config.generate().description), expanded=1)
    except IdenticonError as exc:
        st.error(str(exc))
