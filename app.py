from typing import Any
from urllib.parse import urlencode

import streamlit as st

import src.build_lib.constants as C
from src.build_lib import (
    BuildViewerError,
    PartRecord,
    build_url,
    describe_part,
    display_build,
    format_stat,
    generate_build_csv,
    get_stat,
    load_catalog,
)


def get_setting(key: str, default: Any) -> Any:
    """Reads an override from Streamlit secrets, falling back to the default."""
    try:
        return st.secrets.get(key, default)
    except (FileNotFoundError, KeyError):
        # No secrets.toml configured
        return default


class StreamlitSink:
    """Render sink backed by Streamlit placeholders."""

    def __init__(self):
        self.loading_slot = st.empty()
        self.error_slot = st.empty()
        self.parts_slot = st.empty()
        c1, c2 = st.columns(2)
        self.en_load_slot = c1.empty()
        self.weight_slot = c2.empty()
        self.parts = None

    def reset(self) -> None:
        self.loading_slot.empty()
        self.error_slot.empty()
        self.en_load_slot.empty()
        self.weight_slot.empty()
        self.parts = self.parts_slot.container()

    def set_loading(self, active: bool) -> None:
        if active:
            self.loading_slot.info("⏳ Loading parts catalog...")
        else:
            self.loading_slot.empty()

    def add_part(self, part: PartRecord) -> None:
        en_load = format_stat(get_stat(part, C.EN_LOAD_COLUMN))
        weight = format_stat(get_stat(part, C.WEIGHT_COLUMN))
        with self.parts:
            st.markdown(
                f"**{describe_part(part)}**  \n"
                f"EN Load: {en_load} | Weight: {weight}"
            )

    def set_totals(self, en_load: float, weight: float) -> None:
        self.en_load_slot.metric("Total EN Load", format_stat(en_load))
        self.weight_slot.metric("Total Weight", format_stat(weight))

    def show_error(self, message: str) -> None:
        self.error_slot.error(f"❌ {message}")


def current_url() -> str:
    """Rebuilds the query part of the page URL from st.query_params."""
    params = st.query_params.to_dict()
    return f"?{urlencode(params, safe=C.INDEX_SEPARATOR)}"


st.set_page_config(page_title="Build Viewer", page_icon="🤖")

catalog_source = get_setting("catalog_source", C.DEFAULT_CATALOG_SOURCE)
fetch_timeout = float(get_setting("fetch_timeout", C.FETCH_TIMEOUT))

st.title("🤖 Build Viewer")
st.markdown("""
**Check the EN load and weight of a shared build.**

Open a link with `?build=...` (hyphen-separated part numbers) or compose a build below.
""")

# Composer
if st.toggle("🛠️ Build Composer"):
    try:
        catalog = load_catalog(catalog_source, fetch_timeout)
    except BuildViewerError as e:
        st.error(f"❌ {e}")
    else:
        picked = st.multiselect(
            "Parts",
            options=list(range(len(catalog))),
            format_func=lambda i: f"{i}: {describe_part(catalog[i])}",
        )
        if st.button("Show Build", key="show_build", disabled=not picked):
            st.query_params[C.BUILD_PARAM] = C.INDEX_SEPARATOR.join(
                str(i) for i in picked
            )
            st.rerun()

st.divider()

st.subheader("📋 Build")
st.button("🔄 Reload Build", key="reload")

# Every run (page open, reload, composer) is one full request
sink = StreamlitSink()
result = display_build(
    current_url(), sink, source=catalog_source, timeout=fetch_timeout
)

if result["state"] == "idle":
    st.caption("No build in the URL yet.")

summary = result["summary"]
if result["state"] == "success" and summary:
    if summary["skipped"]:
        skipped = ", ".join(str(i) for i in summary["skipped"])
        st.warning(f"⚠️ Skipped part numbers not in the catalog: {skipped}")

    st.subheader("🔗 Share")
    st.code(build_url("", result["indices"] or []))

    st.download_button(
        "Download CSV",
        data=generate_build_csv(summary),
        file_name="build.csv",
        mime="text/csv",
        type="primary",
    )
