from typing import Optional, Tuple

import streamlit as st
from pyrsistent.typing import PMap, PSet

from punks_remaster.assets import load_render_context
from punks_remaster.config import RemasterConfig
from punks_remaster.data import load_eligible_ids, load_subjects
from punks_remaster.errors import RemasterError
from punks_remaster.logging_config import setup_logging
from punks_remaster.lookup import LookupResult, render_lookup
from punks_remaster.remaster import RemasterRecord
from punks_remaster.renderer.compositor import RenderContext, composite_subject
from punks_remaster.showcase import TRAIT_EXAMPLES, TraitExample
from punks_remaster.subject import Subject
from punks_remaster.types import SubjectID
from punks_remaster.utils.image import scale

PREVIEW_SIZE = 120

st.set_page_config(layout="wide", page_title="Punks Remastered")
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


def load_everything() -> Tuple[RenderContext, PMap[SubjectID, Subject], PSet[SubjectID]]:
    if "context" not in st.session_state:
        setup_logging()
        config = RemasterConfig.from_env()
        st.session_state["context"] = load_render_context(config, with_composite=False)
        st.session_state["subjects"] = load_subjects(config.attributes_path)
        st.session_state["eligible"] = load_eligible_ids(config.eligible_path)
    return (
        st.session_state["context"],
        st.session_state["subjects"],
        st.session_state["eligible"],
    )


def show_badges(remasters: Tuple[RemasterRecord, ...]) -> None:
    for remaster in remasters:
        st.markdown(f"`{remaster.type}` **{remaster.trait}**: {remaster.description}")


def show_comparison(context: RenderContext, result: LookupResult) -> None:
    original = composite_subject(context, result.subject, apply_remasters=False)
    cols = st.columns([1, 1])
    with cols[0]:
        st.image(scale(original, result.size), caption="Original")
    with cols[1]:
        if result.applied:
            st.image(result.image, caption="Remastered")
        elif result.remasters:
            st.info("Remaster withheld: not on the eligibility list")
        else:
            st.info("No remaster available")
    show_badges(result.remasters)


def lookup_tab(
    context: RenderContext,
    subjects: PMap[SubjectID, Subject],
    eligible: PSet[SubjectID],
) -> None:
    subject_id: Optional[int] = st.number_input(
        "Subject ID", min_value=0, max_value=9999, value=70, step=1, key="lookup_id"
    )
    if subject_id is None:
        return
    try:
        result = render_lookup(
            context, subjects, eligible, subject_id, size=PREVIEW_SIZE
        )
    except RemasterError as e:
        st.error(str(e))
        return

    subject = result.subject
    st.subheader(f"#{subject.id}")
    st.caption(
        f"{subject.type} / {subject.gender}"
        + (f" / {subject.skin_tone}" if subject.skin_tone else "")
        + f" | {', '.join(subject.accessories) or 'no accessories'}"
    )
    if not result.eligible:
        st.warning("Not on the eligibility list")
    show_comparison(context, result)


def gallery_tab(context: RenderContext, subjects: PMap[SubjectID, Subject]) -> None:
    per_row = 4
    examples = list(TRAIT_EXAMPLES)
    for start in range(0, len(examples), per_row):
        cols = st.columns(per_row)
        for col, example in zip(cols, examples[start : start + per_row]):
            with col:
                show_example(context, subjects, example)


def show_example(
    context: RenderContext, subjects: PMap[SubjectID, Subject], example: TraitExample
) -> None:
    st.markdown(f"**{example.name}** (#{example.subject_id})")
    st.caption(example.description)
    subject = subjects.get(example.subject_id)
    if subject is None:
        st.error("Subject not found")
        return
    original = composite_subject(context, subject, apply_remasters=False)
    remastered = composite_subject(context, subject, apply_remasters=True)
    st.image(
        [scale(original, PREVIEW_SIZE), scale(remastered, PREVIEW_SIZE)],
        caption=["Original", "Remastered"],
    )


# --------- Main App ---------

context, subjects, eligible = load_everything()
st.title("Punks Remastered")
tab_lookup, tab_traits = st.tabs(["Lookup by ID", "All Traits"])

with tab_lookup:
    lookup_tab(context, subjects, eligible)

with tab_traits:
    gallery_tab(context, subjects)
