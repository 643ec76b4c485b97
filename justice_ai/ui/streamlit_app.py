"""
Streamlit front end for JusticeAI.

Run with:
    streamlit run justice_ai/ui/streamlit_app.py
"""
import asyncio

import streamlit as st
from langchain_ollama import ChatOllama

from justice_ai.advice.service import AdviceService
from justice_ai.client.controller import AnalysisController
from justice_ai.client.storage import new_draft_id, normalize_draft_id, session_store
from justice_ai.core.config import get_settings
from justice_ai.core.constants import AppSettings, Language
from justice_ai.core.logging_config import configure_logging
from justice_ai.core.messages import translate
from justice_ai.ui.presenter import (
    controls_state,
    error_banner,
    example_cases,
    result_sections,
    rtl_html,
)

QUERY_WIDGET = "query_input"
DRAFT_PARAM = AppSettings.DRAFT_QUERY_PARAM


def get_draft_id() -> str:
    """Draft id carried in the page URL, so each browser keeps its own draft across reloads"""
    draft_id = normalize_draft_id(st.query_params.get(DRAFT_PARAM))
    if draft_id is None:
        draft_id = new_draft_id()
        st.query_params[DRAFT_PARAM] = draft_id
    return draft_id


def get_controller() -> AnalysisController:
    if "controller" not in st.session_state:
        settings = get_settings()
        configure_logging(settings.LOG_LEVEL)
        st.session_state.notices = []
        st.session_state.controller = AnalysisController(
            requester=AdviceService(ChatOllama(**settings.ollama_config)),
            store=session_store(settings.draft_store_dir, get_draft_id()),
            notifier=st.session_state.notices.append,
        )
        st.session_state[QUERY_WIDGET] = st.session_state.controller.query
    return st.session_state.controller


# =========================
# Callbacks
# =========================
def on_query_change():
    get_controller().set_query(st.session_state[QUERY_WIDGET])


def on_language_change():
    get_controller().set_language(st.session_state.language_select)


def on_analyze():
    controller = get_controller()
    with st.spinner(translate("analyzing", controller.language)):
        asyncio.run(controller.analyze())


def on_retry():
    controller = get_controller()
    with st.spinner(translate("analyzing", controller.language)):
        asyncio.run(controller.retry())


def on_clear():
    get_controller().clear()
    st.session_state[QUERY_WIDGET] = ""


def on_example(text: str):
    get_controller().set_query(text)
    st.session_state[QUERY_WIDGET] = text


# =========================
# Page
# =========================
st.set_page_config(page_title="JusticeAI Pakistan", page_icon="⚖️", layout="centered")

controller = get_controller()
language = controller.language
rtl = language == Language.UR

header_left, header_right = st.columns([3, 1])
header_left.markdown("## ⚖️ JusticeAI Pakistan")
header_right.selectbox(
    "Language",
    options=list(Language),
    format_func=lambda lang: lang.native_name,
    index=list(Language).index(language),
    key="language_select",
    on_change=on_language_change,
    label_visibility="collapsed",
)

while st.session_state.notices:
    notice = st.session_state.notices.pop(0)
    st.toast(f"**{notice.title}** {notice.description}", icon="❌" if notice.variant == "destructive" else "✅")

st.subheader(translate("page_title", language))
st.write(translate("page_intro", language))

st.text_area(
    translate("page_title", language),
    key=QUERY_WIDGET,
    placeholder=translate("input_placeholder", language),
    max_chars=AppSettings.MAX_QUERY_LENGTH,
    on_change=on_query_change,
    label_visibility="collapsed",
)

controls = controls_state(controller)
st.caption(f"{'⚠️ ' if controls.near_limit else ''}{controls.character_count}")

if controller.validation_error is not None:
    st.warning(controller.validation_error.message)

analyze_col, clear_col, retry_col = st.columns([2, 1, 1])
analyze_col.button(
    controls.analyze_label,
    type="primary",
    disabled=not controls.analyze_enabled,
    on_click=on_analyze,
)
clear_col.button(controls.clear_label, disabled=not controls.clear_enabled, on_click=on_clear)
if controller.error is not None:
    retry_col.button(controls.retry_label, disabled=not controls.retry_enabled, on_click=on_retry)

st.divider()
st.subheader(f"💡 {translate('results_title', language)}")

banner = error_banner(controller)
if banner is not None:
    st.error(banner)
elif controller.result is not None:
    for section in result_sections(controller.result, language):
        st.markdown(f"#### {section.label}")
        if rtl:
            st.markdown(rtl_html(section.body), unsafe_allow_html=True)
        else:
            st.markdown(section.body)
else:
    st.info(translate("results_placeholder", language))

with st.expander(f"💡 {translate('example_cases', language)}"):
    for i, example in enumerate(example_cases(language)):
        st.button(example, key=f"example_{language.value}_{i}", on_click=on_example, args=(example,))

st.caption(f"⚠️ **{translate('footer_title', language)}** {translate('footer_body', language)}")
