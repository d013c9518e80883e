"""TextMaster - Streamlit query form.

Thin page over InteractionController. All state lives in the
controller kept in st.session_state. This file handles:
  - Capabilities and usage panel
  - Input form with summarize/translate selection
  - Submit and Clear All actions
  - Input/response history with the typing reveal on the latest entry
"""

import time

import streamlit as st
import streamlit.components.v1 as components

from frontend.client import BridgeClient
from frontend.controller import InteractionController
from frontend.prompts import ActionMode

MODE_LABELS = {
    ActionMode.SUMMARIZE: "Summarize",
    ActionMode.TRANSLATE: "Translate",
}

# Page setup
st.set_page_config(
    page_title="TextMaster.ai",
    layout="wide",
)

st.markdown("""
<style>
    .pair {
        padding: 0.75rem 1rem;
        margin-bottom: 0.75rem;
        border-radius: 8px;
        border: 1px solid rgba(128, 128, 128, 0.2);
    }
    .pair-input { font-weight: 600; }
</style>
""", unsafe_allow_html=True)


def init_session():
    """Create the controller on first load."""
    if "controller" not in st.session_state:
        st.session_state.controller = InteractionController(client=BridgeClient())


def render_capabilities():
    """Left-hand panel describing what the tool does."""
    st.title("TextMaster.ai")
    st.subheader("Capabilities")
    st.markdown(
        "- Summarization of long texts\n"
        "- Translation between multiple languages"
    )
    st.subheader("Steps to Use:")
    st.markdown(
        '1. For summarization, select "Summarize" and add the text you need a '
        "summary of in the input box.\n"
        '2. To utilize the translation feature, please select "Translate" and '
        "format your input as follows:"
    )
    st.code('Translate to "desired language": "your text to be translated"', language=None)


def render_history(controller: InteractionController):
    """Render input/response pairs, animating the latest response."""
    last = len(controller.history) - 1
    placeholder = None

    for index, entry in enumerate(controller.history):
        if index == last:
            st.markdown('<div id="latest-entry"></div>', unsafe_allow_html=True)
        with st.container(border=True):
            st.markdown(entry.input)
            if index == last:
                placeholder = st.empty()
                placeholder.markdown(controller.display_response(index))
            else:
                st.markdown(controller.display_response(index))

    if controller.consume_scroll():
        components.html(
            "<script>window.parent.document.getElementById('latest-entry')"
            "?.scrollIntoView({behavior: 'smooth'});</script>",
            height=0,
        )

    # Replay the typing buffer while the reveal thread is running
    if placeholder is not None:
        while controller.typing.active:
            placeholder.markdown(controller.typing_buffer)
            time.sleep(controller.typing.interval * 5)
        placeholder.markdown(controller.display_response(last))


def main():
    """Run the Streamlit query form."""
    init_session()
    controller: InteractionController = st.session_state.controller

    with st.sidebar:
        st.markdown("### API Status")
        api_status = controller.client.health()
        if api_status == "healthy":
            st.success("API Healthy")
        else:
            st.warning(f"API {api_status}")
        if st.button("Check Connection", use_container_width=True):
            st.rerun()

    left, right = st.columns([1, 2])

    with left:
        render_capabilities()

    with right:
        with st.form("query_form", clear_on_submit=True):
            text = st.text_area("Your text Here:", height=240)
            mode = st.radio(
                "Action",
                options=list(MODE_LABELS),
                format_func=MODE_LABELS.get,
                index=list(MODE_LABELS).index(controller.action_mode),
                horizontal=True,
                label_visibility="collapsed",
            )
            submitted = st.form_submit_button("Submit")

        if st.button("Clear All"):
            controller.clear_all()
            st.rerun()

        if submitted:
            controller.set_mode(mode)
            with st.spinner("Working..."):
                controller.submit(text)

        if controller.last_error:
            st.error(controller.last_error)

        render_history(controller)


if __name__ == "__main__":
    main()
