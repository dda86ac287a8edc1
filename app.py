import logging

import streamlit as st

from agri_sakha.config import get_settings
from agri_sakha.translations import LANGUAGES, DEFAULT_LANGUAGE, ui_translator, normalize_language
from agri_sakha.conversation import Conversation, is_user
from agri_sakha.backend import ask_backend
from agri_sakha.speech import synthesize, transcribe, SpeechServiceError
from agri_sakha.ui import CHAT_CSS, bubble_html, header_html

logger = logging.getLogger(__name__)


def play_reply(text, language, autoplay):
    with st.spinner(ui_translator("tts_generating_spinner", language, lang=LANGUAGES[language])):
        audio_bytes_io = synthesize(text, language)
    if audio_bytes_io:
        st.audio(audio_bytes_io, format="audio/mp3", autoplay=autoplay)
    else:
        st.warning(ui_translator("tts_error_generation", language))


def queue_message(state):
    if state["loading"]:
        logger.debug("Send ignored: a request is already in flight.")
        return False
    text = state.get("draft", "").strip()
    if not text:
        return False
    state["draft"] = ""
    state["speech_notice"] = None
    state["conversation"].add(text, from_user=True)
    state["pending_query"] = text
    state["loading"] = True
    logger.info(f"User query: '{text}'")
    return True


def apply_transcript(state, recording):
    if recording is None:
        return
    language = state["language"]
    state["speech_notice"] = None
    try:
        transcript = transcribe(recording, language)
    except SpeechServiceError as e:
        state["speech_notice"] = ui_translator("transcript_error", language, err=str(e))
        return
    if transcript:
        state["draft"] = transcript
    else:
        state["speech_notice"] = ui_translator("transcript_empty_warning", language)


def display_conversation(conversation, language, settings):
    if not len(conversation):
        st.info(ui_translator("empty_chat_info", language))
        return

    pending_speech = st.session_state.pending_speech
    for group in conversation.groups():
        with st.container():
            for offset, message in enumerate(group.messages):
                index = group.key + offset
                st.markdown(bubble_html(message), unsafe_allow_html=True)
                if is_user(message) or not message.content:
                    continue

                if pending_speech == index and settings['autoplay']:
                    play_reply(message.content, language, autoplay=True)
                elif st.button(ui_translator("tts_button_label", language), key=f"tts_button_{index}",
                               help=ui_translator("tts_button_tooltip", language, lang=LANGUAGES[language])):
                    play_reply(message.content, language, autoplay=False)

    if pending_speech is not None:
        st.session_state.pending_speech = None


def main():
    if 'language' not in st.session_state: st.session_state.language = DEFAULT_LANGUAGE
    if 'conversation' not in st.session_state: st.session_state.conversation = Conversation()
    if 'loading' not in st.session_state: st.session_state.loading = False
    if 'pending_query' not in st.session_state: st.session_state.pending_query = None
    if 'pending_speech' not in st.session_state: st.session_state.pending_speech = None
    if 'speech_notice' not in st.session_state: st.session_state.speech_notice = None
    if 'draft' not in st.session_state: st.session_state.draft = ""

    st.session_state.language = normalize_language(st.session_state.language)
    settings = get_settings()

    st.set_page_config(page_title="Agri-Sakha", page_icon="🌱", layout="centered")
    st.markdown(CHAT_CSS, unsafe_allow_html=True)

    language_options = list(LANGUAGES.keys())

    def language_change_callback():
        new_lang = st.session_state.widget_lang_select_key
        if st.session_state.language != new_lang:
            st.session_state.language = new_lang
            logger.info(f"Language changed to '{new_lang}' via dropdown.")

    def clear_chat_history():
        st.session_state.conversation.clear()
        st.session_state.pending_speech = None

    def send_callback():
        queue_message(st.session_state)

    def transcribe_callback():
        apply_transcript(st.session_state, st.session_state.get("mic_recording"))

    language = st.session_state.language

    col_title, col_lang = st.columns([3, 1], vertical_alignment="center")
    with col_title:
        st.markdown(header_html(ui_translator("page_title", language)), unsafe_allow_html=True)
    with col_lang:
        st.selectbox(
            label=ui_translator("language_label", language), options=language_options,
            format_func=LANGUAGES.get, index=language_options.index(language),
            key='widget_lang_select_key', on_change=language_change_callback,
            label_visibility="collapsed"
        )

    display_conversation(st.session_state.conversation, language, settings)

    st.divider()

    st.audio_input(ui_translator("mic_label", language), key="mic_recording", on_change=transcribe_callback)
    if st.session_state.speech_notice:
        st.warning(st.session_state.speech_notice)

    with st.form("composer", border=False):
        col_input, col_send = st.columns([5, 1], vertical_alignment="bottom")
        with col_input:
            st.text_input(
                ui_translator("input_label", language), key="draft",
                placeholder=ui_translator("input_placeholder", language),
                label_visibility="collapsed"
            )
        with col_send:
            send_label = ui_translator("send_button_busy" if st.session_state.loading else "send_button", language)
            st.form_submit_button(send_label, key="send_button", on_click=send_callback,
                                  disabled=st.session_state.loading)

    if len(st.session_state.conversation):
        st.button(ui_translator("clear_chat_button", language), key="clear_chat_button", on_click=clear_chat_history)

    if st.session_state.pending_query:
        query = st.session_state.pending_query
        with st.spinner(ui_translator("thinking", language)):
            try:
                result = ask_backend(query, language, settings['api_url'], timeout=settings['timeout'])
                logger.info(f"AI Response status: {result['status']}. Length: {len(result['response_text'])}")
                reply = st.session_state.conversation.add(result['response_text'], from_user=False)
                if reply.content:
                    st.session_state.pending_speech = len(st.session_state.conversation) - 1
            finally:
                st.session_state.pending_query = None
                st.session_state.loading = False
        st.rerun()


if __name__ == "__main__":
    logger.info("--- Starting Agri-Sakha Streamlit App ---")
    main()
