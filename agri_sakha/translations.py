import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

LANGUAGES = {
    "en": "English",
    "hi": "हिन्दी",
    "gu": "ગુજરાતી",
}

SPEECH_LOCALES = {
    "en": "en-US",
    "hi": "hi-IN",
    "gu": "gu-IN",
}

NO_VALID_RESPONSE = "Sorry, I couldn't get a valid response."
CONNECTION_ERROR = "Error connecting to the AI."


translations = {
    "en": {
        "page_title": "🌱 Agri-Sakha", "language_label": "Language",
        "input_placeholder": "Type your message...", "input_label": "Message",
        "send_button": "Send", "send_button_busy": "...", "thinking": "Thinking...",
        "mic_label": "🎤 Speak your question",
        "transcript_empty_warning": "Could not understand the audio. Please try again.",
        "transcript_error": "Speech recognition failed: {err}",
        "tts_button_label": "▶️ Play Audio",
        "tts_button_tooltip": "Read aloud in {lang}",
        "tts_generating_spinner": "Generating audio in {lang}...",
        "tts_error_generation": "Could not generate audio.",
        "clear_chat_button": "🗑️ Clear chat",
        "empty_chat_info": "Ask anything about crops, soil, weather or farming practices.",
    },
    "hi": {
        "page_title": "🌱 कृषि-सखा", "language_label": "भाषा",
        "input_placeholder": "अपना संदेश लिखें...", "input_label": "संदेश",
        "send_button": "भेजें", "thinking": "सोच रहा है...",
        "mic_label": "🎤 अपना प्रश्न बोलें",
        "transcript_empty_warning": "ऑडियो समझ नहीं आया। कृपया फिर से प्रयास करें।",
        "transcript_error": "वाक् पहचान विफल: {err}",
        "tts_button_label": "▶️ ऑडियो चलाएं",
        "tts_button_tooltip": "{lang} में पढ़कर सुनाएं",
        "tts_generating_spinner": "{lang} में ऑडियो बनाया जा रहा है...",
        "tts_error_generation": "ऑडियो नहीं बन सका।",
        "clear_chat_button": "🗑️ चैट साफ़ करें",
        "empty_chat_info": "फसल, मिट्टी, मौसम या खेती के बारे में कुछ भी पूछें।",
    },
    "gu": {
        "page_title": "🌱 કૃષિ-સખા", "language_label": "ભાષા",
        "input_placeholder": "તમારો સંદેશ લખો...", "input_label": "સંદેશ",
        "send_button": "મોકલો", "thinking": "વિચારી રહ્યું છે...",
        "mic_label": "🎤 તમારો પ્રશ્ન બોલો",
        "transcript_empty_warning": "ઓડિયો સમજાયો નહીં. કૃપા કરીને ફરી પ્રયાસ કરો.",
        "transcript_error": "વાણી ઓળખ નિષ્ફળ: {err}",
        "tts_button_label": "▶️ ઓડિયો વગાડો",
        "tts_button_tooltip": "{lang} માં વાંચી સંભળાવો",
        "tts_generating_spinner": "{lang} માં ઓડિયો બની રહ્યો છે...",
        "tts_error_generation": "ઓડિયો બની શક્યો નહીં.",
        "clear_chat_button": "🗑️ ચેટ સાફ કરો",
        "empty_chat_info": "પાક, જમીન, હવામાન કે ખેતી વિશે કંઈપણ પૂછો.",
    },
}


def normalize_language(language):
    if language in LANGUAGES:
        return language
    logger.warning(f"Unknown language '{language}'. Falling back to '{DEFAULT_LANGUAGE}'.")
    return DEFAULT_LANGUAGE


def language_name(language):
    return LANGUAGES[normalize_language(language)]


def _format_translation(template, **kwargs):
    formatted_kwargs = {k: ("" if v is None else v) for k, v in kwargs.items()}
    try:
        return str(template).format(**formatted_kwargs)
    except KeyError as e:
        logger.warning(f"Translator: Missing format key '{e}' in template. Template: '{template}' Kwargs: {kwargs}")
        return template
    except (ValueError, IndexError) as e:
        logger.error(f"Translator: Unexpected format error with args {formatted_kwargs}: {e}. Template: '{template}'")
        return template


def ui_translator(key, language=DEFAULT_LANGUAGE, default=None, **kwargs):
    if language not in translations:
        logger.warning(f"Selected language '{language}' not found in translations. Falling back to English.")
        language = DEFAULT_LANGUAGE

    template = translations[language].get(key)
    if template is None:
        template = translations[DEFAULT_LANGUAGE].get(key)
        if template is None:
            logger.debug(f"Translation key '{key}' not found for language '{language}' or fallback 'en'.")
            template = default if default is not None else f"[{key} NOT FOUND in {language} or en]"

    return _format_translation(template, **kwargs)
