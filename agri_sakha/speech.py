import io
import logging
from collections import namedtuple

import speech_recognition as sr
from gtts import gTTS, gTTSError
from gtts.lang import tts_langs

from agri_sakha.translations import SPEECH_LOCALES, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

Voice = namedtuple("Voice", ["lang", "locale"])

VOICES = {
    "en": Voice("en", "en-US"),
    "hi": Voice("hi", "hi-IN"),
    "gu": Voice("gu", "gu-IN"),
}


class SpeechServiceError(Exception):
    """Raised when a recording cannot be turned into text."""


def speech_locale(language):
    return SPEECH_LOCALES.get(language, SPEECH_LOCALES[DEFAULT_LANGUAGE])


def available_voices():
    try:
        return set(tts_langs())
    except Exception as e:
        logger.error(f"Could not list gTTS languages: {e}", exc_info=True)
        return {VOICES[DEFAULT_LANGUAGE].lang}


def select_voice(language, available=None):
    if available is None:
        available = available_voices()

    voice = VOICES.get(language, VOICES[DEFAULT_LANGUAGE])
    if voice.lang in available:
        return voice

    if language == "gu" and VOICES["hi"].lang in available:
        logger.warning("Gujarati voice not found, using Hindi voice as fallback.")
        return VOICES["hi"]

    logger.warning(f"No voice found for '{language}', using English.")
    return VOICES[DEFAULT_LANGUAGE]


def synthesize(text, language, available=None):
    if not text or not text.strip():
        logger.warning("synthesize called with empty text.")
        return None

    voice = select_voice(language, available)
    try:
        tts = gTTS(text=text, lang=voice.lang, slow=False)
        audio_fp = io.BytesIO()
        tts.write_to_fp(audio_fp)
        audio_fp.seek(0)
        logger.info(f"Successfully generated audio bytes in '{voice.lang}'.")
        return audio_fp
    except gTTSError as e:
        logger.error(f"gTTS failed to generate audio ({voice.lang}): {e}", exc_info=True)
        return None
    except Exception as e:
        logger.error(f"Error generating TTS audio ({voice.lang}): {e}", exc_info=True)
        return None


def transcribe(audio_file, language, recognizer=None):
    """Turn a WAV recording into text in the language's locale.

    Returns an empty string when the speech could not be understood.
    """
    if audio_file is None:
        return ""

    recognizer = recognizer or sr.Recognizer()
    locale = speech_locale(language)
    try:
        with sr.AudioFile(audio_file) as source:
            audio = recognizer.record(source)
    except (ValueError, EOFError, OSError) as e:
        logger.error(f"Could not read recorded audio: {e}", exc_info=True)
        raise SpeechServiceError(f"Unreadable audio: {e}") from e

    try:
        transcript = recognizer.recognize_google(audio, language=locale)
    except sr.UnknownValueError:
        logger.info(f"Speech not understood ({locale}).")
        return ""
    except sr.RequestError as e:
        logger.error(f"Speech recognition service error ({locale}): {e}", exc_info=True)
        raise SpeechServiceError(str(e)) from e

    transcript = (transcript or "").strip()
    logger.info(f"Transcribed {len(transcript)} chars ({locale}).")
    return transcript
