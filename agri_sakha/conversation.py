"""Chat message state for the Agri-Sakha screen.

Messages are stored as ``HumanMessage`` (farmer) and ``AIMessage``
(assistant) objects, in the order they were added.
"""
import re
import html
import logging
from collections import namedtuple

from langchain_core.messages import HumanMessage, AIMessage

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"<[A-Za-z/!][^>]*>")
MARKDOWN_PATTERN = re.compile(r"[*_`~]")

MessageGroup = namedtuple("MessageGroup", ["key", "messages"])


def clean_text(text):
    """Reduce backend text to plain display/speech text.

    Markup is dropped to its text content, markdown emphasis characters are
    removed and the result is trimmed.
    """
    if text is None:
        return ""
    plain = html.unescape(TAG_PATTERN.sub("", str(text)))
    plain = MARKDOWN_PATTERN.sub("", plain)
    return plain.strip()


def is_user(message):
    return isinstance(message, HumanMessage)


def make_message(text, from_user=True):
    content = clean_text(text)
    return HumanMessage(content=content) if from_user else AIMessage(content=content)


def group_messages(messages):
    groups = []
    i = 0
    while i < len(messages):
        current = messages[i]
        following = messages[i + 1] if i + 1 < len(messages) else None
        if is_user(current) and following is not None and not is_user(following):
            groups.append(MessageGroup(key=i, messages=[current, following]))
            i += 2
        else:
            groups.append(MessageGroup(key=i, messages=[current]))
            i += 1
    return groups


class Conversation:
    def __init__(self, messages=None):
        self.messages = list(messages) if messages else []

    def __len__(self):
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)

    def add(self, text, from_user=True):
        message = make_message(text, from_user=from_user)
        self.messages.append(message)
        role = "user" if from_user else "assistant"
        logger.debug(f"Added {role} message #{len(self.messages)} ({len(message.content)} chars).")
        return message

    def clear(self):
        self.messages = []
        logger.info("Chat history cleared.")

    def groups(self):
        return group_messages(self.messages)

    def last_assistant(self):
        for message in reversed(self.messages):
            if not is_user(message):
                return message
        return None
