import html

from agri_sakha.conversation import is_user

CHAT_CSS = """
<style>
    .agri-header {
        background: #166534;
        color: #ffffff;
        padding: 1rem 1.25rem;
        border-radius: 0.5rem;
        font-size: 1.5rem;
        font-weight: 600;
    }

    .agri-row {
        width: 100%;
        display: flex;
        margin: 1rem 0;
    }

    .agri-row.user { justify-content: flex-end; }
    .agri-row.assistant { justify-content: flex-start; }

    .agri-bubble {
        max-width: 75%;
        padding: 1rem 1.25rem;
        border-radius: 1rem;
        border: 1px solid;
        box-shadow: 0 4px 6px rgba(0,0,0,0.1);
        font-weight: 500;
        white-space: pre-wrap;
        word-wrap: break-word;
        color: #000000;
    }

    .agri-bubble.user {
        background: #dcfce7;
        border-color: #86efac;
        border-bottom-right-radius: 0;
    }

    .agri-bubble.assistant {
        background: #fef9c3;
        border-color: #fde047;
        border-bottom-left-radius: 0;
    }
</style>
"""


def role_of(message):
    return "user" if is_user(message) else "assistant"


def bubble_html(message):
    role = role_of(message)
    text = html.escape(message.content).replace("\n", "<br>")
    return f'<div class="agri-row {role}"><div class="agri-bubble {role}">{text}</div></div>'


def header_html(title):
    return f'<div class="agri-header">{html.escape(title)}</div>'
