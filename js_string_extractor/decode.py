import dataclasses
import re


PLACEHOLDER = re.compile(r"\{([^}]+)\}")


def decode_text(text, comments):
    """
    Rewrite "{name#comment}" placeholders in `text` to "{name}".
    Each non-empty comment is appended to `comments` as
    "#. name - comment". The annotation is plain text; nothing in it is
    evaluated.
    """
    def replace(match):
        name, _, comment = match.group(1).partition("#")
        name = name.strip()
        comment = comment.strip()
        if comment:
            comments.append(f"#. {name} - {comment}")
        return "{" + name + "}"

    return PLACEHOLDER.sub(replace, text)


def decode_message(message):
    """Return a copy of the message with canonical placeholders."""
    payload = message.payload
    comments = list(message.comments)

    if type(payload) is str:
        payload = decode_text(payload, comments)
    elif type(payload) is tuple and \
            all(type(text) is str for text in payload):
        payload = tuple(decode_text(text, comments) for text in payload)

    return dataclasses.replace(message, comments=comments, payload=payload)
