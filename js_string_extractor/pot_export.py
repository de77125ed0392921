import json
import re

from .errors import CatalogError
from .message import is_plural


# written even when the catalog is empty
HEADER = ('msgid ""\n'
          'msgstr ""\n'
          '"Content-Type: text/plain; charset=UTF-8\\n"\n')

# unpaired surrogates cannot be encoded as UTF-8
SURROGATE = re.compile("[\ud800-\udfff]")


def escape_surrogates(text):
    return SURROGATE.sub(lambda match: "\\u%04x" % ord(match.group()), text)


def format_msg(text):
    return escape_surrogates(json.dumps(text, ensure_ascii=False))


def format_entry(entry):
    """
    Render one catalog entry: its comment lines followed by the message
    block and a blank line.
    Raises CatalogError if the payload is not a string or a string pair.
    """
    lines = [escape_surrogates(comment) for comment in entry.comments]
    payload = entry.payload

    if type(payload) is str:
        lines.append(f"msgid {format_msg(payload)}\n"
                     "msgstr \"\"")
    elif is_plural(payload):
        lines.append(f"msgid {format_msg(payload[0])}\n"
                     f"msgid_plural {format_msg(payload[1])}\n"
                     "msgstr[0] \"\"\n"
                     "msgstr[1] \"\"")
    else:
        raise CatalogError(entry.origin, payload)

    return "\n".join(lines) + "\n\n"


def write_header(fp):
    fp.write(HEADER + "\n")


def write_to_pot(fp, catalog):
    """
    Write every entry of the catalog in insertion order. Entries written
    before an invalid one stay in `fp`.
    """
    for entry in catalog:
        fp.write(format_entry(entry))
