import re


SCRIPT = re.compile(r"<script\b([^>]*)>(.*?)</script\s*>",
                    re.IGNORECASE | re.DOTALL)
SCRIPT_TYPE = re.compile(r"""\btype\s*=\s*["']?([^"'\s>]+)""", re.IGNORECASE)
JAVASCRIPT_TYPES = {
    "application/ecmascript",
    "module",
    "text/babel",
    "text/ecmascript",
    "text/jsx",
}


def is_javascript(attributes):
    match = SCRIPT_TYPE.search(attributes)
    if not match:
        return True
    script_type = match.group(1).lower()
    return script_type.endswith("javascript") or \
        script_type in JAVASCRIPT_TYPES


def blank(text):
    # keep the line count so locations still point into the HTML file
    return "\n" * text.count("\n") + ";"


def parse_html(text):
    """
    Keep the bodies of inline JavaScript <script> elements and blank out
    everything else, line for line.
    """
    chunks = []
    pos = 0
    for match in SCRIPT.finditer(text):
        if not is_javascript(match.group(1)):
            continue
        chunks.append(blank(text[pos:match.start(2)]))
        chunks.append(match.group(2))
        pos = match.end(2)
    chunks.append(blank(text[pos:]))
    return "".join(chunks)
