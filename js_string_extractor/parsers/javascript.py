def parse_javascript(text):
    return text
