from .message import Message
from .syntax import Call, Identifier, Literal, MemberAccess, walk


def split_marker(marker):
    return marker.split(".")


def callee_segments(node):
    """
    Names of an identifier chain such as `a.b.c`, or None when the callee
    is anything else (a call result, a subscript, ...).
    """
    segments = []
    while isinstance(node, MemberAccess):
        segments.append(node.property)
        node = node.object
    if not isinstance(node, Identifier):
        return None
    segments.append(node.name)
    return segments[::-1]


def is_marker_call(node, markers):
    if not isinstance(node, Call):
        return False
    # a bare __() is a reference, not a message
    if not node.arguments:
        return False
    segments = callee_segments(node.callee)
    if not segments:
        return False
    for marker in markers:
        if segments[0] == marker[0] and segments[-1] == marker[-1] and \
                len(segments) >= len(marker):
            return True
    return False


def literal_value(node):
    if isinstance(node, Literal):
        return node.value
    return None


def is_string(node):
    return isinstance(node, Literal) and type(node.value) is str


def extract_messages(tree, origin, markers):
    """
    Return a Message for every marker call in `tree`, in the order the
    calls are visited.

    Parameters:
        tree: root node from parse_source()
        origin (str): path of the source file, used in location comments
        markers: marker chains already split by split_marker()
    """
    results = []
    for node in walk(tree):
        if not is_marker_call(node, markers):
            continue

        args = node.arguments
        if len(args) > 1 and is_string(args[1]):
            payload = (literal_value(args[0]), args[1].value)
        else:
            payload = literal_value(args[0])

        results.append(Message(
            location=f"#: {origin}:{node.line}",
            comments=[f"#. {comment}" for comment in node.comments],
            payload=payload,
            origin=origin))
    return results
