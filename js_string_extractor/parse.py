import logging
import math
import re

import tree_sitter_javascript
from tree_sitter import Language, Parser

from .errors import ParseError
from .parser import extension_of, parsers as default_parsers
from .syntax import Call, Identifier, Literal, MemberAccess, Other


log = logging.getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

ESCAPE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}"
    r"|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n|.)", re.DOTALL)
SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}
LINE_CONTINUATIONS = {"\n", "\r", "\r\n", "\u2028", "\u2029"}

_parser = None


def get_parser():
    global _parser
    if _parser is None:
        _parser = Parser(JS_LANGUAGE)
    return _parser


def _replace_escape(match):
    sequence = match.group(1)
    if sequence in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[sequence]
    if sequence in LINE_CONTINUATIONS:
        return ""
    if sequence.startswith("u{"):
        return chr(int(sequence[2:-1], 16))
    if sequence[0] in "ux" and len(sequence) > 1:
        return chr(int(sequence[1:], 16))
    if sequence.isdigit() and sequence[0] in "01234567":
        return chr(int(sequence, 8))
    return sequence


def unescape(text):
    """Value of the body of a JavaScript string literal."""
    value = ESCAPE.sub(_replace_escape, text)
    if any("\ud800" <= char <= "\udfff" for char in value):
        # join "\uD83D\uDE00"-style surrogate pairs into one code point
        value = value.encode("utf-16", "surrogatepass") \
            .decode("utf-16", "surrogatepass")
    return value


def number(text):
    text = text.replace("_", "").rstrip("n")
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def comment_lines(text):
    if text.startswith("//"):
        return [text[2:].strip()] if text[2:].strip() else []
    if text.startswith("/*"):
        text = text[2:-2]
    lines = [line.strip().lstrip("*").strip() for line in text.splitlines()]
    return [line for line in lines if line]


def _text(node):
    return node.text.decode("utf-8")


def _line(node):
    return node.start_point[0] + 1


def _named(node):
    return [child for child in node.named_children if child.type != "comment"]


def leading_comments(arguments):
    """Comments between the opening parenthesis and the first argument."""
    comments = []
    for child in arguments.children:
        if child.type == "comment":
            comments += comment_lines(_text(child))
        elif child.is_named:
            break
    return comments


def plan(node):
    """
    Decide how a tree-sitter node becomes a node variant.

    Returns the tree-sitter children that must be converted first and a
    function building the variant from their converted values.
    """
    kind = node.type
    line = _line(node)

    if kind == "parenthesized_expression":
        inner = _named(node)
        if len(inner) == 1:
            return inner, lambda done: done[0]
    elif kind in ("identifier", "this", "super"):
        return [], lambda done: Identifier(line, _text(node))
    elif kind == "member_expression":
        obj = node.child_by_field_name("object")
        prop = node.child_by_field_name("property")
        if obj is not None and prop is not None:
            return [obj], lambda done: MemberAccess(line, done[0], _text(prop))
    elif kind == "call_expression":
        callee = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        # tagged templates carry a template_string instead of arguments
        if callee is not None and arguments is not None and \
                arguments.type == "arguments":
            return [callee] + _named(arguments), lambda done: Call(
                line, done[0], done[1:], leading_comments(arguments))
    elif kind == "string":
        return [], lambda done: Literal(line, unescape(_text(node)[1:-1]))
    elif kind == "template_string":
        if not any(child.type == "template_substitution"
                   for child in node.named_children):
            return [], lambda done: Literal(
                line, unescape(_text(node)[1:-1]))
    elif kind == "number":
        return [], lambda done: Literal(line, number(_text(node)))
    elif kind in ("true", "false"):
        return [], lambda done: Literal(line, kind == "true")
    elif kind == "null":
        return [], lambda done: Literal(line, None)

    return _named(node), lambda done: Other(line, kind, done)


def convert(root):
    """
    Turn a tree-sitter tree into the extractor's own node variants.
    Children are built before their parents on an explicit stack; tree
    depth is bounded by memory, not by the recursion limit.
    """
    pending, build = plan(root)
    stack = [(pending, build, [])]
    while True:
        pending, build, done = stack[-1]
        if len(done) < len(pending):
            child_pending, child_build = plan(pending[len(done)])
            stack.append((child_pending, child_build, []))
            continue
        stack.pop()
        node = build(done)
        if not stack:
            return node
        stack[-1][2].append(node)


def first_error_line(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return _line(node)
        stack.extend(reversed(node.children))
    return _line(root)


def parse_source(path, text, parsers=None):
    """
    Transform the text of a source file with its registered parser and
    build its syntax tree.
    Raises ParseError when either step fails.
    """
    if parsers is None:
        parsers = default_parsers
    transform = parsers[extension_of(path)]
    try:
        code = transform(text)
    except Exception as error:
        raise ParseError(path, f"{type(error).__name__}: {error}") from error

    tree = get_parser().parse(code.encode("utf-8"))
    if tree.root_node.has_error:
        raise ParseError(
            path, f"syntax error at line {first_error_line(tree.root_node)}")

    return convert(tree.root_node)


def read_source(path):
    """Read a source file; OSError is left to the caller."""
    log.info("reading %s", path)
    with open(path, encoding="utf-8", errors="replace") as fp:
        return fp.read()
