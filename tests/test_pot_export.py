import io
import json

import polib
import pytest

from js_string_extractor.errors import CatalogError
from js_string_extractor.message import Catalog, Message
from js_string_extractor.pot_export import (
    HEADER, format_entry, write_header, write_to_pot)


def catalog_of(*payloads):
    catalog = Catalog()
    for line, payload in enumerate(payloads, 1):
        catalog.add(Message(f"#: app.js:{line}", [], payload, "app.js"))
    return catalog


def render(catalog):
    fp = io.StringIO()
    write_header(fp)
    write_to_pot(fp, catalog)
    return fp.getvalue()


def test_header_only_for_empty_catalog():
    assert render(Catalog()) == (
        'msgid ""\n'
        'msgstr ""\n'
        '"Content-Type: text/plain; charset=UTF-8\\n"\n'
        '\n')


def test_singular_and_plural_blocks():
    text = render(catalog_of("Hello", ("1 item", "{n} items")))
    assert text == HEADER + (
        '\n'
        '#: app.js:1\n'
        'msgid "Hello"\n'
        'msgstr ""\n'
        '\n'
        '#: app.js:2\n'
        'msgid "1 item"\n'
        'msgid_plural "{n} items"\n'
        'msgstr[0] ""\n'
        'msgstr[1] ""\n'
        '\n')


def test_escaping_round_trips():
    original = 'He said "hi"\nthen left \\ behind\t.'
    block = format_entry(next(iter(catalog_of(original))))
    msgid_line = block.splitlines()[1]
    assert msgid_line.startswith("msgid ")
    assert "\n" not in msgid_line
    assert json.loads(msgid_line[len("msgid "):]) == original


def test_catalog_reads_back_with_polib():
    catalog = catalog_of('Say "cheese"\n', ("ein Ä", "zwei Ä"), "Hello")
    pofile = polib.pofile(render(catalog))
    assert pofile.metadata["Content-Type"] == "text/plain; charset=UTF-8"
    entries = {entry.msgid: entry for entry in pofile}
    assert set(entries) == {'Say "cheese"\n', "ein Ä", "Hello"}
    assert entries["ein Ä"].msgid_plural == "zwei Ä"
    assert entries["Hello"].occurrences == [("app.js", "3")]


def test_invalid_payload_stops_after_earlier_entries():
    catalog = catalog_of("Fine", None, "Never written")
    fp = io.StringIO()
    write_header(fp)
    with pytest.raises(CatalogError) as excinfo:
        write_to_pot(fp, catalog)
    assert excinfo.value.path == "app.js"
    assert "app.js" in str(excinfo.value)
    assert fp.getvalue() == HEADER + (
        '\n#: app.js:1\nmsgid "Fine"\nmsgstr ""\n\n')


def test_lone_surrogate_is_escaped():
    original = "\ud800 x"
    block = format_entry(next(iter(catalog_of(original))))
    block.encode("utf-8")
    msgid_line = block.splitlines()[1]
    assert msgid_line == 'msgid "\\ud800 x"'
    assert json.loads(msgid_line[len("msgid "):]) == original


def test_lone_surrogate_in_comment_is_escaped():
    catalog = Catalog()
    catalog.add(Message("#: app.js:1", ["#. n - \udc00"], "{n}", "app.js"))
    block = format_entry(next(iter(catalog)))
    block.encode("utf-8")
    assert block.splitlines()[1] == "#. n - \\udc00"
