import logging
import os

from .decode import decode_message
from .extract import extract_messages, split_marker
from .message import Catalog
from .parse import parse_source, read_source
from .parser import parsers as default_parsers
from .pot_export import write_header, write_to_pot
from .walk import walk_files


log = logging.getLogger(__name__)

DEFAULT_MARKERS = ["__"]


class Extractor:
    '''
    One extraction run: walks a source tree, collects marker strings and
    writes them as a POT catalog
    '''
    def __init__(self, markers=None, parsers=None):
        if not markers:
            markers = DEFAULT_MARKERS
        if parsers is None:
            parsers = default_parsers
        self.markers = [split_marker(marker) for marker in markers]
        self.parsers = parsers

    def report_error(self, path, error):
        log.error("cannot read %s: %s", path, error)

    def extract_file(self, path):
        """
        Decoded messages of a single source file.
        OSError from reading and ParseError from parsing propagate.
        """
        tree = parse_source(path, read_source(path), self.parsers)
        messages = extract_messages(tree, path, self.markers)
        log.debug("%d message(s) in %s", len(messages), path)
        return [decode_message(message) for message in messages]

    def collect(self, path, catalog=None):
        """Merge the messages of every file under `path` into a catalog."""
        if catalog is None:
            catalog = Catalog()
        for file_path in walk_files(os.path.normpath(path), self.parsers,
                                    self.report_error):
            try:
                messages = self.extract_file(file_path)
            except OSError as error:
                self.report_error(file_path, error)
                continue
            for message in messages:
                catalog.add(message)
        return catalog

    def run(self, path, fp):
        """
        Write the catalog for everything under `path` to `fp`.

        The header goes out before any file is read, so a ParseError or
        CatalogError leaves a partial catalog behind.
        """
        write_header(fp)
        catalog = self.collect(path)
        log.info("writing %d message(s)", len(catalog))
        write_to_pot(fp, catalog)
        return catalog
