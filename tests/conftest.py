import io
import logging

import pytest

from js_string_extractor.extractor import Extractor


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the logging setup done by the command line entry point."""
    yield
    log = logging.getLogger("js_string_extractor")
    for handler in log.handlers[:]:
        log.removeHandler(handler)
    log.setLevel(logging.NOTSET)


@pytest.fixture
def source_tree(tmp_path):
    """Write {relative path: content} under a fresh directory."""
    def write(files):
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path
    return write


@pytest.fixture
def run_extractor():
    """Run a full extraction and return the catalog text and the catalog."""
    def run(path, markers=None):
        fp = io.StringIO()
        catalog = Extractor(markers=markers).run(str(path), fp)
        return fp.getvalue(), catalog
    return run
