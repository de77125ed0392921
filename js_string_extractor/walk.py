import logging
import os
import stat

from .parser import extension_of


log = logging.getLogger(__name__)


def walk_files(path, parsers, on_error):
    """
    Yield every file under `path` that has a registered parser,
    recursing into subdirectories in the order the filesystem lists them.

    A path that cannot be accessed is reported through
    `on_error(path, error)` and contributes nothing; its siblings are
    still visited.
    """
    try:
        names = None
        if stat.S_ISDIR(os.stat(path).st_mode):
            names = os.listdir(path)
    except OSError as error:
        on_error(path, error)
        return

    if names is None:
        if extension_of(path) in parsers:
            yield path
        else:
            log.debug("skipping %s", path)
        return

    for name in names:
        yield from walk_files(os.path.join(path, name), parsers, on_error)
