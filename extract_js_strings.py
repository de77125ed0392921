#!/usr/bin/env python3
'''
Extract translatable strings from JavaScript sources into a POT catalog.

Examples:

    %(prog)s src/ > messages.pot
    %(prog)s --marker=__ --marker=i18n.ngettext -o messages.pot src/

Every call to a marker function (default: __) with a string literal as its
first argument becomes a message. A second string literal argument makes it
a plural message.
'''

import argparse
import logging
import sys

from logging.config import dictConfig

from js_string_extractor.errors import ExtractionException
from js_string_extractor.extractor import Extractor


LOGGING_CONFIG = {
    'formatters': {
        'standard': {'format': '%(levelname)s %(funcName)s: %(message)s'},
    },
    'handlers': {
        'default': {
            'level': 'NOTSET',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'js_string_extractor': {
            'handlers': ['default'],
            'level': 'WARNING',
        },
    },
    'disable_existing_loggers': False,
    'version': 1,
}


log = logging.getLogger('js_string_extractor')


class FailFastHandler(logging.StreamHandler):
    def emit(self, record):
        sys.exit(1)


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    arg_parser.add_argument(
        'path',
        help='Source file or directory to scan')
    arg_parser.add_argument(
        '-m', '--marker', dest='marker', action='append',
        help='function name identifying a translatable string '
        '(default: __); may be given more than once')
    arg_parser.add_argument(
        '-o', '--output', dest='output',
        help='Write the catalog to this file instead of standard output')
    arg_parser.add_argument(
        '--loglevel', dest='loglevel',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help="set verbosity level")
    arg_parser.add_argument(
        '--fail-fast', dest='fail_fast', action='store_true',
        help='Stop immediately after an unreadable path is reported')
    return arg_parser


def main(argv=None):
    args_dict = vars(build_arg_parser().parse_args(argv))

    dictConfig(LOGGING_CONFIG)
    log.setLevel(getattr(logging, args_dict.get('loglevel')))

    if args_dict.get('fail_fast'):
        failfast_handler = FailFastHandler()
        failfast_handler.setLevel(logging.ERROR)
        log.addHandler(failfast_handler)

    extractor = Extractor(markers=args_dict.get('marker'))
    output = args_dict.get('output')
    try:
        if output:
            with open(output, 'w', encoding='utf-8') as fp:
                extractor.run(args_dict['path'], fp)
        else:
            extractor.run(args_dict['path'], sys.stdout)
    except ExtractionException as exception:
        return exception

    return 0


if __name__ == '__main__':
    sys.exit(main())
