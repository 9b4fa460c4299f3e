#! /usr/bin/python
import argparse
import logging
import sys

import pendulum

from istrings.conf import config
from istrings.lib.common.exceptions import IStringsError, UsageError
from istrings.lib.core.extractor import run_extraction
from istrings.lib.utils.file_utils import load_file_contents, open_output, write_strings, calc_sha256, \
    describe_file

DESCRIPTION = 'Tries to find printable strings inside a binary file. ' \
              'If no output file is provided output is printed to stdout.'


def build_parser():
    parser = argparse.ArgumentParser(prog='istrings', description=DESCRIPTION)
    parser.add_argument('input_file', nargs='?', help="The binary file you want to scan")
    parser.add_argument('output_file', nargs='?', help="Write the strings to this file instead of stdout")
    parser.add_argument('--min', dest='min_sequence', metavar='N', nargs='?', const=None,
                        help="Minimum sequence of letters (aA-zZ) for a string to be considered. "
                             "Defaults to {}.".format(config.DEFAULT_MIN_SEQUENCE))
    parser.add_argument('-v', '--verbose', action='store_true', help="Log extraction details to stderr")
    return parser


def parse_min_sequence(value):
    """
    Parse the --min value, anything that is not a base 10 integer falls back to the default
    :param value: raw option value, may be None
    :return: the minimum letter sequence to use
    """
    if value is None:
        return config.DEFAULT_MIN_SEQUENCE
    try:
        return int(value.strip(), 10)
    except ValueError:
        logging.debug('Ignoring invalid --min value {!r}, using {}'.format(value, config.DEFAULT_MIN_SEQUENCE))
        return config.DEFAULT_MIN_SEQUENCE


def setup_logging(verbose=False):
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if verbose else config.LOG_LEVEL,
                        format=config.LOG_FORMAT)


def check_input_filename(file_name):
    # Check for a flag in the wrong place/empty string
    if not file_name or file_name.startswith('-'):
        raise UsageError('Invalid filename "{}"!'.format(file_name or ''))


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_usage(sys.stderr)
        return 1

    args, unknown = parser.parse_known_args(argv)
    setup_logging(args.verbose)

    # The output file is the second token, anything starting with '-' there is an option
    if args.output_file is not None and args.output_file.startswith('-'):
        unknown.append(args.output_file)
        args.output_file = None

    if unknown:
        logging.warning('Ignoring unrecognized arguments: {}'.format(' '.join(unknown)))

    min_sequence = parse_min_sequence(args.min_sequence)

    try:
        # The input file must be the first token, not an option
        check_input_filename(argv[0])

        file_contents = load_file_contents(args.input_file)
        if logging.getLogger().isEnabledFor(logging.INFO):
            logging.info('Scanning {} ({} bytes, sha256: {}, type: {})'.format(
                args.input_file, len(file_contents), calc_sha256(file_contents), describe_file(file_contents)))

        with open_output(args.output_file) as out:
            started = pendulum.now()
            logging.info('Extraction started at {}'.format(started.isoformat()))

            report = run_extraction(file_contents, min_sequence)
            write_strings(out, report.strings)

            logging.info('Wrote {} strings in {:.3f} seconds'.format(
                len(report.strings), (pendulum.now() - started).total_seconds()))
    except IStringsError as ex:
        logging.error(str(ex))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
