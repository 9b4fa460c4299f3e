import hashlib
import importlib.util
import logging
import os
import sys
from contextlib import contextmanager

from istrings.conf import config
from istrings.lib.common.exceptions import InputFileError, OutputFileError


def calc_sha256(buffer):
    return hashlib.sha256(buffer).hexdigest()


def describe_file(buffer):
    """
    Ask libmagic what the input looks like, only used for logging
    :param buffer: file contents
    :return: libmagic description, or 'unknown' if the libmagic shared library could not be loaded
    """
    try:
        import magic
    except ImportError as ex:
        # python-magic itself is missing
        if importlib.util.find_spec('magic') is None:
            raise
        logging.debug('Could not load libmagic: {}'.format(ex))
        return 'unknown'

    return magic.from_buffer(bytes(buffer[:config.MAGIC_HEADER_SIZE]))


def load_file_contents(file_path):
    """
    Read a whole file into memory
    :param file_path: path of the file to scan
    :return: the file contents as bytes
    """
    try:
        f = open(file_path, 'rb')
    except OSError as ex:
        raise InputFileError('Failed to open "{}": {}'.format(file_path, ex.strerror or ex))

    with f:
        try:
            file_length = os.fstat(f.fileno()).st_size
            file_contents = f.read(file_length) if file_length > 0 else b''
        except OSError as ex:
            raise InputFileError('Failed to read "{}": {}'.format(file_path, ex.strerror or ex))

    if file_length <= 0:
        raise InputFileError('Error getting length or empty file "{}"!'.format(file_path))

    if len(file_contents) != file_length:
        logging.warning('Failed to read whole file "{}" ({} of {} bytes).'.format(
            file_path, len(file_contents), file_length))

    return file_contents


@contextmanager
def open_output(file_path=None):
    """
    Destination of the extracted strings
    :param file_path: output file, stdout is used when None
    :return: text stream, closed on exit unless it is stdout
    """
    if not file_path:
        yield sys.stdout
        return

    try:
        out_file = open(file_path, 'w', encoding=config.OUTPUT_ENCODING, newline=config.OUTPUT_NEWLINE)
    except OSError as ex:
        raise OutputFileError('Problems opening output file "{}": {}'.format(file_path, ex.strerror or ex))

    with out_file:
        yield out_file


def write_strings(stream, strings):
    for found_str in strings:
        stream.write(found_str + config.OUTPUT_NEWLINE)
