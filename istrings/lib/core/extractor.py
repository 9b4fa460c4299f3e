#! /usr/bin/python
import logging
from collections import namedtuple

from istrings.conf import config

ExtractionReport = namedtuple('ExtractionReport', ['strings', 'candidates', 'rejected', 'duplicates'])


def is_separator(byte):
    """
    Check whether a byte ends the current string
    :param byte: integer value of the byte (0-255)
    :return: True for NUL, CR, LF and anything outside printable 7-bit ASCII
    """
    if byte in config.SEPARATOR_BYTES:
        return True
    return not (config.PRINTABLE_FIRST <= byte <= config.PRINTABLE_LAST)


def is_letter(char):
    return ('A' <= char <= 'Z') or ('a' <= char <= 'z') or char in config.LETTER_EXTRA_CHARS


def iter_candidates(buffer):
    """
    Split a byte buffer into maximal runs of printable ASCII
    :param buffer: bytes, bytearray or memoryview with the file contents
    :return: generator of non empty candidate strings, in the order they appear in the buffer
    """
    potential_match = []
    for byte in bytes(buffer):
        if is_separator(byte):
            if potential_match:
                yield ''.join(potential_match)
                potential_match = []
            continue
        potential_match.append(chr(byte))

    if potential_match:
        yield ''.join(potential_match)


def tokenize(buffer):
    return list(iter_candidates(buffer))


def count_largest_letter_sequence(candidate):
    """
    Length of the longest run of letters/underscores inside a candidate
    :param candidate: string to score
    :return: the longest run length, 0 when the string has no letters at all
    """
    current = 0
    sequences = []

    for char in candidate:
        if not is_letter(char):
            if current > 0:
                sequences.append(current)
            current = 0
            continue
        current += 1

    if current > 0:
        sequences.append(current)

    return max(sequences) if sequences else 0


def accept_string(candidate, min_sequence):
    # A score of 0 still passes a minimum of 0 or below
    return count_largest_letter_sequence(candidate) >= min_sequence


def scan_matches(candidates, min_sequence):
    """
    Keep accepted candidates, each one once, in the order of their first occurrence
    :param candidates: ordered candidate strings, before filtering
    :param min_sequence: minimum letter sequence for a candidate to be accepted
    :return: tuple of (list of accepted, de-duplicated strings, number of rejected candidates)
    """
    seen = {}
    matches = []
    rejected = 0
    for candidate in candidates:
        emitted = seen.setdefault(candidate, False)
        if not accept_string(candidate, min_sequence):
            rejected += 1
            continue
        if emitted:
            continue
        seen[candidate] = True
        matches.append(candidate)
    return matches, rejected


def unique_matches(candidates, min_sequence):
    matches, _ = scan_matches(candidates, min_sequence)
    return matches


def run_extraction(buffer, min_sequence=config.DEFAULT_MIN_SEQUENCE):
    """
    Full extraction pass over an in memory buffer
    :param buffer: file contents
    :param min_sequence: minimum letter sequence for a string to be reported
    :return: ExtractionReport with the strings to output and some counters for logging
    """
    candidates = tokenize(buffer)
    strings, rejected = scan_matches(candidates, min_sequence)
    duplicates = len(candidates) - rejected - len(strings)

    logging.debug('Found {} candidates, {} rejected, {} duplicates, {} strings (min sequence: {})'.format(
        len(candidates), rejected, duplicates, len(strings), min_sequence))

    return ExtractionReport(strings=strings, candidates=len(candidates), rejected=rejected, duplicates=duplicates)


def extract_strings(buffer, min_sequence=config.DEFAULT_MIN_SEQUENCE):
    return unique_matches(iter_candidates(buffer), min_sequence)
