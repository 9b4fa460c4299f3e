#! /usr/bin/python
import logging

# ------------ Extraction configuration ------------

# Minimum sequence of letters (aA-zZ and underscore) for a string to be considered
DEFAULT_MIN_SEQUENCE = 4

# Printable 7-bit ASCII range, inclusive
PRINTABLE_FIRST = 32
PRINTABLE_LAST = 126

# NUL, LF and CR always end a string, even though they are outside the printable range anyway
SEPARATOR_BYTES = (0x00, 0x0A, 0x0D)

# Counted as letters in addition to A-Z and a-z
LETTER_EXTRA_CHARS = '_'

# ------------ Output configuration ------------

OUTPUT_ENCODING = 'ascii'
OUTPUT_NEWLINE = '\n'

# ------------ Logging configuration ------------

# Diagnostics always go to stderr, stdout is reserved for the extracted strings
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL = logging.WARNING

# Bytes handed to libmagic when describing the input file
MAGIC_HEADER_SIZE = 2048
