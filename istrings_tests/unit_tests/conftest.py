import os
import pytest

from istrings.conf import config


@pytest.fixture(scope='session')
def samples_path(tmpdir_factory):
    return tmpdir_factory.mktemp('samples')


@pytest.fixture
def sample_bytes():
    # Looks a bit like a PE header followed by an import table
    return (b'MZ\x90\x00\x03\x00\x00\x00\x04\x00'
            b'!This program cannot be run in DOS mode.\r\r\n$\x00\x00'
            b'.text\x00\x00\x00.rdata\x00\x00'
            b'KERNEL32.dll\x00CreateFileW\x00\xff\xfe'
            b'CreateFileW\x00GetLastError\x00'
            b'12345678\x00\x00\x00\x00'
            b'my_config_value\x00KERNEL32.dll\x00')


@pytest.fixture
def sample_path(samples_path, sample_bytes):
    target_path = os.path.join(str(samples_path), 'sample.bin')
    with open(target_path, 'wb') as f:
        f.write(sample_bytes)
    return target_path


@pytest.fixture
def empty_path(samples_path):
    target_path = os.path.join(str(samples_path), 'empty.bin')
    open(target_path, 'wb').close()
    return target_path


@pytest.fixture
def default_min_sequence():
    return config.DEFAULT_MIN_SEQUENCE
