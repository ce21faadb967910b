import io
import sys
from contextlib import contextmanager

import singer

from cli_reader.SegmentedReader import SegmentedReader

LOGGER = singer.get_logger()


class ScriptedInput(io.BufferedReader):
    """
    Buffered scripted input whose read() runs to the end of every line, like a real stdin.
    """
    def read(self, size=-1):
        if size is not None and size >= 0:
            return super().read(size)
        chunks = []
        chunk = super().read()
        while chunk:
            chunks.append(chunk)
            chunk = super().read()
        return b''.join(chunks)


def text_stream(*inputs, encoding='utf-8'):
    reader = SegmentedReader(*inputs, encoding=encoding)
    return io.TextIOWrapper(ScriptedInput(reader), encoding=encoding)


@contextmanager
def scripted_stdin(*inputs, encoding='utf-8'):
    """Replace sys.stdin with scripted input lines for the duration of the block."""
    stream = text_stream(*inputs, encoding=encoding)
    original = sys.stdin
    sys.stdin = stream
    LOGGER.debug('Replaced stdin with {} scripted line(s)'.format(len(inputs)))
    try:
        yield stream
    finally:
        sys.stdin = original
        stream.close()
        LOGGER.debug('Restored stdin')
