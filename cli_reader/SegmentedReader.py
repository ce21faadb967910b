import io
import threading
from enum import Enum

import singer

LOGGER = singer.get_logger()


class ReadStatus(Enum):
    CONTINUE = 'continue'
    END_OF_SEGMENT = 'end-of-segment'
    END_OF_STREAM = 'end-of-stream'

    @property
    def is_eof(self):
        return self is not ReadStatus.CONTINUE


class SegmentedReader(io.RawIOBase):
    """
    File-like reader simulating newline delimited command line input.
    """
    def __init__(self, *inputs, encoding='utf-8'):
        super().__init__()
        if '\n'.encode(encoding) != b'\n':
            raise ValueError("Encoding {} does not write newlines as b'\\n'".format(encoding))
        segments = []
        for text in inputs:
            # every input ends with a newline so it can be used as a delimiter
            if not text.endswith('\n'):
                text += '\n'
            segments.append(text.encode(encoding, 'backslashreplace'))
        self._segments = tuple(segments)
        self._segment_index = 0
        self._byte_offset = 0
        self._lock = threading.Lock()
        LOGGER.debug('Scripted {} input line(s)'.format(len(self._segments)))

    @property
    def segments(self):
        return self._segments

    @property
    def segment_index(self):
        return self._segment_index

    @property
    def byte_offset(self):
        return self._byte_offset

    @property
    def exhausted(self):
        return self._segment_index == len(self._segments)

    def readable(self):
        return True

    def read_into(self, buffer):
        """Returns tuple of int: bytes copied, ReadStatus"""
        with self._lock:
            if self.exhausted:
                return 0, ReadStatus.END_OF_STREAM

            current = self._segments[self._segment_index]
            view = memoryview(buffer).cast('B')
            count = min(len(view), len(current) - self._byte_offset)
            view[:count] = current[self._byte_offset:self._byte_offset + count]
            self._byte_offset += count

            if self._byte_offset < len(current):
                return count, ReadStatus.CONTINUE

            self._segment_index += 1
            self._byte_offset = 0
            LOGGER.debug(f'Finished input line {self._segment_index} of {len(self._segments)}')
            if self.exhausted:
                LOGGER.debug('All scripted input has been read')
            return count, ReadStatus.END_OF_SEGMENT

    def readinto(self, b):
        if self.closed:
            raise ValueError('I/O operation on closed file.')
        count, _ = self.read_into(b)
        return count

    def readall(self):
        if self.closed:
            raise ValueError('I/O operation on closed file.')
        data = bytearray()
        chunk = bytearray(io.DEFAULT_BUFFER_SIZE)
        status = ReadStatus.CONTINUE
        while not status.is_eof:
            count, status = self.read_into(chunk)
            data += chunk[:count]
        return bytes(data)
