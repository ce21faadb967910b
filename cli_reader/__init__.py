#!/usr/bin/env python3

from cli_reader.SegmentedReader import ReadStatus, SegmentedReader
from cli_reader.stdin import scripted_stdin, text_stream

__all__ = ['ReadStatus', 'SegmentedReader', 'scripted_stdin', 'text_stream']
