"""Sequence processing for three-frame cloud tracking."""

from meghnet.pipeline.processor import SequenceProcessor, SequenceResult, FrameResult

__all__ = ['SequenceProcessor', 'SequenceResult', 'FrameResult']
