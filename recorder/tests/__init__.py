"""
Test suite for the action recorder.

Focus areas:
- Canonical action encoding and the null payload sentinel
- Type registry decoding
- Whole-log persistence and tolerant loading
- Live recording, rewind and replay determinism
"""
