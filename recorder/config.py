"""
Environment configuration for recordings.

Environment Variables:
    RECORDER_DIR: Directory holding recordings - default: ~/.recorder
    RECORDER_FILENAME: Recording file name - default: recording.json
"""

import os

from .log.file_log import DEFAULT_FILENAME, FileActionLog

DEFAULT_DIRECTORY = os.path.join("~", ".recorder")


def recording_directory() -> str:
    val = os.getenv("RECORDER_DIR")
    return os.path.expanduser(val or DEFAULT_DIRECTORY)


def recording_filename() -> str:
    return os.getenv("RECORDER_FILENAME") or DEFAULT_FILENAME


def default_action_log() -> FileActionLog:
    """Build the FileActionLog described by the environment."""
    return FileActionLog(recording_directory(), recording_filename())
