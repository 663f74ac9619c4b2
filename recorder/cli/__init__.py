"""
Recorder CLI

Commands:
- recorder log tail/inspect - Recording file operations
- recorder replay - Rebuild state from a recording
- recorder version - Version information
"""
