"""codeshim - editor launcher for remote development sessions.

Repairs a stale VSCODE_IPC_HOOK_CLI socket reference and hands the
process over to the editor's command-line executable.
"""

__version__ = "0.1.0"
