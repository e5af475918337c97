from __future__ import annotations
import os

# separator between a folder prefix and the note title ("插件 Title")
PREFIX_SEPARATOR = " "

# hint behaviour
FUZZY_MATCHING = True
MIN_QUERY_LENGTH = 2
DEBOUNCE_MS = 200
RESULT_LIMIT = 3

# file types treated as notes when walking a vault
NOTE_EXTS = [".md"]

# folders to skip
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".obsidian", ".trash", ".idea", ".vscode", "node_modules", "__pycache__"}

# progress logging (set NOTEHINT_VERBOSE=1 to enable)
VERBOSE = os.environ.get("NOTEHINT_VERBOSE") == "1"
