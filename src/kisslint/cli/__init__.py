# topmark:header:start
#
#   project      : KissLint
#   file         : __init__.py
#   file_relpath : src/kisslint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for KissLint."""
