# topmark:header:start
#
#   project      : KissLint
#   file         : __init__.py
#   file_relpath : src/kisslint/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by the CLI and the runner."""
