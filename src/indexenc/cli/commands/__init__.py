# topmark:header:start
#
#   project      : IndexEnc
#   file         : __init__.py
#   file_relpath : src/indexenc/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the IndexEnc CLI."""
