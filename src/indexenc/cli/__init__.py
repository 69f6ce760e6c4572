# topmark:header:start
#
#   project      : IndexEnc
#   file         : __init__.py
#   file_relpath : src/indexenc/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc CLI package.

The console script entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    indexenc = "indexenc.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
