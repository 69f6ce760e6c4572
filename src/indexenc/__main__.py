# topmark:header:start
#
#   project      : IndexEnc
#   file         : __main__.py
#   file_relpath : src/indexenc/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running IndexEnc via ``python -m indexenc``.

Examples:
    Encode a document read from STDIN::

        echo 'a = 1' | python -m indexenc encode
"""

from __future__ import annotations

from indexenc.cli.main import cli

if __name__ == "__main__":
    cli()
