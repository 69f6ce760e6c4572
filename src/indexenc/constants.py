# topmark:header:start
#
#   project      : IndexEnc
#   file         : constants.py
#   file_relpath : src/indexenc/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndexEnc Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    INDEXENC_VERSION: str = get_version("indexenc")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    INDEXENC_VERSION = "0.0.0"

DEFAULT_DELIMITER: str = ","
