"""
output.py - Atomic Document Writer

Writes the rendered tag cloud (and its stylesheet) to disk so that a
failure part-way through never leaves a truncated file at the destination.
"""

import os
import tempfile

from utils import get_logger
from tagcloud.errors import DestinationUnwritable

logger = get_logger("OUTPUT")


def _default_mode():
    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_document(path, content):
    """
    Write content to path atomically.

    The text goes to a temporary file in the destination directory first and
    is then moved over the destination with os.replace, which is atomic on
    the same filesystem. The file gets the permissions a plain open() would
    give it rather than the private mode of the temporary file.

    Args:
        path: Destination file path
        content: Document text

    Raises:
        DestinationUnwritable: If the temporary file cannot be created,
            written, or moved into place
    """
    directory = os.path.dirname(os.path.abspath(path))
    data = content.encode("utf-8")

    try:
        fd, tmp_path = tempfile.mkstemp(
            prefix=".tagcloud-", suffix=".tmp", dir=directory)
    except OSError as e:
        raise DestinationUnwritable(path, e) from e

    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, _default_mode())
        os.replace(tmp_path, path)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise DestinationUnwritable(path, e) from e

    logger.info(f"Wrote {len(data)} bytes to {path}.")
