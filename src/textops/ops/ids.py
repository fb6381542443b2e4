"""Identifier parsing."""

from __future__ import annotations

import logging
import re
import uuid

from textops.ops.base import InvalidArgumentError

logger = logging.getLogger(__name__)

_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_UNDASHED_UUID = re.compile(
    r"([0-9a-fA-F]{8})([0-9a-fA-F]{4})([0-9a-fA-F]{4})([0-9a-fA-F]{4})([0-9a-fA-F]{12})"
)


def _parse_canonical(text: str) -> uuid.UUID:
    if not _CANONICAL_UUID.fullmatch(text):
        raise InvalidArgumentError(f"Invalid UUID string: {text!r}")
    return uuid.UUID(text)


def convert_uuid(text: str) -> uuid.UUID:
    """Parse a UUID, adding the dashes if they are missing.

    Raises InvalidArgumentError when neither the dashed nor the undashed
    form is a valid UUID.
    """
    try:
        return _parse_canonical(text)
    except InvalidArgumentError:
        logger.debug("Not a canonical UUID, retrying without dashes: %r", text)
    dashed = _UNDASHED_UUID.sub(r"\1-\2-\3-\4-\5", text)
    return _parse_canonical(dashed)
