import re
from typing import Optional

from ..exceptions import InvalidPlateFormat

PLATE_PATTERN = re.compile(r"^[A-Z0-9]{1,8}$")
_STRIP_PATTERN = re.compile(r"[-\s]")


def normalize_plate(raw: Optional[str]) -> str:
    """
    Turn user input like "ab-12-cd" into the RDW key "AB12CD".

    Raises InvalidPlateFormat for empty input or anything that is not
    1-8 alphanumerics once hyphens and whitespace are gone.
    """
    stripped = _STRIP_PATTERN.sub("", raw or "")
    if not stripped:
        raise InvalidPlateFormat("kenteken ontbreekt")

    # ASCII check before upper(): "ß".upper() would sneak in as "SS"
    if not stripped.isascii():
        raise InvalidPlateFormat("ongeldig kenteken")

    plate = stripped.upper()
    if not PLATE_PATTERN.fullmatch(plate):
        raise InvalidPlateFormat("ongeldig kenteken")

    return plate
