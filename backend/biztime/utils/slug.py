import re
import unicodedata

from biztime.errors import InvalidInput

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def slugify_code(name: str) -> str:
    """
    Derive a company code from its display name.

    "Apple Computer, Inc." -> "apple-computer-inc". Accented letters are
    folded to ASCII first; any run of other characters becomes one hyphen and
    hyphens at either end are dropped. The result is not guaranteed to be
    unique, the companies table enforces that.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("Company name is required")

    folded = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    code = _NON_ALNUM_RUN.sub("-", folded.lower()).strip("-")

    if not code:
        raise InvalidInput(f"Cannot derive a company code from name {name!r}")
    return code
