"""
nlscat.resolver - Catalog Path Resolution

Turns a catalog name plus the locale environment into the ordered list of
files to try.
"""

from nlscat.resolver.locale import (
    OpenFlag,
    NL_CAT_DEFAULT,
    NL_CAT_LOCALE,
    POSIX_LOCALE,
    LocaleParts,
    parse_locale,
    select_locale,
)
from nlscat.resolver.search_path import (
    PATH_SEPARATORS,
    candidate_paths,
    expand_nlspath,
    expand_template,
    is_explicit_path,
)

__all__ = [
    # Locale
    "OpenFlag",
    "NL_CAT_DEFAULT",
    "NL_CAT_LOCALE",
    "POSIX_LOCALE",
    "LocaleParts",
    "parse_locale",
    "select_locale",
    # Search path
    "PATH_SEPARATORS",
    "candidate_paths",
    "expand_nlspath",
    "expand_template",
    "is_explicit_path",
]
