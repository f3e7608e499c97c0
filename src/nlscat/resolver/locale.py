"""
Locale selection and splitting.

Locale names have the form language[_territory][.codeset].
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Mapping, Optional

from nlscat.config import DEFAULT_LOCALE

POSIX_LOCALE = "POSIX"


class OpenFlag(IntFlag):
    """catopen() flags."""
    NL_CAT_DEFAULT = 0   # locate by LANG only
    NL_CAT_LOCALE = 1    # locate by LC_ALL / LC_MESSAGES, then LANG


NL_CAT_DEFAULT = OpenFlag.NL_CAT_DEFAULT
NL_CAT_LOCALE = OpenFlag.NL_CAT_LOCALE


@dataclass(frozen=True)
class LocaleParts:
    """A locale string and the pieces used by %l, %t and %c."""
    locale: str
    language: str
    territory: str = ""
    codeset: str = ""


def select_locale(
    flags: int,
    environ: Mapping[str, str],
    default: str = DEFAULT_LOCALE,
) -> str:
    """
    Pick the locale string from the environment.

    With NL_CAT_LOCALE: LC_ALL, then LC_MESSAGES. Then (or without the flag)
    LANG. Unset or "POSIX" gives the default locale.
    """
    value: Optional[str] = None
    if flags & NL_CAT_LOCALE:
        value = environ.get("LC_ALL")
        if value is None:
            value = environ.get("LC_MESSAGES")
    if value is None:
        value = environ.get("LANG")
    if value is None or value == POSIX_LOCALE:
        return default
    return value


def _find_separators(value: str):
    sep = value.find("_")
    dot = value.rfind(".")
    if dot != -1 and sep != -1 and dot < sep:
        # a '.' before the '_' belongs to the language, not a codeset
        dot = -1
    return sep, dot


def _split(value: str) -> LocaleParts:
    sep, dot = _find_separators(value)

    end = len(value)
    if sep != -1:
        language = value[:sep]
        territory = value[sep + 1:dot if dot != -1 else end]
    else:
        language = value[:dot if dot != -1 else end]
        territory = ""
    codeset = value[dot + 1:] if dot != -1 else ""

    return LocaleParts(locale=value, language=language, territory=territory, codeset=codeset)


def parse_locale(value: str, default: str = DEFAULT_LOCALE) -> LocaleParts:
    """
    Split a locale string into language, territory and codeset.

    A locale without a codeset is replaced as a whole by the default locale,
    so "en_US" substitutes as "C" everywhere, %L included.
    """
    _, dot = _find_separators(value)
    if dot == -1:
        return _split(default)
    return _split(value)
