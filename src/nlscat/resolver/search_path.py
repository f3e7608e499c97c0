"""
NLSPATH search-path expansion.

A template is a ';'-separated list of path patterns:

    %N  catalog name          %l  language part
    %L  full locale string    %t  territory part
    %%  a literal '%'         %c  codeset part

'%' followed by any other character gives that character.
"""

import logging
from typing import Iterator, Optional

from nlscat.config import NlsConfig, get_config
from nlscat.resolver.locale import LocaleParts, parse_locale, select_locale

logger = logging.getLogger(__name__)

# A name containing any of these is a path, not a catalog name
PATH_SEPARATORS = "/\\:"


def is_explicit_path(name: str) -> bool:
    """True if name should be opened directly, bypassing NLSPATH."""
    return any(ch in name for ch in PATH_SEPARATORS)


def expand_template(segment: str, name: str, locale: LocaleParts) -> str:
    """Expand one search-path segment."""
    substitutions = {
        "N": name,
        "L": locale.locale,
        "l": locale.language,
        "t": locale.territory,
        "c": locale.codeset,
    }
    out = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == "%":
            i += 1
            if i == len(segment):
                break  # lone trailing '%'
            spec = segment[i]
            out.append(substitutions.get(spec, spec))
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def expand_nlspath(template: str, name: str, locale: LocaleParts) -> Iterator[str]:
    """Yield each expanded segment of template, in order, skipping empty ones."""
    for segment in template.split(";"):
        path = expand_template(segment, name, locale)
        if path:
            yield path


def candidate_paths(
    name: str,
    flags: int = 0,
    config: Optional[NlsConfig] = None,
) -> Iterator[str]:
    """
    Yield the paths to try for catalog name, in order.

    Lazy: the caller stops iterating at the first path that loads.
    """
    if is_explicit_path(name):
        yield name
        return

    config = config or get_config()
    locale_value = select_locale(flags, config.environ, config.default_locale)
    locale = parse_locale(locale_value, config.default_locale)
    template = config.nlspath

    logger.debug(f"Resolving {name!r} with locale {locale.locale!r} and template {template!r}")
    yield from expand_nlspath(template, name, locale)
