"""
nlscat - NLS Message Catalogs

Loads catgets-style message catalogs from text files, finds them through
an NLSPATH search template and the locale environment, and serves messages
by (set_id, msg_id).
"""

__version__ = "0.1.0"
__author__ = "nlscat contributors"

from nlscat.catalogs import (
    MessageCatalogs,
    LookupResult,
    LookupStatus,
    catopen,
    catgets,
    catclose,
    last_errno,
    get_default_catalogs,
    reset_default_catalogs,
)
from nlscat.errors import (
    CatalogError,
    CatalogNotFoundError,
    EmptyCatalogNameError,
    InvalidDescriptorError,
    MessageNotFoundError,
)
from nlscat.parser import Catalog, Message, decode_escapes, load_catalog, parse_catalog_source
from nlscat.resolver import NL_CAT_DEFAULT, NL_CAT_LOCALE, OpenFlag, candidate_paths
