from enum import Enum, IntEnum


class RedirectFilter(str, Enum):
    """How list modules treat redirect pages."""

    all = "all"
    redirects = "redirects"
    nonredirects = "nonredirects"


class Namespace(IntEnum):
    MEDIA = -2
    SPECIAL = -1
    MAIN = 0
    TALK = 1
    USER = 2
    USER_TALK = 3
    PROJECT = 4
    PROJECT_TALK = 5
    FILE = 6
    FILE_TALK = 7
    MEDIAWIKI = 8
    MEDIAWIKI_TALK = 9
    TEMPLATE = 10
    TEMPLATE_TALK = 11
    HELP = 12
    HELP_TALK = 13
    CATEGORY = 14
    CATEGORY_TALK = 15


class ParsePolicy(str, Enum):
    """What the pagination engine does with a body it cannot parse.

    * ``exhaust``: log it and end the sequence as if no further pages existed.
    * ``raise``: propagate :class:`~mwquery.errors.ParseError` to the consumer.
    """

    EXHAUST = "exhaust"
    RAISE = "raise"


class QueryState(str, Enum):
    INIT = "init"
    HAS_BUFFERED = "has_buffered"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"
