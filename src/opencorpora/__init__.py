"""Reader for the OpenCorpora morphological dictionary (dict.opcorpora.xml)."""

__version__ = "0.3.0"

from .config import (
    DuplicatePolicy as DuplicatePolicy,
    ParserConfig as ParserConfig,
    load_config as load_config,
)
from .events import (
    EmptyTag as EmptyTag,
    EndTag as EndTag,
    StartTag as StartTag,
    Text as Text,
    iter_events as iter_events,
    open_source as open_source,
)
from .exceptions import (
    ConfigError as ConfigError,
    DictionaryError as DictionaryError,
    DuplicateEntityError as DuplicateEntityError,
    EncodingError as EncodingError,
    FormatError as FormatError,
    GrammemeNotFoundError as GrammemeNotFoundError,
    LemmaNotFoundError as LemmaNotFoundError,
    LinkKindNotFoundError as LinkKindNotFoundError,
    MarkupError as MarkupError,
    MissingAttributeError as MissingAttributeError,
    StructureError as StructureError,
    TruncatedDocumentError as TruncatedDocumentError,
    UnresolvedReferenceError as UnresolvedReferenceError,
)
from .models import (
    DEFAULT_LINK_KIND as DEFAULT_LINK_KIND,
    Dictionary as Dictionary,
    Form as Form,
    Grammeme as Grammeme,
    Lemma as Lemma,
    Link as Link,
    LinkKind as LinkKind,
    Restriction as Restriction,
    RestrictionKind as RestrictionKind,
    RestrictionScope as RestrictionScope,
)
from .parser import (
    DictionaryParser as DictionaryParser,
    ParsingState as ParsingState,
    parse_events as parse_events,
    read_dictionary as read_dictionary,
)
from .stats import (
    DictionaryStats as DictionaryStats,
    compute_stats as compute_stats,
)

__all__ = [
    # Entry points
    "read_dictionary",
    "parse_events",
    "iter_events",
    "open_source",
    "DictionaryParser",
    "ParsingState",
    # Events
    "StartTag",
    "EmptyTag",
    "EndTag",
    "Text",
    # Models
    "Dictionary",
    "Grammeme",
    "Restriction",
    "RestrictionKind",
    "RestrictionScope",
    "Lemma",
    "Form",
    "LinkKind",
    "Link",
    "DEFAULT_LINK_KIND",
    # Configuration
    "ParserConfig",
    "DuplicatePolicy",
    "load_config",
    # Statistics
    "DictionaryStats",
    "compute_stats",
    # Exceptions
    "DictionaryError",
    "EncodingError",
    "FormatError",
    "MissingAttributeError",
    "StructureError",
    "UnresolvedReferenceError",
    "GrammemeNotFoundError",
    "LemmaNotFoundError",
    "LinkKindNotFoundError",
    "DuplicateEntityError",
    "TruncatedDocumentError",
    "MarkupError",
    "ConfigError",
]
