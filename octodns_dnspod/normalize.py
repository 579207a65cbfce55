#
#
#

"""Post-decode normalization of DNSPod entities.

The API is inconsistent about field names: depending on the endpoint a
record's host label arrives as ``name`` or ``sub_domain``, its type as
``type`` or ``record_type`` and so on. Entities are decoded with every
alias kept, then `normalize` fills each canonical field from the first
non-empty candidate in an alias table.

Record.Line answers with a ``line_ids`` object whose values are strings,
except the default line which is a bare ``0``. `reshape_lines` turns it
into a list of RecordLine.
"""

from dataclasses import replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Tuple

from .models import Domain, Record, RecordLine, User

DEFAULT_LINE = '默认'

# (canonical field, candidate source keys in order of preference)
RECORD_ALIASES = (
    ('name', ('name', 'sub_domain')),
    ('type', ('type', 'record_type')),
    ('line', ('line', 'record_line')),
    ('line_id', ('line_id', 'record_line_id')),
)

ALIASES: Dict[type, Tuple] = {Domain: (), Record: RECORD_ALIASES, User: ()}


def _lookup(source: Any, key: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def resolve(source: Any, candidates: Iterable[str]) -> Any:
    """Return the first non-empty candidate value, or '' if none is set."""
    for key in candidates:
        value = _lookup(source, key)
        if value not in (None, ''):
            return value
    return ''


def normalize(entity):
    """Return a copy of `entity` with its aliased fields reconciled.

    A non-empty canonical field is never overwritten, so normalizing an
    already normalized entity is a no-op.
    """
    aliases = ALIASES.get(type(entity), ())
    changes = {}
    for canonical, candidates in aliases:
        value = resolve(entity, candidates)
        if value != getattr(entity, canonical):
            changes[canonical] = value
    if not changes:
        return entity
    return replace(entity, **changes)


class LineIdKind(Enum):
    TEXT = 'text'
    NUMBER = 'number'
    OTHER = 'other'


class LineId(NamedTuple):
    kind: LineIdKind
    value: Any


def classify(value: Any) -> LineId:
    if isinstance(value, str):
        return LineId(LineIdKind.TEXT, value)
    # bool is an int subclass but never a line id
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return LineId(LineIdKind.NUMBER, value)
    return LineId(LineIdKind.OTHER, value)


def reshape_lines(line_ids: Mapping[str, Any]) -> List[RecordLine]:
    """Convert a ``line_ids`` map into RecordLine entries.

    Order follows the mapping and must not be relied upon. The default line
    is the only entry allowed a non-string id (mapped to "0"); any other
    entry without a string id is dropped.
    """
    ret = []
    for line, raw in (line_ids or {}).items():
        line_id = classify(raw)
        if line_id.kind is LineIdKind.TEXT:
            ret.append(RecordLine(line=line, line_id=line_id.value))
        elif line == DEFAULT_LINE:
            ret.append(RecordLine(line=line, line_id='0'))
    return ret
