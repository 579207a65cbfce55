#
#
#

"""Typed entities returned by DnspodClient.

The API serializes identifiers and counters as JSON numbers on some
endpoints and as strings on others (``"id": 2238269`` from Domain.List,
``"id": "2238269"`` from Domain.Info). Every such field is kept as text
so an entity has the same shape whichever endpoint produced it.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import DnspodClientDecodeError


def to_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    raise ValueError(f'no text form for {type(value).__name__}')


def to_int(value: Any) -> int:
    if value is None or value == '':
        return 0
    if isinstance(value, bool):
        raise ValueError('booleans are not counts')
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f'{value!r} is not integral')
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value)
    raise ValueError(f'{value!r} is not an integer')


class _Entity:
    @classmethod
    def from_payload(cls, raw: Optional[Mapping[str, Any]]):
        """Build the entity from a decoded JSON object.

        Unknown keys are ignored and missing keys are left empty.
        """
        if raw is None:
            raw = {}
        elif not isinstance(raw, Mapping):
            raise DnspodClientDecodeError(
                f'Unexpected {cls.__name__} payload: {raw!r:.200}'
            )
        kwargs = {}
        for f in fields(cls):
            if f.name in raw:
                try:
                    kwargs[f.name] = cls._coerce(f.type, raw[f.name])
                except ValueError as e:
                    raise DnspodClientDecodeError(
                        f'Unexpected {cls.__name__}.{f.name} value: {e}'
                    ) from e
        return cls(**kwargs)

    @staticmethod
    def _coerce(_type, value):
        if _type is bool:
            if isinstance(value, str):
                return value.lower() in ('1', 'true', 'yes')
            return bool(value)
        if _type is int:
            return to_int(value)
        return to_text(value)

    def as_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v}

    def __str__(self):
        return str(self.as_dict())


@dataclass(frozen=True)
class Domain(_Entity):
    id: str = ''
    name: str = ''
    punycode: str = ''
    grade: str = ''
    status: str = ''
    ext_status: str = ''
    records: str = ''
    group_id: str = ''
    is_mark: str = ''
    remark: str = ''
    ttl: str = ''
    owner: str = ''
    created_on: str = ''
    updated_on: str = ''


@dataclass(frozen=True)
class Record(_Entity):
    id: str = ''
    name: str = ''
    line: str = ''
    line_id: str = ''
    type: str = ''
    ttl: str = ''
    value: str = ''
    mx: str = ''
    weight: str = ''
    enabled: str = ''
    status: str = ''
    monitor_status: str = ''
    remark: str = ''
    updated_on: str = ''
    use_aqb: str = ''
    # Record.Info and Record.Create answer with these instead of
    # name/type/line/line_id; see normalize.RECORD_ALIASES
    sub_domain: str = ''
    record_type: str = ''
    record_line: str = ''
    record_line_id: str = ''


@dataclass(frozen=True)
class RecordLine(_Entity):
    line: str = ''
    line_id: str = ''


@dataclass(frozen=True)
class User(_Entity):
    real_name: str = ''
    user_type: str = ''
    telephone: str = ''
    im: str = ''
    nick: str = ''
    id: str = ''
    email: str = ''
    status: str = ''
    email_verified: str = ''
    telephone_verified: str = ''
    weixin_binded: str = ''
    agent_pending: bool = False
    balance: int = 0
    smsbalance: int = 0
    user_grade: str = ''


@dataclass(frozen=True)
class RecordsInfo(_Entity):
    sub_domains: int = 0
    record_total: int = 0


@dataclass(frozen=True)
class RecordQuery:
    domain_id: str = ''
    domain: str = ''
    current_page: int = 0
    page_size: int = 0
    sub_domain: str = ''
    keyword: str = ''


@dataclass(frozen=True)
class PaginationRecordList:
    """One page of records.

    The API does not echo paging parameters back, so ``current_page`` and
    ``page_size`` are the values the caller asked for.
    """

    current_page: int = 0
    page_size: int = 0
    total: int = 0
    records: Tuple[Record, ...] = ()
