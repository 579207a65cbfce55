#
#
#

__version__ = __VERSION__ = '0.1.0'

from .client import (  # noqa: E402
    DnspodClient,
    domain_action,
    record_action,
    user_action,
)
from .exceptions import (  # noqa: E402
    DnspodClientDecodeError,
    DnspodClientException,
    DnspodClientNotFound,
    DnspodClientRemoteError,
    DnspodClientTransportError,
    DnspodClientUnauthorized,
)
from .models import (  # noqa: E402
    Domain,
    PaginationRecordList,
    Record,
    RecordLine,
    RecordQuery,
    RecordsInfo,
    User,
)

__all__ = [
    'DnspodClient',
    'DnspodClientDecodeError',
    'DnspodClientException',
    'DnspodClientNotFound',
    'DnspodClientRemoteError',
    'DnspodClientTransportError',
    'DnspodClientUnauthorized',
    'Domain',
    'PaginationRecordList',
    'Record',
    'RecordLine',
    'RecordQuery',
    'RecordsInfo',
    'User',
    'domain_action',
    'record_action',
    'user_action',
]
