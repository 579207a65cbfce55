#
#
#

"""Form payload construction for the DNSPod API.

Every request carries the same common parameters (login token, response
format, language) followed by per-call fields. Optional fields are only
sent when they hold a non-empty value: the API treats a missing key as
"leave unchanged", so a zero value can never be sent explicitly.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Canonical Record field -> outbound form key
RECORD_PARAMS = (
    ('name', 'sub_domain'),
    ('type', 'record_type'),
    ('line', 'record_line'),
    ('line_id', 'record_line_id'),
    ('value', 'value'),
    ('mx', 'mx'),
    ('ttl', 'ttl'),
    ('status', 'status'),
    ('weight', 'weight'),
    ('remark', 'remark'),
)


def render(value: Any) -> str:
    """Render a parameter value as form text."""
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    return str(value)


def is_empty(value: Any) -> bool:
    return value is None or value == '' or value == 0 or value is False


@dataclass(frozen=True)
class CommonParams:
    """Parameters shared by every request made through one client."""

    login_token: str
    format: str = 'json'
    lang: str = 'en'
    error_on_empty: str = 'no'
    user_id: Optional[str] = None

    def as_payload(self) -> Dict[str, str]:
        ret = {}
        for key in ('login_token', 'format', 'lang', 'error_on_empty'):
            add_param(ret, key, getattr(self, key))
        add_param(ret, 'user_id', self.user_id)
        return ret


def new_payload(common: CommonParams) -> Dict[str, str]:
    return common.as_payload()


def add_param(payload: Dict[str, str], key: str, value: Any) -> None:
    """Add `key` to the payload unless `value` is its type's zero value."""
    if is_empty(value):
        return
    payload[key] = render(value)


def set_param(payload: Dict[str, str], key: str, value: Any) -> None:
    payload[key] = '' if value is None else render(value)


def add_record_params(payload: Dict[str, str], record) -> None:
    for field, key in RECORD_PARAMS:
        add_param(payload, key, getattr(record, field))
