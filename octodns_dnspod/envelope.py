#
#
#

from typing import Any, Dict, Optional

from .exceptions import DnspodClientDecodeError, DnspodClientRemoteError

SUCCESS = '1'


class Envelope:
    """The ``{"status": {...}, "info": {...}, <payload>}`` response wrapper."""

    def __init__(self, code: str, message: str, body: Dict[str, Any]):
        self.code = code
        self.message = message
        self.body = body

    @classmethod
    def decode(cls, body: Any) -> 'Envelope':
        if not isinstance(body, dict):
            raise DnspodClientDecodeError(
                f'Unexpected response body, expected a JSON object: {body!r:.200}'
            )
        status = body.get('status')
        if not isinstance(status, dict):
            # Missing or malformed status is a failure, not a decode error
            status = {}
        code = status.get('code')
        message = status.get('message')
        return cls(
            code if isinstance(code, str) else '',
            message if isinstance(message, str) else '',
            body,
        )

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS

    @property
    def created_at(self) -> str:
        status = self.body.get('status')
        if isinstance(status, dict):
            return status.get('created_at') or ''
        return ''

    @property
    def info(self) -> Dict[str, Any]:
        info = self.body.get('info')
        return info if isinstance(info, dict) else {}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.body.get(key, default)

    def check(self, context: str = '') -> 'Envelope':
        """Raise DnspodClientRemoteError unless the status code is "1"."""
        if not self.ok:
            raise DnspodClientRemoteError(context, self.code, self.message)
        return self
