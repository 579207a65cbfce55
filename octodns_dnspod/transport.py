#
#
#

import logging

from requests import RequestException, Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import (
    DnspodClientDecodeError,
    DnspodClientNotFound,
    DnspodClientTransportError,
    DnspodClientUnauthorized,
)


class DnspodTransport(object):
    BASE_URL = 'https://dnsapi.cn'

    def __init__(self, base_url=None, timeout=None, session=None):
        self.log = logging.getLogger('DnspodTransport')
        if session is None:
            session = Session()
        session.headers.update(
            {
                'Accept': 'text/json',
                'User-Agent': f'octodns/{octodns_version} octodns-dnspod/{package_version}',
            }
        )
        self._session = session
        self.base_url = (base_url or self.BASE_URL).rstrip('/')
        self.timeout = timeout

    def _error_detail(self, response):
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            message = data.get('message')
            if not message and isinstance(data.get('status'), dict):
                message = data['status'].get('message')
            if message:
                return f'{message} ({response.status_code} {response.reason})'
        snippet = (response.text or '')[:200]
        return f'{response.reason} {snippet}'.strip()

    def _do(self, method, path, data=None):
        url = f'{self.base_url}/{path}'
        self.log.debug('_do: method=%s, url=%s', method, url)
        try:
            response = self._session.request(
                method, url, data=data, timeout=self.timeout
            )
        except RequestException as e:
            raise DnspodClientTransportError(f'{method} {url}: {e}') from e

        if not 200 <= response.status_code < 300:
            msg = f'{method} {url}: {response.status_code} {self._error_detail(response)}'
            if response.status_code == 401:
                raise DnspodClientUnauthorized(msg, response=response)
            if response.status_code == 404:
                raise DnspodClientNotFound(msg, response=response)
            raise DnspodClientTransportError(
                msg, status_code=response.status_code, response=response
            )
        return response

    def post(self, path, params):
        """POST form encoded `params` to `path` and return the decoded body."""
        response = self._do('POST', path, data=params)
        try:
            return response.json()
        except ValueError as e:
            raise DnspodClientDecodeError(
                f'POST {path}: invalid JSON in response: {e}'
            ) from e
