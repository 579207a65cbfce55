#
#
#

import logging
from typing import List, Optional

from .clients import DnspodTransportProtocol
from .envelope import Envelope
from .models import (
    Domain,
    PaginationRecordList,
    Record,
    RecordLine,
    RecordQuery,
    RecordsInfo,
    User,
)
from .normalize import normalize, reshape_lines
from .params import (
    CommonParams,
    add_param,
    add_record_params,
    new_payload,
    set_param,
)


def _action(resource, action, default):
    if action:
        return f'{resource}.{action}'
    return f'{resource}.{default}'


def domain_action(action=''):
    return _action('Domain', action, 'List')


def record_action(action=''):
    return _action('Record', action, 'List')


def user_action(action=''):
    return _action('User', action, 'Info')


class DnspodClient(object):
    """Client for the DNSPod (dnsapi.cn) API.

    `login_token` is the "<id>,<token>" pair issued by DNSPod. Each method
    performs a single POST and either returns typed entities or raises a
    DnspodClientException subclass.
    """

    def __init__(
        self,
        login_token,
        lang='en',
        error_on_empty='no',
        user_id=None,
        base_url=None,
        timeout=None,
        transport: Optional[DnspodTransportProtocol] = None,
    ):
        token_id = login_token.split(',', 1)[0]
        self.log = logging.getLogger(f'DnspodClient[{token_id}]')
        self.log.debug(
            '__init__: login_token=***, lang=%s, base_url=%s',
            lang,
            base_url,
        )
        self.common = CommonParams(
            login_token=login_token,
            lang=lang,
            error_on_empty=error_on_empty,
            user_id=user_id,
        )
        if transport is None:
            from .transport import DnspodTransport

            transport = DnspodTransport(base_url=base_url, timeout=timeout)
        self._transport = transport

    def _payload(self):
        return new_payload(self.common)

    def _post(self, path, payload, context):
        self.log.debug(
            '_post: path=%s, fields=%s',
            path,
            [k for k in payload if k != 'login_token'],
        )
        body = self._transport.post(path, payload)
        return Envelope.decode(body).check(context)

    def domains(
        self, keyword='', group_id='', offset=0, length=0
    ) -> List[Domain]:
        payload = self._payload()
        add_param(payload, 'keyword', keyword)
        add_param(payload, 'group_id', group_id)
        add_param(payload, 'offset', offset)
        add_param(payload, 'length', length)
        envelope = self._post(
            domain_action(), payload, 'could not list domains'
        )
        return [Domain.from_payload(d) for d in envelope.get('domains') or []]

    def domain_create(self, domain, group_id='', is_mark='') -> Domain:
        payload = self._payload()
        set_param(payload, 'domain', domain)
        add_param(payload, 'group_id', group_id)
        add_param(payload, 'is_mark', is_mark)
        envelope = self._post(
            domain_action('Create'), payload, 'could not create domain'
        )
        return Domain.from_payload(envelope.get('domain'))

    def domain_get(self, domain_id) -> Domain:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        envelope = self._post(
            domain_action('Info'), payload, 'could not get domain'
        )
        return Domain.from_payload(envelope.get('domain'))

    def domain_delete(self, domain_id) -> None:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        self._post(domain_action('Remove'), payload, 'could not delete domain')

    def domain_status(self, domain_id, status) -> None:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        set_param(payload, 'status', status)
        self._post(
            domain_action('Status'), payload, 'could not change domain status'
        )

    def records(self, query: RecordQuery) -> PaginationRecordList:
        payload = self._payload()
        add_param(payload, 'domain_id', query.domain_id)
        add_param(payload, 'domain', query.domain)
        if query.page_size:
            # DNSPod pages by record offset; the page number is passed as is
            set_param(payload, 'offset', query.current_page)
            set_param(payload, 'length', query.page_size)
        add_param(payload, 'sub_domain', query.sub_domain)
        add_param(payload, 'keyword', query.keyword)
        envelope = self._post(
            record_action('List'), payload, 'could not list records'
        )
        info = RecordsInfo.from_payload(envelope.info)
        return PaginationRecordList(
            current_page=query.current_page,
            page_size=query.page_size,
            total=info.record_total,
            records=tuple(
                Record.from_payload(r) for r in envelope.get('records') or []
            ),
        )

    def record_create(self, domain_id, record: Record) -> Record:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        add_record_params(payload, record)
        envelope = self._post(
            record_action('Create'), payload, 'could not create record'
        )
        return Record.from_payload(envelope.get('record'))

    def record_get(self, domain_id, record_id) -> Record:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        set_param(payload, 'record_id', record_id)
        envelope = self._post(
            record_action('Info'), payload, 'could not get record'
        )
        # Record.Info is the only call whose result is normalized, list and
        # write calls return the record exactly as decoded
        return normalize(Record.from_payload(envelope.get('record')))

    def record_update(self, domain_id, record_id, record: Record) -> Record:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        set_param(payload, 'record_id', record_id)
        add_record_params(payload, record)
        envelope = self._post(
            record_action('Modify'), payload, 'could not update record'
        )
        return Record.from_payload(envelope.get('record'))

    def record_delete(self, domain_id, record_id) -> None:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        set_param(payload, 'record_id', record_id)
        self._post(record_action('Remove'), payload, 'could not delete record')

    def record_status(self, domain_id, record_id, status) -> None:
        payload = self._payload()
        set_param(payload, 'domain_id', domain_id)
        set_param(payload, 'record_id', record_id)
        set_param(payload, 'status', status)
        self._post(
            record_action('Status'), payload, 'could not change record status'
        )

    def record_lines(self, domain_grade, domain_id) -> List[RecordLine]:
        payload = self._payload()
        set_param(payload, 'domain_grade', domain_grade)
        set_param(payload, 'domain_id', domain_id)
        envelope = self._post(
            record_action('Line'), payload, 'could not get record lines'
        )
        line_ids = envelope.get('line_ids')
        return reshape_lines(line_ids if isinstance(line_ids, dict) else {})

    def user_detail(self) -> User:
        payload = self._payload()
        envelope = self._post(
            user_action('Detail'), payload, 'could not get user detail'
        )
        return User.from_payload(envelope.info.get('user'))
