#
# DnspodClient domain operations
#

from unittest import TestCase
from unittest.mock import Mock

from octodns_dnspod import DnspodClient, Domain, domain_action
from octodns_dnspod.exceptions import DnspodClientRemoteError

OK = {'code': '1', 'message': 'Action completed successful'}


def _client(body):
    transport = Mock()
    transport.post.return_value = body
    return DnspodClient('12345,abcdef', transport=transport), transport


class TestDomainAction(TestCase):
    def test_paths(self):
        self.assertEqual('Domain.Create', domain_action('Create'))
        self.assertEqual('Domain.List', domain_action(''))
        self.assertEqual('Domain.List', domain_action())


class TestDomains(TestCase):
    def test_list(self):
        client, transport = _client(
            {
                'status': OK,
                'domains': [
                    {'id': 2238269, 'status': 'enable'},
                    {'id': 10360095, 'status': 'enable'},
                ],
            }
        )
        self.assertEqual(
            [
                Domain(id='2238269', status='enable'),
                Domain(id='10360095', status='enable'),
            ],
            client.domains(),
        )
        path, params = transport.post.call_args[0]
        self.assertEqual('Domain.List', path)
        self.assertEqual(
            {
                'login_token': '12345,abcdef',
                'format': 'json',
                'lang': 'en',
                'error_on_empty': 'no',
            },
            params,
        )

    def test_list_ambiguous_values(self):
        client, _ = _client(
            {
                'status': OK,
                'domains': [
                    {'id': 2238269, 'status': 'enable', 'group_id': 9},
                    {'id': 10360095, 'status': 'enable', 'group_id': '9'},
                ],
            }
        )
        self.assertEqual(
            [
                Domain(id='2238269', status='enable', group_id='9'),
                Domain(id='10360095', status='enable', group_id='9'),
            ],
            client.domains(),
        )

    def test_list_filters(self):
        client, transport = _client({'status': OK, 'domains': []})
        domains = client.domains(
            keyword='exa', group_id='1', offset=20, length=10
        )
        self.assertEqual([], domains)
        params = transport.post.call_args[0][1]
        self.assertEqual('exa', params['keyword'])
        self.assertEqual('1', params['group_id'])
        self.assertEqual('20', params['offset'])
        self.assertEqual('10', params['length'])

    def test_list_empty_account(self):
        client, _ = _client({'status': OK})
        self.assertEqual([], client.domains())

    def test_create(self):
        client, transport = _client(
            {'status': OK, 'domain': {'id': 1, 'name': 'example.com'}}
        )
        self.assertEqual(
            Domain(id='1', name='example.com'),
            client.domain_create('example.com'),
        )
        path, params = transport.post.call_args[0]
        self.assertEqual('Domain.Create', path)
        self.assertEqual('example.com', params['domain'])
        self.assertNotIn('group_id', params)
        self.assertNotIn('is_mark', params)

    def test_create_options(self):
        client, transport = _client({'status': OK, 'domain': {'id': '1'}})
        client.domain_create('example.com', group_id='3', is_mark='yes')
        params = transport.post.call_args[0][1]
        self.assertEqual('3', params['group_id'])
        self.assertEqual('yes', params['is_mark'])

    def test_get(self):
        client, transport = _client(
            {'status': OK, 'domain': {'id': 1, 'name': 'example.com'}}
        )
        self.assertEqual(
            Domain(id='1', name='example.com'), client.domain_get(1)
        )
        path, params = transport.post.call_args[0]
        self.assertEqual('Domain.Info', path)
        self.assertEqual('1', params['domain_id'])

    def test_delete(self):
        client, transport = _client({'status': OK})
        self.assertIsNone(client.domain_delete(1))
        path, params = transport.post.call_args[0]
        self.assertEqual('Domain.Remove', path)
        self.assertEqual('1', params['domain_id'])

    def test_delete_rejected(self):
        client, _ = _client(
            {'status': {'code': '-15', 'message': 'Domain has been locked'}}
        )
        with self.assertRaises(DnspodClientRemoteError) as ctx:
            client.domain_delete('1')
        self.assertEqual(
            'could not delete domain: Domain has been locked',
            str(ctx.exception),
        )

    def test_update_status(self):
        client, transport = _client(
            {
                'status': {
                    'code': '1',
                    'message': 'Action completed successful',
                    'created_at': '2015-01-18 12:02:04',
                }
            }
        )
        client.domain_status('1', 'enable')
        path, params = transport.post.call_args[0]
        self.assertEqual('Domain.Status', path)
        self.assertEqual('1', params['domain_id'])
        self.assertEqual('enable', params['status'])

    def test_one_request_per_call(self):
        client, transport = _client({'status': OK, 'domains': []})
        client.domains()
        client.domains()
        self.assertEqual(2, transport.post.call_count)
        # the common parameters are not altered between calls
        first = transport.post.call_args_list[0][0][1]
        second = transport.post.call_args_list[1][0][1]
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
