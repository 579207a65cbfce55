#
#
#

from octodns.provider import ProviderException


class DnspodClientException(ProviderException):
    pass


class DnspodClientTransportError(DnspodClientException):
    def __init__(self, msg, status_code=None, response=None):
        super().__init__(msg)
        self.status_code = status_code
        self.response = response


class DnspodClientNotFound(DnspodClientTransportError):
    def __init__(self, msg='Not Found', response=None):
        super().__init__(msg, status_code=404, response=response)


class DnspodClientUnauthorized(DnspodClientTransportError):
    def __init__(self, msg='Unauthorized', response=None):
        super().__init__(msg, status_code=401, response=response)


class DnspodClientDecodeError(DnspodClientException):
    pass


class DnspodClientRemoteError(DnspodClientException):
    """The API answered, but with a status code other than "1"."""

    def __init__(self, context, code, provider_message):
        if context:
            msg = f'{context}: {provider_message}'
        else:
            msg = provider_message
        super().__init__(msg)
        self.context = context
        self.code = code
        self.provider_message = provider_message
