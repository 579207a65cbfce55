#
#
#

"""Protocol definition for the transport DnspodClient calls through.

Structural typing (PEP 544) lets tests and callers supply their own
transport without inheriting from DnspodTransport.
"""

from typing import Any, Mapping, Protocol


class DnspodTransportProtocol(Protocol):
    """Executes one API call.

    Implementations compose the URL from their base address and `path`,
    POST `params` form encoded and return the decoded JSON body.
    """

    def post(self, path: str, params: Mapping[str, str]) -> Any:
        """POST to an API action.

        Args:
            path: Action path, e.g. 'Record.List'
            params: Ordered form fields, common parameters included

        Returns:
            The decoded JSON body

        Raises:
            DnspodClientTransportError: network failure or non-2xx status,
                the message carries the status code when there is one
            DnspodClientDecodeError: the body is not valid JSON
        """
        ...
