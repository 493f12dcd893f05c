import logging
from types import MappingProxyType

import requests

from errors import InvalidRequestTypeError, MalformedHeaderError, RequestSendError

logger = logging.getLogger(__name__)

__version__ = '0.1.0'

# Headers sent with every request; a user supplied header wins on a clash.
DEFAULT_HEADERS = {
    'accept': '*/*',
    'user-agent': f'httpdl/{__version__}',
}

REQUEST_METHODS = MappingProxyType({
    'get': 'GET',
    'post': 'POST',
    'put': 'PUT',
    'delete': 'DELETE',
    'head': 'HEAD',
})


def request_method(type_of_req):
    """Maps a case-insensitive method name to its HTTP verb."""
    try:
        return REQUEST_METHODS[type_of_req.lower()]
    except (KeyError, AttributeError):
        raise InvalidRequestTypeError(type_of_req) from None


def split_header(header):
    """
    Splits a raw "name:value" header string on its first colon.

    Double quotes are removed from both halves; surrounding whitespace is
    kept as given.

    Raises:
        MalformedHeaderError: the string has no colon
    """
    name, sep, value = header.partition(':')
    if not sep:
        raise MalformedHeaderError(header)
    return name.replace('"', ''), value.replace('"', '')


def build_headers(header=None):
    headers = dict(DEFAULT_HEADERS)
    if header:
        name, value = split_header(header)
        logger.debug(f"Created Header! ({name}: {value})")
        headers[name] = value
    return headers


def send_request(url, type_of_req='get', header=None, session=None):
    """
    Sends one streamed request and returns the response.

    The method and header are checked before anything goes out. A non-2xx
    status is only logged; the caller still gets the response so its body
    can be saved.
    """
    method = request_method(type_of_req)
    headers = build_headers(header)
    http = session or requests

    logger.debug(f"Sending req! ({method} {url})")
    try:
        response = http.request(method, url, headers=headers, stream=True)
    except requests.exceptions.RequestException as e:
        raise RequestSendError(e) from e

    if not 200 <= response.status_code < 300:
        logger.warning(f"Request failed with status code: {response.status_code}")
    logger.debug(f"Received response with {response.status_code}!")
    return response
