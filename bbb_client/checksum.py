"""Big Blue Button request signing.

Every API call carries a checksum: the hex digest of the call name, the
query string and the shared secret, concatenated in that order.  The
server recomputes it from the query string it receives, so the query
string we hash has to be exactly the one we send.
"""

import hashlib
import urllib.parse

HASH_ALGORITHMS = ('sha1', 'sha256', 'sha384', 'sha512')


def _value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def query_string(params):
    r"""
    URL-encode a dictionary (or list of pairs) of parameters, keeping
    the caller's order.  Parameters whose value is None are left out.
    """
    if isinstance(params, dict):
        params = params.items()
    return urllib.parse.urlencode([(key, _value(value)) for key, value in params if value is not None])


def signed_query(call_name, params, secret, algorithm='sha256'):
    r"""
    Encode the parameters once and sign exactly that encoding.

    Returns a (query, digest) pair.
    """
    query = query_string(params)
    digest = hashlib.new(algorithm, (call_name + query + secret).encode('utf-8')).hexdigest()
    return query, digest


def checksum(call_name, params, secret, algorithm='sha256'):
    return signed_query(call_name, params, secret, algorithm)[1]


def signed_url(server_url, call_name, query, digest):
    if query:
        query += '&'
    return server_url + '/api/' + call_name + '?' + query + 'checksum=' + digest


def api_url(server_url, call_name, params, secret, algorithm='sha256'):
    r"""
    Construct the URL to make a Big Blue Button REST API call.

    Expect a string in return, ending with the checksum parameter.
    """
    query, digest = signed_query(call_name, params, secret, algorithm)
    return signed_url(server_url, call_name, query, digest)
