import hashlib

import pytest

from bbb_client.checksum import api_url, checksum, query_string

SECRET = "639259d4-9dd8-4b25-bf01-95f9567eaf4b"


def test_checksum_matches_documented_formula():
    params = {'meetingID': 'm1', 'name': 'Room 1'}
    expected = hashlib.sha256(b"createmeetingID=m1&name=Room+1" + SECRET.encode()).hexdigest()
    assert checksum('create', params, SECRET) == expected


def test_checksum_is_stable():
    params = {'meetingID': 'm1', 'fullName': 'Charlie Clown', 'password': 'pw'}
    first = checksum('join', params, SECRET)
    for _ in range(5):
        assert checksum('join', dict(params), SECRET) == first


@pytest.mark.parametrize('changed', [
    {'meetingID': 'm2', 'name': 'Room 1'},
    {'meetingID': 'm1', 'name': 'Room 2'},
    {'meetingID': 'm1', 'name': 'Room 1', 'record': True},
])
def test_checksum_changes_with_any_parameter(changed):
    original = checksum('create', {'meetingID': 'm1', 'name': 'Room 1'}, SECRET)
    assert checksum('create', changed, SECRET) != original


def test_checksum_depends_on_order_call_and_secret():
    original = checksum('create', [('a', '1'), ('b', '2')], SECRET)
    assert checksum('create', [('b', '2'), ('a', '1')], SECRET) != original
    assert checksum('end', [('a', '1'), ('b', '2')], SECRET) != original
    assert checksum('create', [('a', '1'), ('b', '2')], 'other') != original


@pytest.mark.parametrize('algorithm', ['sha1', 'sha256', 'sha384', 'sha512'])
def test_checksum_algorithms(algorithm):
    digest = checksum('getMeetings', {}, SECRET, algorithm)
    assert digest == hashlib.new(algorithm, ('getMeetings' + SECRET).encode()).hexdigest()


def test_query_string_renders_booleans_and_drops_none():
    params = {'meetingID': 'm1', 'password': None, 'redirect': False, 'record': True, 'duration': 0}
    assert query_string(params) == 'meetingID=m1&redirect=false&record=true&duration=0'


def test_query_string_escapes_reserved_characters():
    assert query_string({'welcome': '<br>Hi & bye'}) == 'welcome=%3Cbr%3EHi+%26+bye'


def test_api_url():
    url = api_url('https://bbb.example.com/bigbluebutton', 'isMeetingRunning', {'meetingID': 'm1'}, SECRET)
    digest = checksum('isMeetingRunning', {'meetingID': 'm1'}, SECRET)
    assert url == ('https://bbb.example.com/bigbluebutton/api/isMeetingRunning?meetingID=m1&checksum=' + digest)


def test_api_url_without_parameters():
    url = api_url('https://bbb.example.com/bigbluebutton', 'getMeetings', {}, SECRET)
    assert url.endswith('/api/getMeetings?checksum=' + checksum('getMeetings', {}, SECRET))


def test_api_url_signs_parameters_given_as_an_iterator():
    pairs = [('meetingID', 'm1'), ('password', 'mp')]
    url = api_url('https://bbb.example.com/bigbluebutton', 'getMeetingInfo', iter(pairs), SECRET)
    assert url == ('https://bbb.example.com/bigbluebutton/api/getMeetingInfo?meetingID=m1&password=mp'
                   '&checksum=' + checksum('getMeetingInfo', pairs, SECRET))
