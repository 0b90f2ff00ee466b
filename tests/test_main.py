from unittest.mock import patch

import pytest

from bbb_client.__main__ import main

SERVER_URL = "https://bbb.example.com/bigbluebutton"

MEETINGS = """<response>
  <returncode>SUCCESS</returncode>
  <meetings>
    <meeting>
      <meetingName>Algebra</meetingName>
      <meetingID>algebra-1</meetingID>
      <running>true</running>
      <participantCount>1</participantCount>
      <attendees>
        <attendee><userID>w_a1</userID><fullName>Ada Teacher</fullName><role>MODERATOR</role></attendee>
      </attendees>
    </meeting>
  </meetings>
</response>"""

CREATED = """<response>
  <returncode>SUCCESS</returncode>
  <meetingID>algebra-1</meetingID>
</response>"""

NOT_FOUND = """<response>
  <returncode>FAILED</returncode>
  <messageKey>notFound</messageKey>
  <message>We could not find a meeting with that meeting ID</message>
</response>"""


@pytest.fixture(autouse=True)
def environment(monkeypatch):
    monkeypatch.setenv('BBB_SERVER_URL', SERVER_URL)
    monkeypatch.setenv('BBB_SECRET', 'secret')
    monkeypatch.delenv('BBB_LOG_LEVEL', raising=False)
    monkeypatch.delenv('BBB_LOG_FORMAT', raising=False)
    # logs go to stderr at WARNING and above, keeping stdout to the output
    with patch('bbb_client.__main__.load_dotenv'):
        yield


def test_get_meetings(respond, capsys):
    respond(MEETINGS)

    assert main(['getMeetings']) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split('\t') == ['algebra-1', 'Algebra', 'running', '1', 'participants']
    assert lines[1].split('\t') == ['', 'MODERATOR', 'Ada Teacher']


def test_create(respond, capsys):
    http_get = respond(CREATED)

    assert main(['create', 'algebra-1', 'Algebra']) == 0

    assert '/api/create?meetingID=algebra-1&name=Algebra&' in http_get.call_args[0][0]
    out = capsys.readouterr().out
    assert 'meetingID\talgebra-1' in out
    assert 'moderatorPW\tteacher_' in out


def test_join_prints_url_without_request(http_get, capsys):
    assert main(['join', 'algebra-1', 'Charlie Clown', 'ap']) == 0

    assert not http_get.called
    assert capsys.readouterr().out.startswith(SERVER_URL + '/api/join?meetingID=algebra-1&fullName=Charlie+Clown&')


def test_get_meeting_info_failure(respond, capsys):
    respond(NOT_FOUND)

    assert main(['getMeetingInfo', 'nope']) == 1

    assert 'We could not find a meeting with that meeting ID' in capsys.readouterr().err


def test_is_meeting_running(respond, capsys):
    respond("<response><returncode>SUCCESS</returncode><running>false</running></response>")
    assert main(['isMeetingRunning', 'algebra-1']) == 0
    assert capsys.readouterr().out.strip() == 'false'


@pytest.mark.parametrize('argv', [[], ['frobnicate'], ['join', 'only-one-arg']])
def test_bad_usage(argv, capsys):
    assert main(argv) == 2
    assert 'Usage' in capsys.readouterr().err
