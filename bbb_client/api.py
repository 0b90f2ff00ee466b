"""bbb_client.api - interface with a Big Blue Button videoconferencing system

The meeting functions defined in https://docs.bigbluebutton.org/dev/api.html
are wrapped as methods of a BigBlueButton object, which turns each XML
reply into a plain record.  Anything else in the API can be reached
through apiCall().

Examples:

    >>> from bbb_client import BigBlueButton, ClientConfig, MeetingParams
    >>> bbb = BigBlueButton(ClientConfig('https://bbb.example.com/bigbluebutton', 'secret'))
    >>> result = bbb.createMeeting(MeetingParams(name='Algebra'))
    >>> result.success, result.meeting_id, result.moderator_pw

    Joining doesn't hit the server; you get a signed URL to hand to
    the user's browser.

    >>> bbb.getJoinURL(result.meeting_id, 'Charlie Clown', result.attendee_pw)

    The meeting operations never raise on a failed call.  They return
    a failure value instead (a Failure record, a MeetingResult with
    success=False, False or an empty list).  apiCall() raises
    BigBlueButtonError.

    >>> bbb.apiCall('getRecordings', meetingID=result.meeting_id).xpath('.//recordID')

"""

import requests
import structlog

from lxml import etree

from .checksum import signed_query, signed_url
from .errors import BigBlueButtonError, TransportFailure, ApplicationFailure
from .identifiers import RandomIdentifiers
from .records import Attendee, MeetingInfo, MeetingParams, MeetingResult

DEFAULT_NAME = 'Online Lesson'
DEFAULT_WELCOME = '<br>Welcome to the lesson!'
DEFAULT_MAX_PARTICIPANTS = 50

# XML field helpers.  A missing element reads as an empty string, a
# missing or garbled number as 0, and a flag is set only if its text
# is "true" in any capitalization.

def _text(node, tag):
    return node.findtext(tag) or ''

def _flag(node, tag):
    return _text(node, tag).strip().lower() == 'true'

def _integer(node, tag):
    try:
        return int(_text(node, tag).strip())
    except ValueError:
        return 0

def _default(value, default):
    return default if value is None else value


def _attendee(node):
    return Attendee(user_id=_text(node, 'userID'),
                    full_name=_text(node, 'fullName'),
                    role=_text(node, 'role'),
                    is_presenter=_flag(node, 'isPresenter'),
                    is_listening_only=_flag(node, 'isListeningOnly'),
                    has_joined_voice=_flag(node, 'hasJoinedVoice'),
                    has_video=_flag(node, 'hasVideo'))


def _meeting_info(node):
    r"""
    Build a MeetingInfo from a getMeetingInfo reply, or from one of
    the <meeting> elements in a getMeetings reply; both use the same
    field names.
    """
    metadata = {}
    metadata_node = node.find('metadata')
    if metadata_node is not None:
        for child in metadata_node.iterchildren(tag=etree.Element):
            metadata[child.tag] = child.text or ''

    return MeetingInfo(meeting_name=_text(node, 'meetingName'),
                       meeting_id=_text(node, 'meetingID'),
                       internal_meeting_id=_text(node, 'internalMeetingID'),
                       create_time=_text(node, 'createTime'),
                       create_date=_text(node, 'createDate'),
                       voice_bridge=_text(node, 'voiceBridge'),
                       dial_number=_text(node, 'dialNumber'),
                       attendee_pw=_text(node, 'attendeePW'),
                       moderator_pw=_text(node, 'moderatorPW'),
                       running=_flag(node, 'running'),
                       duration=_integer(node, 'duration'),
                       has_user_joined=_flag(node, 'hasUserJoined'),
                       recording=_flag(node, 'recording'),
                       has_been_forcibly_ended=_flag(node, 'hasBeenForciblyEnded'),
                       start_time=_text(node, 'startTime'),
                       end_time=_text(node, 'endTime'),
                       participant_count=_integer(node, 'participantCount'),
                       listener_count=_integer(node, 'listenerCount'),
                       voice_participant_count=_integer(node, 'voiceParticipantCount'),
                       video_count=_integer(node, 'videoCount'),
                       max_users=_integer(node, 'maxUsers'),
                       moderator_count=_integer(node, 'moderatorCount'),
                       attendees=tuple(_attendee(e) for e in node.iterfind('attendees/attendee')),
                       metadata=metadata)


class BigBlueButton:

    def __init__(self, config, logger=None, identifiers=None):
        self.config = config
        self.identifiers = identifiers or RandomIdentifiers()
        if logger is None:
            logger = structlog.get_logger('bbb_client')
        self.log = logger.bind(server_url=config.server_url)

        self.log.info('client_initialized',
                      hash_algorithm=config.hash_algorithm,
                      verify_tls=config.verify_tls,
                      timeout=config.timeout)
        if not config.verify_tls:
            self.log.warning('tls_verification_disabled')

    def _APIurl(self, call_name, params):
        query, digest = signed_query(call_name, params, self.config.secret,
                                     self.config.hash_algorithm)
        self.log.debug('checksum_generated', api_call=call_name,
                       algorithm=self.config.hash_algorithm, checksum=digest)
        url = signed_url(self.config.server_url, call_name, query, digest)
        self.log.debug('url_built', api_call=call_name, url=url)
        return url

    def _APIcall(self, call_name, params):
        r"""
        Make a Big Blue Button REST API call.  The first argument is the name
        of the API call; the second argument is a dictionary of parameters.

        Expect an etree XML object in return.  Raises TransportFailure if we
        didn't get an XML document back, ApplicationFailure if we did but
        its returncode isn't SUCCESS.
        """
        url = self._APIurl(call_name, params)
        self.log.info('request_sent', api_call=call_name, params=sorted(params))

        try:
            response = requests.get(url, timeout=self.config.timeout, verify=self.config.verify_tls)
        except requests.RequestException as err:
            self.log.error('request_exception', api_call=call_name,
                           error=str(err), error_type=type(err).__name__)
            raise TransportFailure(call_name, str(err)) from err

        if not 200 <= response.status_code < 300:
            self.log.error('http_error', api_call=call_name,
                           status=response.status_code, body=response.text)
            raise TransportFailure(call_name, 'HTTP status %d' % response.status_code)

        try:
            xml = etree.fromstring(response.content)
        except etree.XMLSyntaxError as err:
            self.log.error('malformed_response', api_call=call_name, error=str(err))
            raise TransportFailure(call_name, 'malformed XML: ' + str(err)) from err

        returncode = _text(xml, 'returncode')
        message_key = _text(xml, 'messageKey')
        message = _text(xml, 'message')
        self.log.info('response_received', api_call=call_name, returncode=returncode,
                      message_key=message_key, message=message)

        if returncode != 'SUCCESS':
            raise ApplicationFailure(call_name,
                                     message or message_key or 'returncode ' + (returncode or 'missing'),
                                     message_key)
        return xml

    def apiCall(self, call_name, **params):
        return self._APIcall(call_name, params)

    def _create_query(self, params):
        ids = self.identifiers
        query = {
            'meetingID': params.meeting_id or ids.meeting_id(),
            'name': _default(params.name, DEFAULT_NAME),
            'attendeePW': params.attendee_pw or ids.attendee_password(),
            'moderatorPW': params.moderator_pw or ids.moderator_password(),
            'welcome': _default(params.welcome, DEFAULT_WELCOME),
            'record': _default(params.record, False),
            'autoStartRecording': _default(params.auto_start_recording, False),
            'allowStartStopRecording': _default(params.allow_start_stop_recording, True),
            'voiceBridge': params.voice_bridge or ids.voice_bridge(),
            'maxParticipants': _default(params.max_participants, DEFAULT_MAX_PARTICIPANTS),
            'logoutURL': _default(params.logout_url, ''),
            'duration': _default(params.duration, 0),   # 0 = no limit
        }
        for key, value in params.metadata.items():
            query['meta_' + key] = value
        return query

    def createMeeting(self, params=None):
        if params is None:
            params = MeetingParams()
        self.log.info('create_meeting', meeting_id=params.meeting_id, name=params.name)

        query = self._create_query(params)
        try:
            xml = self._APIcall('create', query)
        except BigBlueButtonError as err:
            self.log.error('create_meeting_failed', meeting_id=query['meetingID'],
                           failure=err.kind, message=err.message)
            return MeetingResult.failed(err.failure())

        result = MeetingResult(success=True,
                               meeting_id=_text(xml, 'meetingID'),
                               internal_meeting_id=_text(xml, 'internalMeetingID'),
                               parent_meeting_id=_text(xml, 'parentMeetingID'),
                               attendee_pw=query['attendeePW'],
                               moderator_pw=query['moderatorPW'],
                               voice_bridge=_text(xml, 'voiceBridge') or str(query['voiceBridge']),
                               dial_number=_text(xml, 'dialNumber'),
                               create_time=_text(xml, 'createTime'),
                               create_date=_text(xml, 'createDate'),
                               has_user_joined=_flag(xml, 'hasUserJoined'),
                               duration=_integer(xml, 'duration'),
                               has_been_forcibly_ended=_flag(xml, 'hasBeenForciblyEnded'),
                               message_key=_text(xml, 'messageKey'),
                               message=_text(xml, 'message'))

        self.log.info('meeting_created',
                      meeting_id=result.meeting_id,
                      internal_meeting_id=result.internal_meeting_id,
                      create_time=result.create_time)
        return result

    def getJoinURL(self, meeting_id, full_name, password, redirect=True, user_id=None):
        r"""
        Signed URL that joins full_name to a meeting.  The password picks
        the role: the moderator password joins as a moderator, the
        attendee password as a viewer.  Nothing is sent to the server.
        """
        params = {
            'meetingID': meeting_id,
            'fullName': full_name,
            'password': password,
            'redirect': bool(redirect),
            'userID': user_id,
        }
        url = self._APIurl('join', params)
        self.log.info('join_url_built', meeting_id=meeting_id, full_name=full_name, redirect=redirect)
        return url

    def isMeetingRunning(self, meeting_id):
        self.log.info('is_meeting_running', meeting_id=meeting_id)
        try:
            xml = self._APIcall('isMeetingRunning', {'meetingID': meeting_id})
        except BigBlueButtonError as err:
            self.log.warning('is_meeting_running_failed', meeting_id=meeting_id,
                             failure=err.kind, message=err.message)
            return False

        running = _flag(xml, 'running')
        self.log.info('meeting_running_checked', meeting_id=meeting_id, running=running)
        return running

    def getMeetingInfo(self, meeting_id, password=None):
        r"""
        Returns a MeetingInfo, or a Failure if the meeting doesn't exist
        or the server couldn't be reached.  Check .success to tell them
        apart.
        """
        self.log.info('get_meeting_info', meeting_id=meeting_id)
        try:
            xml = self._APIcall('getMeetingInfo', {'meetingID': meeting_id, 'password': password or None})
        except BigBlueButtonError as err:
            self.log.error('get_meeting_info_failed', meeting_id=meeting_id,
                           failure=err.kind, message=err.message)
            return err.failure()

        info = _meeting_info(xml)
        self.log.info('meeting_info_received', meeting_id=meeting_id, running=info.running,
                      participant_count=info.participant_count, attendee_count=len(info.attendees))
        return info

    def endMeeting(self, meeting_id, password):
        self.log.info('end_meeting', meeting_id=meeting_id)
        try:
            xml = self._APIcall('end', {'meetingID': meeting_id, 'password': password})
        except BigBlueButtonError as err:
            self.log.error('end_meeting_failed', meeting_id=meeting_id,
                           failure=err.kind, message=err.message)
            return MeetingResult.failed(err.failure())

        result = MeetingResult(success=True,
                               meeting_id=meeting_id,
                               message_key=_text(xml, 'messageKey'),
                               message=_text(xml, 'message'))
        self.log.info('meeting_ended', meeting_id=meeting_id,
                      message_key=result.message_key, message=result.message)
        return result

    def getMeetings(self):
        self.log.info('get_meetings')
        try:
            xml = self._APIcall('getMeetings', {})
        except BigBlueButtonError as err:
            self.log.error('get_meetings_failed', failure=err.kind, message=err.message)
            return []

        meetings = [_meeting_info(e) for e in xml.iterfind('meetings/meeting')]
        self.log.info('meetings_received', count=len(meetings))
        return meetings
