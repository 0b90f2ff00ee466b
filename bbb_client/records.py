"""Plain records built from Big Blue Button XML replies.

Nothing here talks to the network.  The client in bbb_client.api fills
these in from each response; they are rebuilt on every call.
"""

from dataclasses import dataclass, field
from typing import Optional

TRANSPORT_FAILURE = 'transport'
APPLICATION_FAILURE = 'application'


@dataclass(frozen=True)
class Failure:
    r"""
    Why an API call didn't work.

    kind is TRANSPORT_FAILURE (bad HTTP status, timeout, network error,
    unparsable XML) or APPLICATION_FAILURE (returncode was not SUCCESS).
    """
    kind: str
    message: str
    message_key: str = ''
    detail: str = ''

    success = False


@dataclass(frozen=True)
class MeetingParams:
    r"""
    Overrides for createMeeting.  Anything left as None gets a default
    (random meeting ID, passwords and voice bridge; fixed values for the
    rest).
    """
    meeting_id: Optional[str] = None
    name: Optional[str] = None
    attendee_pw: Optional[str] = None
    moderator_pw: Optional[str] = None
    welcome: Optional[str] = None
    record: Optional[bool] = None
    auto_start_recording: Optional[bool] = None
    allow_start_stop_recording: Optional[bool] = None
    voice_bridge: Optional[int] = None
    max_participants: Optional[int] = None
    logout_url: Optional[str] = None
    duration: Optional[int] = None
    metadata: dict = field(default_factory=dict)


@dataclass(frozen=True)
class MeetingResult:
    success: bool
    meeting_id: Optional[str] = None
    internal_meeting_id: str = ''
    parent_meeting_id: str = ''
    attendee_pw: Optional[str] = None
    moderator_pw: Optional[str] = None
    voice_bridge: str = ''
    dial_number: str = ''
    create_time: str = ''
    create_date: str = ''
    has_user_joined: bool = False
    duration: int = 0
    has_been_forcibly_ended: bool = False
    message_key: str = ''
    message: str = ''
    failure: Optional[Failure] = None

    @property
    def error(self):
        return self.failure.message if self.failure else None

    @classmethod
    def failed(cls, failure):
        return cls(success=False, failure=failure)


@dataclass(frozen=True)
class Attendee:
    user_id: str
    full_name: str
    role: str
    is_presenter: bool = False
    is_listening_only: bool = False
    has_joined_voice: bool = False
    has_video: bool = False


@dataclass(frozen=True)
class MeetingInfo:
    meeting_name: str
    meeting_id: str
    internal_meeting_id: str = ''
    create_time: str = ''
    create_date: str = ''
    voice_bridge: str = ''
    dial_number: str = ''
    attendee_pw: str = ''
    moderator_pw: str = ''
    running: bool = False
    duration: int = 0
    has_user_joined: bool = False
    recording: bool = False
    has_been_forcibly_ended: bool = False
    start_time: str = ''
    end_time: str = ''
    participant_count: int = 0
    listener_count: int = 0
    voice_participant_count: int = 0
    video_count: int = 0
    max_users: int = 0
    moderator_count: int = 0
    attendees: tuple = ()
    metadata: dict = field(default_factory=dict)

    success = True
