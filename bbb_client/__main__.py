#
# Usage: python3 -m bbb_client COMMAND [ARGS...]
#
#    getMeetings
#    getMeetingInfo MEETING-ID [PASSWORD]
#    isMeetingRunning MEETING-ID
#    create [MEETING-ID [NAME]]
#    join MEETING-ID FULL-NAME PASSWORD
#    end MEETING-ID PASSWORD
#
# If BBB_SERVER_URL is set (in the environment or a .env file), the
# server and secret come from BBB_* variables (see
# ClientConfig.from_environment).  Otherwise we have to be running on
# the BBB server with read access to the bbb-web properties files.

import os
import sys

from dotenv import load_dotenv

from .api import BigBlueButton
from .config import ClientConfig
from .logs import configure_logging
from .records import MeetingParams

USAGE = "Usage: python3 -m bbb_client getMeetings | getMeetingInfo | isMeetingRunning | create | join | end ..."


def client():
    if 'BBB_SERVER_URL' in os.environ:
        config = ClientConfig.from_environment()
    else:
        config = ClientConfig.from_properties()
    return BigBlueButton(config)


def print_meeting(meeting):
    print(meeting.meeting_id, meeting.meeting_name,
          'running' if meeting.running else 'stopped',
          meeting.participant_count, 'participants', sep='\t')
    for attendee in meeting.attendees:
        print('', attendee.role, attendee.full_name, sep='\t')


def print_failure(result):
    failure = result.failure if hasattr(result, 'failure') else result
    print("Error:", failure.message, file=sys.stderr)
    if failure.detail:
        print(failure.detail, file=sys.stderr)
    return 1


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE, file=sys.stderr)
        return 2

    load_dotenv()
    configure_logging()
    command, args = argv[0], argv[1:]

    if command == 'getMeetings':
        for meeting in client().getMeetings():
            print_meeting(meeting)
    elif command == 'getMeetingInfo' and 1 <= len(args) <= 2:
        info = client().getMeetingInfo(*args)
        if not info.success:
            return print_failure(info)
        print_meeting(info)
        for key, value in info.metadata.items():
            print('', key, value, sep='\t')
    elif command == 'isMeetingRunning' and len(args) == 1:
        print('true' if client().isMeetingRunning(args[0]) else 'false')
    elif command == 'create' and len(args) <= 2:
        params = MeetingParams(meeting_id=args[0] if args else None,
                               name=args[1] if len(args) > 1 else None)
        result = client().createMeeting(params)
        if not result.success:
            return print_failure(result)
        print('meetingID', result.meeting_id, sep='\t')
        print('attendeePW', result.attendee_pw, sep='\t')
        print('moderatorPW', result.moderator_pw, sep='\t')
    elif command == 'join' and len(args) == 3:
        print(client().getJoinURL(*args))
    elif command == 'end' and len(args) == 2:
        result = client().endMeeting(*args)
        if not result.success:
            return print_failure(result)
        print(result.message or result.message_key)
    else:
        print("Unknown operation or wrong arguments:", ' '.join(argv), file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
