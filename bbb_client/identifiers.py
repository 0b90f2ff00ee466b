# Default meeting IDs, passwords and voice bridges for createMeeting.
#
# Pass a seed to get the same sequence every time (tests do this).
# Without one we draw from the operating system's entropy source,
# since the passwords are what keeps strangers out of a meeting.

import random


class RandomIdentifiers:

    def __init__(self, seed=None):
        if seed is None:
            self._random = random.SystemRandom()
        else:
            self._random = random.Random(seed)

    def _hex(self, digits):
        return ''.join(self._random.choice('0123456789abcdef') for _ in range(digits))

    def meeting_id(self):
        return 'meeting_' + self._hex(13)

    def attendee_password(self):
        return 'student_' + self._hex(8)

    def moderator_password(self):
        return 'teacher_' + self._hex(8)

    def voice_bridge(self):
        return self._random.randint(70000, 99999)
