"""bbb_client - Big Blue Button API client

License: GNU Lesser General Public License
"""

from .api import BigBlueButton
from .config import ClientConfig
from .errors import BigBlueButtonError, TransportFailure, ApplicationFailure, ConfigurationError
from .identifiers import RandomIdentifiers
from .records import (Attendee, Failure, MeetingInfo, MeetingParams, MeetingResult,
                      TRANSPORT_FAILURE, APPLICATION_FAILURE)
