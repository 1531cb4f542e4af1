"""Common literal values used across tec_admin.

These constants keep plugin identifiers, screen markers, and request variable
names centralized so the notice controller, templates, and tests can import
the same values without drifting. Intended for internal use within the
tec_admin package.

Examples
--------
>>> from tec_admin import _constants
>>> _constants.PLUGIN_SLUG
'event-tickets'
>>> _constants.EVENTS_POST_TYPE in _constants.TEC_POST_TYPES
True
"""

PLUGIN_SLUG = "event-tickets"

EVENTS_POST_TYPE = "tribe_events"
ORGANIZER_POST_TYPE = "tribe_organizer"
VENUE_POST_TYPE = "tribe_venue"
TEC_POST_TYPES = frozenset({EVENTS_POST_TYPE, ORGANIZER_POST_TYPE, VENUE_POST_TYPE})

SCREEN_ID_PREFIX = "tec-"
SETTINGS_SCREEN_MARKER = "tribe-common"

NOTICE_INSTALL_ID = "event-tickets-install"
NOTICE_ACTIVATE_ID = "event-tickets-activate"
UPSELL_INSTALL_KEY = "event-tickets-install-notice"
UPSELL_ACTIVATE_KEY = "event-tickets-activate-notice"

WELCOME_MESSAGE_VAR = "welcome-message-the-events-calendar"
INSTALL_PLUGIN_ACTION = "install-plugin"

ASSETS_GROUP = "tribe-events-admin-notice-install-event-tickets"
NOTICE_TEMPLATE = "notices/install_event_tickets.jinja"
HELP_PAGE_TEMPLATE = "help_community.jinja"

TICKETS_SETTINGS_PAGE = "tec-tickets-settings"
TICKETS_LOGO_PATH = "src/resources/images/logo/event-tickets.svg"
