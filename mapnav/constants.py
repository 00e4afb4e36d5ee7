"""Application constants that never change across environments.

These are fixed facts of the Google Maps APIs and fixed presentation rules
for the route screen. Anything that may differ between deployments lives in
``mapnav.config`` instead.
"""

# ===== Geographic Constants =====
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Google encoded polyline precision (5 decimal places)
POLYLINE_PRECISION = 5

# ===== Google Maps API Status Values =====
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"
STATUS_NOT_FOUND = "NOT_FOUND"

# ===== Travel Modes =====
TRAVEL_MODE_WALKING = "walking"
TRAVEL_MODE_DRIVING = "driving"
TRAVEL_MODE_BICYCLING = "bicycling"
TRAVEL_MODE_TRANSIT = "transit"
TRAVEL_MODES = (
    TRAVEL_MODE_WALKING,
    TRAVEL_MODE_DRIVING,
    TRAVEL_MODE_BICYCLING,
    TRAVEL_MODE_TRANSIT,
)

# ===== Marker Labels =====
START_MARKER_LABEL = "Start"
DESTINATION_MARKER_LABEL = "Destination"

# ===== Alert Text =====
ALERT_TITLE_ERROR = "Error"
MESSAGE_ENTER_BOTH_ADDRESSES = "Please enter both addresses."
MESSAGE_INVALID_URL = "Invalid URL"
MESSAGE_NO_DATA = "No data received"
MESSAGE_UNEXPECTED_JSON = "Unexpected JSON structure"
MESSAGE_NO_ROUTE = "No route found between the given locations."
