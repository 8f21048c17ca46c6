"""Constants for the Amtraker API adapter.

Uses the public Amtraker v3 API.
API Documentation: https://github.com/piemadd/amtrak

No authentication required.
"""

# API endpoints
BASE_API_URL = "https://api-v3.amtraker.com/v3"
TRAINS_PATH = "trains"  # GET /trains, GET /trains/:trainId
STATIONS_PATH = "stations"  # GET /stations, GET /stations/:stationCode

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

DEFAULT_TIMEOUT_SECONDS = 10.0

# Longest response excerpt written to the log on errors
LOGGED_BODY_LIMIT = 500
