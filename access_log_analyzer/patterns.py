"""Access Log Analyzer - Constants and patterns"""

import re

VERSION = "1.0.0"

LOG_URL = (
    "https://gist.githubusercontent.com/kamranahmedse/e66c3b9ea89a1a030d3b739eeeef22d0"
    "/raw/77fb3ac837a73c4f0206e78a236d885590b7ae35/nginx-access.log"
)

TOP_N = 5
REQUEST_TIMEOUT = 30  # seconds

HTTP_METHODS = ('GET', 'POST', 'PUT', 'DELETE', 'HEAD', 'OPTIONS')

# Combined log format, fields of interest only:
# 1. ip  2. path  3. status  4. user agent (referrer is matched and dropped)
ACCESS_LOG_PATTERN = re.compile(
    r'^(\S+).*?"(?:' + '|'.join(HTTP_METHODS) + r')\s(\S+)'
    r'.*?"\s(\d{3,})'
    r'.*?"(?:-|\S+)"\s+"(.+?)"'
)

REPORT_TITLES = {
    'ip': "Top {n} IP addresses with the most requests",
    'path': "Top {n} most requested paths",
    'status': "Top {n} response status codes",
    'user_agent': "Top {n} user agents",
}
