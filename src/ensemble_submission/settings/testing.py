from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"
REPORT_SECRET = "test-report-secret"

PIECES = ["취타", "미락흘", "도드리", "축제", "플투스"]

DEBUG = False
TESTING = True
