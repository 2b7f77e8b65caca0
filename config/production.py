import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

JSON_SORT_KEYS = bool(int(os.getenv("JSON_SORT_KEYS", "0")))
