"""Pytest configuration shared across test modules."""

import os

# Import pywikibot without a user-config.py in the test environment.
os.environ.setdefault('PYWIKIBOT_NO_USER_CONFIG', '1')
