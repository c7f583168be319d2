"""
fnbridge.demo - Demo Application

Runs the sample callback-based API through promisify_all.

Usage:
    python -m fnbridge.demo
"""

from fnbridge.demo.legacy_api import ADMINS, USERS, Admin, LegacyApi, User
from fnbridge.demo.main import build_api, run, start_the_app

__all__ = [
    "ADMINS",
    "USERS",
    "Admin",
    "LegacyApi",
    "User",
    "build_api",
    "run",
    "start_the_app",
]
