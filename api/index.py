"""
Serverless entry point: exposes the transliteration API's Flask app
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from transliteration_api import app  # noqa: E402

__all__ = ['app']
