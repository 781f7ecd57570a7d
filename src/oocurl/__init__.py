"""
oocurl - object-oriented access to libcurl

A thin property-style wrapper over pycurl easy handles that remembers
the options it has applied.
"""

__version__ = "0.1.1"
__author__ = "James Socol"

# Import main components for easy access
from .curl import Curl, DEFAULT_USER_AGENT
from .handle import HandleState, SessionHandle
from .options import OptionStore, canonical_name, is_recognized
from .exceptions import OOCurlError, CurlUnavailableError, CurlInitError

__all__ = [
    "Curl",
    "DEFAULT_USER_AGENT",
    "HandleState",
    "SessionHandle",
    "OptionStore",
    "canonical_name",
    "is_recognized",
    "OOCurlError",
    "CurlUnavailableError",
    "CurlInitError",
]
