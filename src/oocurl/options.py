"""
Option names and the option store for oocurl.

libcurl identifies options by integer constants which pycurl exports
without their ``CURLOPT_`` prefix (``pycurl.URL``, ``pycurl.TIMEOUT``).
This module maps short, case-insensitive names onto those constants and
keeps the last value that was successfully applied for each one, since
libcurl offers no way to read an option back.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

try:
    import pycurl
    HAS_PYCURL = True
except ImportError:
    pycurl = None
    HAS_PYCURL = False

from ._names import EASY_OPTIONS, INFO_VALUES

if TYPE_CHECKING:
    from .handle import SessionHandle

logger = logging.getLogger(__name__)

OPTION_PREFIX = "CURLOPT_"
INFO_PREFIX = "CURLINFO_"

# Options libcurl does not have; the session handle implements them itself.
RETURNTRANSFER = "CURLOPT_RETURNTRANSFER"
EMULATED_OPTIONS = frozenset({RETURNTRANSFER})

# CURLINFO_* identifiers carry their type in bits 20-22 (STRING .. OFF_T)
_INFO_MIN = 0x100000
_INFO_MAX = 0x700000

# An option identifier is either a pycurl constant or an emulated key.
OptionId = Union[int, str]


def _strip_prefix(name: str, prefix: str) -> str:
    upper = name.strip().upper()
    if upper.startswith(prefix):
        return upper[len(prefix):]
    return upper


def _pycurl_constant(name: str, known: FrozenSet[str], low: int, high: int) -> Optional[int]:
    if pycurl is None or name not in known:
        return None
    value = getattr(pycurl, name, None)
    # bool is an int subclass but never a libcurl identifier
    if isinstance(value, int) and not isinstance(value, bool) and low <= value < high:
        return value
    return None


def canonical_name(name: str) -> str:
    """
    Canonicalize a short option name.

    Args:
        name: Option name such as ``"url"``, ``"URL"`` or ``"CURLOPT_URL"``

    Returns:
        The canonical key, e.g. ``"CURLOPT_URL"``
    """
    return OPTION_PREFIX + _strip_prefix(name, OPTION_PREFIX)


def lookup_option(name: str) -> Optional[OptionId]:
    """
    Resolve a short or canonical option name to its identifier.

    Only libcurl easy-handle options are recognized; error codes, global
    flags and other constants pycurl exports are not, even though their
    numbers may coincide with an option's.

    Args:
        name: Option name in any case, with or without ``CURLOPT_``

    Returns:
        The pycurl constant, the emulated key, or None if the name is not
        a recognized option
    """
    key = canonical_name(name)
    if key in EMULATED_OPTIONS:
        return key
    short = key[len(OPTION_PREFIX):]
    # pycurl spells a few options OPT_X where X is taken by an info value
    for candidate in (short, "OPT_" + short):
        option = _pycurl_constant(candidate, EASY_OPTIONS, 0, _INFO_MIN)
        if option is not None:
            return option
    return None


def lookup_info(name: str) -> Optional[int]:
    """Resolve ``"size_download"`` or ``"CURLINFO_SIZE_DOWNLOAD"`` to a pycurl info constant."""
    short = _strip_prefix(name, INFO_PREFIX)
    for candidate in (short, "INFO_" + short):
        info = _pycurl_constant(candidate, INFO_VALUES, _INFO_MIN, _INFO_MAX)
        if info is not None:
            return info
    return None


def is_recognized(name: str) -> bool:
    return lookup_option(name) is not None


class OptionStore:
    """
    Ordered record of the options applied to a session handle.

    An entry exists only after the handle accepted the value. Entries keep
    their first insertion position when overwritten and are never removed,
    so replaying the store onto a fresh handle reproduces the original
    configuration order.
    """

    def __init__(self, handle: "SessionHandle") -> None:
        self._handle = handle
        self._values: Dict[str, Any] = {}

    def set(self, name: str, value: Any) -> bool:
        """
        Apply an option to the handle and remember it.

        Args:
            name: Short or canonical option name
            value: Value passed through to libcurl unchanged

        Returns:
            True if the option is recognized and the handle accepted it
        """
        key = canonical_name(name)
        option = lookup_option(key)
        if option is None:
            logger.debug(f"Ignoring unrecognized option {key}")
            return False

        if not self._handle.setopt(option, value):
            logger.debug(f"Handle rejected {key}={value!r}")
            return False

        self._values[key] = value
        return True

    def get(self, name: str) -> Any:
        """Return the last applied value, or None if never set."""
        return self._values.get(canonical_name(name))

    def has(self, name: str) -> bool:
        """Check whether a non-None value has been applied."""
        return self._values.get(canonical_name(name)) is not None

    def clear(self, name: str) -> bool:
        """
        Reset an option to its default.

        libcurl exposes no table of default values, so there is nothing to
        reset to. This is always a no-op and always returns False.
        """
        logger.debug(f"Cannot reset {canonical_name(name)}: no default is known")
        return False

    def replay(self) -> int:
        """
        Re-apply every stored option to the handle in insertion order.

        Returns:
            Number of options the handle accepted
        """
        applied = 0
        for key, value in self._values.items():
            option = lookup_option(key)
            if option is not None and self._handle.setopt(option, value):
                applied += 1
            else:
                logger.warning(f"Could not replay {key}={value!r} onto the new handle")
        logger.debug(f"Replayed {applied}/{len(self._values)} options")
        return applied

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._values.items())

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)
