"""
Object-oriented front end to a libcurl easy handle.

The Curl class turns ``setopt(pycurl.URL, ...)`` into ``curl.url = ...``
and remembers what was set so it can be read back. Transfers, TLS,
redirects and error codes are all left to libcurl.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from . import __version__
from .exceptions import CurlUnavailableError
from .handle import HandleState, SessionHandle, TransferResult
from .options import HAS_PYCURL, OptionStore, lookup_info

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"OOCurl {__version__}"

# Reported by info() when called without a name.
COMMON_INFO = (
    "effective_url",
    "response_code",
    "content_type",
    "total_time",
    "size_download",
    "size_upload",
    "redirect_count",
)


class Curl:
    """
    A libcurl session with property-style options.

    Any public attribute that is not a method of this class is treated as
    a libcurl option name, matched case-insensitively against the pycurl
    constants::

        with Curl("http://example.test/") as curl:
            curl.followlocation = True
            curl.httpheader = ["X-Trace: 1"]
            body = curl.exec()
            if body is False:
                print(curl.errno(), curl.error())

    Writes of unrecognized names are ignored and reads of options that were
    never set return None. Nothing here raises after construction; check
    return values and errno()/error() instead.
    """

    VERSION = __version__

    _handle: SessionHandle
    _store: OptionStore

    def __init__(self, url: Optional[str] = None, **options: Any) -> None:
        """
        Open a libcurl session.

        Args:
            url: Optional target URL
            **options: Extra options applied after the defaults, in order

        Raises:
            CurlUnavailableError: If pycurl is not installed
            CurlInitError: If libcurl cannot create a handle
        """
        if not HAS_PYCURL:
            raise CurlUnavailableError(
                "pycurl could not be imported; install it with libcurl support"
            )

        handle = SessionHandle()
        object.__setattr__(self, "_handle", handle)
        object.__setattr__(self, "_store", OptionStore(handle))
        handle.open()

        if url is not None:
            self.url = url
        self.returntransfer = True
        # Applications can override this User Agent value
        self.useragent = DEFAULT_USER_AGENT

        for name, value in options.items():
            self.setopt(name, value)

        logger.debug(f"Curl session created for {url!r}")

    def __enter__(self) -> "Curl":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Curl url={self.getopt('url')!r} state={self._handle.state.value}>"

    # Property façade

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self.setopt(name, value)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        return self._store.get(name)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            object.__delattr__(self, name)
            return
        self.unsetopt(name)

    def __contains__(self, name: object) -> bool:
        return name in self._store

    def setopt(self, name: str, value: Any) -> bool:
        """
        Set an option by short name.

        Args:
            name: Option name, e.g. ``"url"`` or ``"CURLOPT_URL"``
            value: Value handed to libcurl

        Returns:
            True if the option is known and libcurl accepted the value
        """
        return self._store.set(name, value)

    def setopt_array(self, options: Mapping[str, Any]) -> bool:
        """Set several options in order; True only if all of them applied."""
        results = [self.setopt(name, value) for name, value in options.items()]
        return all(results)

    def getopt(self, name: str) -> Any:
        return self._store.get(name)

    def isset(self, name: str) -> bool:
        return self._store.has(name)

    def unsetopt(self, name: str) -> bool:
        """
        Restore an option's default value.

        Not supported: libcurl does not publish option defaults, so this
        leaves both the handle and the stored value untouched and returns
        False.
        """
        return self._store.clear(name)

    @property
    def options(self) -> Dict[str, Any]:
        """Snapshot of every applied option keyed by its ``CURLOPT_`` name."""
        return self._store.as_dict()

    @property
    def state(self) -> HandleState:
        return self._handle.state

    # Session lifecycle

    def init(self, url: Optional[str] = None) -> Optional["Curl"]:
        """
        Reopen a closed session.

        All stored options are applied to the new handle in the order they
        were first set. If ``url`` is given it is set afterwards.

        Args:
            url: Optional new target URL

        Returns:
            self, or None if the session is still open
        """
        if not self._handle.open():
            return None

        self._store.replay()
        if url:
            self.url = url
        logger.debug(f"Curl session reinitialized with {len(self._store)} options")
        return self

    def close(self) -> None:
        self._handle.close()

    # Transfer

    def exec(self) -> TransferResult:
        """
        Perform the transfer.

        Returns:
            The response body as bytes when ``returntransfer`` is set, True
            when it is not, or False if the transfer failed
        """
        return self._handle.perform()

    def error(self) -> str:
        """Message for the last transfer error, or an empty string."""
        return self._handle.error()

    def errno(self) -> int:
        """libcurl code for the last transfer error, 0 on success."""
        return self._handle.errno()

    def info(self, name: Optional[str] = None) -> Any:
        """
        Read transfer information from libcurl.

        Args:
            name: Info name such as ``"size_download"`` or
                ``"CURLINFO_RESPONSE_CODE"``; when omitted a dict of common
                values is returned

        Returns:
            The value, or None if the name is unknown or unavailable
        """
        if name is None:
            return {key: self.info(key) for key in COMMON_INFO}

        info = lookup_info(name)
        if info is None:
            return None
        return self._handle.getinfo(info)
