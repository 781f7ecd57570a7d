"""
Basic request example using oocurl.

Fetches a URL with a custom header and reports either the body
or the libcurl error.
"""

import logging
import sys

from oocurl import Curl, CurlUnavailableError

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def single_request(url: str) -> int:
    """Fetch one URL and print what came back."""
    logger.info(f"Requesting {url}")

    with Curl() as curl:
        curl.url = url
        curl.followlocation = True
        curl.httpheader = ["X-OOCurl-Version: " + Curl.VERSION]

        response = curl.exec()
        if response is False:
            logger.error(f"cURL error {curl.errno()}: {curl.error()}")
            return 1

        logger.info(f"Response code: {curl.info('response_code')}")
        logger.info(f"Downloaded {len(response)} bytes")
        logger.info(f"Options in effect: {sorted(curl.options)}")
        print(response.decode("utf-8", errors="replace"))

    return 0


def main() -> int:
    url = sys.argv[1] if len(sys.argv) > 1 else "http://example.com/"
    try:
        return single_request(url)
    except CurlUnavailableError as e:
        logger.error(f"{e.message}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
