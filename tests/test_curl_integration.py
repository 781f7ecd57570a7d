"""
Integration tests for Curl.

These run real libcurl transfers against a local HTTP server started
by the ``http_server`` fixture.
"""

from oocurl import Curl


class TestCurlIntegration:
    """Integration tests with a real HTTP server."""

    def test_get_request(self, http_server):
        """Test a plain GET with the default options."""
        with Curl() as curl:
            assert curl.url is None
            curl.url = http_server + "/"
            assert curl.url == http_server + "/"

            body = curl.exec()

            assert body == b"Hello from the test server"
            assert curl.errno() == 0
            assert curl.error() == ""
            assert curl.info("response_code") == 200

    def test_headers_sent(self, http_server):
        """Test that the user agent and custom headers reach the server."""
        with Curl(http_server + "/headers") as curl:
            curl.httpheader = ["X-OOCurl-Version: " + Curl.VERSION]
            body = curl.exec()

        assert b"ua=OOCurl " + Curl.VERSION.encode() in body
        assert b"version=" + Curl.VERSION.encode() in body

    def test_follow_redirect(self, http_server):
        """Test that redirects are left to libcurl."""
        with Curl(http_server + "/redirect", followlocation=True) as curl:
            body = curl.exec()
            assert body == b"Hello from the test server"
            assert curl.info("redirect_count") == 1

    def test_connection_refused(self, unused_url):
        """Test that a failed transfer is reported, not raised."""
        with Curl(unused_url, connecttimeout=2) as curl:
            assert curl.exec() is False
            assert curl.errno() != 0
            assert curl.error() != ""

    def test_reinit_reuses_options(self, http_server):
        """Test a transfer after close and init."""
        with Curl(http_server + "/headers") as curl:
            curl.useragent = "reinit-test"
            curl.close()

            assert curl.init() is curl
            assert b"ua=reinit-test" in curl.exec()

            curl.close()
            curl.init(http_server + "/")
            assert curl.exec() == b"Hello from the test server"
