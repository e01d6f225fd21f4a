""" Tests twe_dlp.resolver """

import unittest

import requests

from twe_dlp.config import DownloadConfig
from twe_dlp.errors import InvalidInput, ResolutionFailed, TransportError
from twe_dlp.resolver import is_channel_id, resolve_channel_id

from http_fakes import make_response, make_session

SEARCH_URL = "https://twitchemotes.com/search/channel"


class TestIsChannelId(unittest.TestCase):
    """ Tests `twe_dlp.resolver.is_channel_id`. """

    def test_digits(self):
        self.assertTrue(is_channel_id("12345"))
        self.assertTrue(is_channel_id("0"))

    def test_not_digits(self):
        self.assertFalse(is_channel_id(""))
        self.assertFalse(is_channel_id("12a"))
        self.assertFalse(is_channel_id(" 12"))
        # Non-ASCII digits are names, not IDs:
        self.assertFalse(is_channel_id("١٢"))


class TestResolveChannelId(unittest.TestCase):
    """ Tests `twe_dlp.resolver.resolve_channel_id`. """

    def setUp(self) -> None:
        self.config = DownloadConfig()
        return super().setUp()

    def test_numeric_passthrough(self):
        """ Tests that numeric IDs are returned without a request. """
        session = make_session()
        for identifier in ["1", "12345", "000987"]:
            self.assertEqual(
                resolve_channel_id(identifier, self.config, session), identifier)
        session.post.assert_not_called()
        session.get.assert_not_called()

    def test_empty(self):
        """ Tests that an empty identifier is rejected. """
        session = make_session()
        with self.assertRaises(InvalidInput):
            resolve_channel_id("", self.config, session)
        session.post.assert_not_called()

    def test_redirect_url(self):
        """ Tests that the ID is read from the final (redirected) URL. """
        response = make_response(
            "https://twitchemotes.com/channels/71092938",
            body='<a href="/channels/1">not this one</a>')
        session = make_session(post=response)
        channel_id = resolve_channel_id("xqc", self.config, session)
        self.assertEqual(channel_id, "71092938")

    def test_form_submission(self):
        """ Tests the search form fields and headers. """
        response = make_response("https://twitchemotes.com/channels/5")
        session = make_session(post=response)
        resolve_channel_id("some name", self.config, session)
        args, kwargs = session.post.call_args
        self.assertEqual(args[0], SEARCH_URL)
        self.assertEqual(kwargs["data"], {"query": "some name", "source": "twe-dlp"})
        self.assertEqual(
            kwargs["headers"]["Content-Type"], "application/x-www-form-urlencoded")
        self.assertEqual(kwargs["headers"]["User-Agent"], self.config.user_agent)
        self.assertEqual(kwargs["timeout"], 30.0)

    def test_body_fallback(self):
        """ Tests that the body is scanned when the URL has no ID. """
        body = (
            '<ul><li><a href="/channels/111">first</a></li>'
            '<li><a href="/channels/222">second</a></li></ul>')
        response = make_response(SEARCH_URL, body=body)
        session = make_session(post=response)
        self.assertEqual(resolve_channel_id("first", self.config, session), "111")

    def test_no_match(self):
        """ Tests that a search without any channel link fails. """
        response = make_response(SEARCH_URL, body="<p>No results</p>")
        session = make_session(post=response)
        with self.assertRaises(ResolutionFailed) as context:
            resolve_channel_id("nobody", self.config, session)
        self.assertEqual(context.exception.identifier, "nobody")
        self.assertIn("nobody", str(context.exception))

    def test_transport_error(self):
        """ Tests that connection failures surface as TransportError. """
        session = make_session(post=requests.ConnectionError("refused"))
        with self.assertRaises(TransportError) as context:
            resolve_channel_id("xqc", self.config, session)
        self.assertEqual(context.exception.url, SEARCH_URL)
        self.assertIsInstance(context.exception.__cause__, requests.ConnectionError)


if __name__ == '__main__':
    unittest.main()
