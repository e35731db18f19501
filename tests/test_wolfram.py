"""Tests for the Wolfram|Alpha adapter."""

from unittest.mock import patch

import pytest

from chatquery.exceptions import ConfigurationError, DecodeError
from chatquery.providers.wolfram import wolfram

SUCCESS_XML = """<?xml version='1.0' encoding='UTF-8'?>
<queryresult success='true' error='false' numpods='3' datatypes='' timedout=''
    timing='1.25' parsetiming='0.318' parsetimedout='false' version='2.6'>
  <pod title='Input' scanner='Identity' id='Input' position='100' error='false' numsubpods='1'>
    <subpod title=''><plaintext>2 + 2</plaintext></subpod>
  </pod>
  <pod title='Result' scanner='Simplification' id='Result' position='200' error='false'
      numsubpods='1' primary='true'>
    <subpod title=''><plaintext>4</plaintext></subpod>
  </pod>
  <pod title='Number name' scanner='Integer' id='NumberName' position='300' error='false' numsubpods='1'>
    <subpod title=''><plaintext>four</plaintext></subpod>
  </pod>
</queryresult>
"""

SINGLE_POD_XML = """<queryresult success='true' error='false' numpods='1' parsetiming='0.2'>
  <pod title='Input interpretation' id='Input' numsubpods='1'>
    <subpod title=''><plaintext>population of Oslo</plaintext></subpod>
  </pod>
</queryresult>
"""

DID_YOU_MEAN_XML = """<queryresult success='false' error='false' numpods='0' parsetiming='0.087'>
  <didyoumeans count='2'>
    <didyoumean score='0.8' level='medium'>weather oslo</didyoumean>
    <didyoumean score='0.4' level='low'>whether</didyoumean>
  </didyoumeans>
</queryresult>
"""

ERROR_XML = """<queryresult success='false' error='true' numpods='0'>
  <error><code>1</code><msg>Invalid appid</msg></error>
</queryresult>
"""


def test_wolfram_two_pods(settings, respond):
    with patch("chatquery.providers.wolfram.http_get", return_value=respond(text=SUCCESS_XML)) as mock_get:
        output = wolfram("2+2", settings)

    assert output == "\x02Wolfram (\x020.32ms\x02):\x02 2 + 2 \x02=>\x02 4"
    params = mock_get.call_args.kwargs["params"]
    assert params == {"format": "plaintext", "input": "2+2", "appid": "wolfram-app"}


def test_wolfram_single_pod_links_to_web_ui(settings, respond):
    with patch("chatquery.providers.wolfram.http_get", return_value=respond(text=SINGLE_POD_XML)):
        output = wolfram("population of Oslo", settings)

    assert output == (
        "\x02Wolfram (\x020.20ms\x02):\x02 population of Oslo \x02=>\x02 "
        "https://www.wolframalpha.com/input/?i=population+of+Oslo"
    )


def test_wolfram_did_you_mean(settings, respond):
    with patch("chatquery.providers.wolfram.http_get", return_value=respond(text=DID_YOU_MEAN_XML)):
        output = wolfram("wether oslo", settings)

    assert output == "\x02Wolfram (\x020.09ms\x02):\x02 Did you mean: weather oslo"


def test_wolfram_error_document(settings, respond):
    with patch("chatquery.providers.wolfram.http_get", return_value=respond(text=ERROR_XML)):
        assert wolfram("2+2", settings) == "\x02Wolfram:\x02 Query error Invalid appid"


def test_wolfram_bad_status(settings, respond):
    with patch("chatquery.providers.wolfram.http_get", return_value=respond(501)):
        assert wolfram("2+2", settings) == "\x02Wolfram:\x02 Server response was 501"


def test_wolfram_malformed_xml(settings, respond):
    with patch("chatquery.providers.wolfram.http_get", return_value=respond(text="<queryresult")):
        with pytest.raises(DecodeError):
            wolfram("2+2", settings)


def test_wolfram_requires_app_id(bare_settings):
    with patch("chatquery.providers.wolfram.http_get") as mock_get:
        with pytest.raises(ConfigurationError, match="wolfram_id"):
            wolfram("2+2", bare_settings)

    mock_get.assert_not_called()
