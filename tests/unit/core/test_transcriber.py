"""Unit tests for the transcription orchestration."""

from unittest.mock import Mock

import pytest
import requests

from yt_scribe.core.transcript_params import build_transcript_params, decode_language
from yt_scribe.core.transcriber import YouTubeTranscriber
from yt_scribe.transcription.errors import (
    CaptionsDisabledError,
    InvalidVideoIdError,
    LanguageUnavailableError,
    TranscriptionError,
    VideoUnavailableError,
)
from yt_scribe.transcription.models import CaptionTrackInfo

from conftest import (
    VIDEO_ID,
    make_api_response,
    make_initial_data,
    make_player_response,
    make_response,
    make_segment_item,
    make_track,
    make_watch_html,
)

PRECONDITION_ERROR = {"error": {"code": 400, "message": "Precondition check failed.", "status": "FAILED_PRECONDITION"}}


def _page(mock_session, tracks=None, status="OK", params=None, reason=None, cookies=None):
    html = make_watch_html(make_player_response(tracks, status=status, reason=reason), make_initial_data(params))
    mock_session.get.return_value = make_response(200, html, cookies=cookies)


def _api(mock_session, body, status_code=200):
    mock_session.post.return_value = make_response(status_code, body)


def _sent_params(mock_session):
    return mock_session.post.call_args.kwargs["json"]["params"]


class TestTranscribe:
    """Tests for the transcribe pipeline."""

    def test_json_segments_returned_unmodified(self, transcriber, mock_session):
        params = build_transcript_params(VIDEO_ID, "en")
        _page(mock_session, [make_track("en", "English")], params=params)
        _api(mock_session, make_api_response([
            make_segment_item("Hello", 0, 1200),
            make_segment_item("world", 1200, 2500),
        ]))

        result = transcriber.transcribe(f"https://youtu.be/{VIDEO_ID}", "en", "json")

        assert result.video_id == VIDEO_ID
        assert result.language == "en"
        assert result.is_auto_generated is False
        assert result.transcript == [
            {"text": "Hello", "startMs": 0, "durationMs": 1200},
            {"text": "world", "startMs": 1200, "durationMs": 1300},
        ]
        assert _sent_params(mock_session) == params

    def test_defaults_to_english_text(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")])
        _api(mock_session, make_api_response([make_segment_item("Hello", 0, 1), make_segment_item("world", 1, 2)]))

        result = transcriber.transcribe(VIDEO_ID)

        assert result.language == "en"
        assert result.format == "text"
        assert result.transcript == "Hello world"

    def test_srt_format(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")])
        _api(mock_session, make_api_response([make_segment_item("Hi", 1000, 3000)]))

        result = transcriber.transcribe(VIDEO_ID, output_format="srt")

        assert result.transcript == "1\n00:00:01,000 --> 00:00:03,000\nHi"

    def test_text_with_timestamps(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")])
        _api(mock_session, make_api_response([make_segment_item("Hi", 65_000, 66_000)]))

        result = transcriber.transcribe(VIDEO_ID, timestamps=True)

        assert result.transcript == "[01:05] Hi"

    def test_page_params_reused_case_insensitively(self, transcriber, mock_session):
        params = build_transcript_params(VIDEO_ID, "de")
        _page(mock_session, [make_track("de")], params=params)
        _api(mock_session, make_api_response([make_segment_item("Hallo", 0, 1)]))

        transcriber.transcribe(VIDEO_ID, "DE")

        assert _sent_params(mock_session) == params

    def test_params_built_for_other_language(self, transcriber, mock_session):
        _page(mock_session, [make_track("en"), make_track("de")], params=build_transcript_params(VIDEO_ID, "en"))
        _api(mock_session, make_api_response([make_segment_item("Hallo", 0, 1)]))

        result = transcriber.transcribe(VIDEO_ID, "de")

        assert result.language == "de"
        assert decode_language(_sent_params(mock_session)) == "de"

    def test_params_built_when_page_has_none(self, transcriber, mock_session):
        _page(mock_session, [make_track("fr")])
        _api(mock_session, make_api_response([make_segment_item("Bonjour", 0, 1)]))

        transcriber.transcribe(VIDEO_ID, "fr")

        assert _sent_params(mock_session) == build_transcript_params(VIDEO_ID, "fr")

    def test_visitor_data_passed_to_api(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")])
        _api(mock_session, make_api_response([make_segment_item("Hi", 0, 1)]))

        transcriber.transcribe(VIDEO_ID)

        client = mock_session.post.call_args.kwargs["json"]["context"]["client"]
        assert client["visitorData"] == "CgtWaXNpdG9yMTIz"

    def test_cookies_not_forwarded_by_default(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")], cookies={"YSC": "abc"})
        _api(mock_session, make_api_response([make_segment_item("Hi", 0, 1)]))

        transcriber.transcribe(VIDEO_ID)

        assert "Cookie" not in mock_session.post.call_args.kwargs["headers"]

    def test_cookies_forwarded_when_enabled(self, app_config, session_factory, mock_session):
        app_config.youtube.forward_cookies = True
        _page(mock_session, [make_track("en")], cookies={"YSC": "abc"})
        _api(mock_session, make_api_response([make_segment_item("Hi", 0, 1)]))

        YouTubeTranscriber(app_config, session_factory=session_factory).transcribe(VIDEO_ID)

        cookie = mock_session.post.call_args.kwargs["headers"]["Cookie"]
        assert cookie == f"{app_config.youtube.consent_cookie}; YSC=abc"

    @pytest.mark.parametrize("tracks,language,expected", [
        ([make_track("en", kind="asr")], "en", True),
        ([make_track("en")], "en", False),
        ([make_track("en-US", kind="asr")], "en", True),
        ([make_track("de")], "en", False),
    ])
    def test_auto_generated_flag(self, transcriber, mock_session, tracks, language, expected):
        _page(mock_session, tracks)
        _api(mock_session, make_api_response([make_segment_item("Hi", 0, 1)]))

        assert transcriber.transcribe(VIDEO_ID, language).is_auto_generated is expected

    def test_blank_language_uses_default(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")])
        _api(mock_session, make_api_response([make_segment_item("Hi", 0, 1)]))

        assert transcriber.transcribe(VIDEO_ID, "  ").language == "en"


class TestTranscribeErrors:
    """Tests for error classification in the transcribe pipeline."""

    def test_invalid_input_fails_before_network(self, transcriber, session_factory):
        with pytest.raises(InvalidVideoIdError):
            transcriber.transcribe("https://example.com/not-a-video")
        session_factory.assert_not_called()

    def test_unknown_format_fails_before_network(self, transcriber, session_factory):
        with pytest.raises(ValueError):
            transcriber.transcribe(VIDEO_ID, output_format="markdown")
        session_factory.assert_not_called()

    def test_unplayable_video(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")], status="LOGIN_REQUIRED", reason="Private video")

        with pytest.raises(VideoUnavailableError, match="Private video"):
            transcriber.transcribe(VIDEO_ID)
        mock_session.post.assert_not_called()

    def test_precondition_with_tracks_is_language_unavailable(self, transcriber, mock_session):
        _page(mock_session, [make_track("en"), make_track("de")])
        _api(mock_session, PRECONDITION_ERROR)

        with pytest.raises(LanguageUnavailableError) as exc_info:
            transcriber.transcribe(VIDEO_ID, "fr")

        assert exc_info.value.language == "fr"
        assert exc_info.value.available == ["en", "de"]
        assert isinstance(exc_info.value.__cause__, CaptionsDisabledError)

    def test_precondition_without_tracks_is_captions_disabled(self, transcriber, mock_session):
        _page(mock_session, [])
        _api(mock_session, PRECONDITION_ERROR)

        with pytest.raises(CaptionsDisabledError) as exc_info:
            transcriber.transcribe(VIDEO_ID)

        assert VIDEO_ID in str(exc_info.value)

    def test_empty_segments_with_tracks_is_language_unavailable(self, transcriber, mock_session):
        _page(mock_session, [make_track("en"), make_track("de")])
        _api(mock_session, {"actions": []})

        with pytest.raises(LanguageUnavailableError) as exc_info:
            transcriber.transcribe(VIDEO_ID, "fr")

        assert exc_info.value.available == ["en", "de"]

    @pytest.mark.parametrize("tracks", [None, []])
    def test_empty_segments_without_tracks_is_captions_disabled(self, transcriber, mock_session, tracks):
        _page(mock_session, tracks)
        _api(mock_session, {"actions": []})

        with pytest.raises(CaptionsDisabledError):
            transcriber.transcribe(VIDEO_ID)

    def test_oversize_language_is_language_unavailable(self, transcriber, mock_session):
        _page(mock_session, [make_track("en"), make_track("de")])

        with pytest.raises(LanguageUnavailableError) as exc_info:
            transcriber.transcribe(VIDEO_ID, "x" * 100)

        assert exc_info.value.available == ["en", "de"]
        assert isinstance(exc_info.value.__cause__, ValueError)
        mock_session.post.assert_not_called()

    def test_api_http_error(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")])
        _api(mock_session, "rate limited", status_code=429)

        with pytest.raises(TranscriptionError) as exc_info:
            transcriber.transcribe(VIDEO_ID)

        assert exc_info.value.status_code == 429

    def test_page_network_error(self, transcriber, mock_session):
        mock_session.get.side_effect = requests.ConnectionError("boom")

        with pytest.raises(TranscriptionError):
            transcriber.transcribe(VIDEO_ID)

    def test_malformed_page_documents_degrade_to_build_fresh(self, transcriber, mock_session):
        mock_session.get.return_value = make_response(200, "<html><script>var ytInitialData = {oops};</script></html>")
        _api(mock_session, make_api_response([make_segment_item("Still works", 0, 1)]))

        result = transcriber.transcribe(VIDEO_ID)

        assert result.transcript == "Still works"
        assert _sent_params(mock_session) == build_transcript_params(VIDEO_ID, "en")


class TestListLanguages:

    def test_lists_tracks(self, transcriber, mock_session):
        _page(mock_session, [make_track("en", "English"), make_track("de", "German (auto-generated)", kind="asr")])

        assert transcriber.list_languages(f"https://www.youtube.com/watch?v={VIDEO_ID}") == [
            CaptionTrackInfo("en", "English", False),
            CaptionTrackInfo("de", "German (auto-generated)", True),
        ]
        mock_session.post.assert_not_called()

    @pytest.mark.parametrize("tracks", [None, []])
    def test_no_tracks_is_captions_disabled(self, transcriber, mock_session, tracks):
        _page(mock_session, tracks)

        with pytest.raises(CaptionsDisabledError):
            transcriber.list_languages(VIDEO_ID)

    def test_unplayable(self, transcriber, mock_session):
        _page(mock_session, [make_track("en")], status="ERROR")

        with pytest.raises(VideoUnavailableError):
            transcriber.list_languages(VIDEO_ID)

    def test_invalid_input(self, transcriber):
        with pytest.raises(InvalidVideoIdError):
            transcriber.list_languages("nothing here")


class TestInjectedCollaborators:

    def test_custom_page_fetcher_and_client(self, app_config):
        from yt_scribe.transcription.models import PageState

        page_fetcher = Mock()
        page_fetcher.fetch.return_value = PageState(
            video_id=VIDEO_ID,
            player_response=make_player_response([make_track("en")]),
        )
        api_client = Mock()
        api_client.get_transcript.return_value = make_api_response([make_segment_item("Injected", 0, 1)])

        result = YouTubeTranscriber(app_config, page_fetcher=page_fetcher, api_client=api_client).transcribe(VIDEO_ID)

        assert result.transcript == "Injected"
        page_fetcher.fetch.assert_called_once_with(VIDEO_ID)
        args = api_client.get_transcript.call_args.args
        assert args[0] == build_transcript_params(VIDEO_ID, "en")
        assert args[1] is None
