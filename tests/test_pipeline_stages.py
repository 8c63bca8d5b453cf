"""Unit tests for the individual summary pipeline stages."""

from __future__ import annotations

import asyncio
import dataclasses
import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from fakes import chinese_translator, provider_error, summary_json

from app.pipelines.summary import ingestion as ingestion_stage
from app.pipelines.summary import (
    GenerationRejected,
    GenerationRequest,
    IngestionRejected,
    MalformedResponse,
    MediaAsset,
    MediaProcessingFailed,
    MediaStatus,
    ProcessingTimeout,
    UpstreamUnavailable,
    generate_summary,
    ingest_media,
    list_structured_models,
    resolve_content_type,
    stage_upload,
    translate_text,
    wait_until_active,
)

PROCESSING_ASSET = MediaAsset(
    name="files/abc123",
    uri="https://generativelanguage.googleapis.com/v1beta/files/abc123",
    mime_type="audio/mpeg",
    display_name="talk.mp3",
    status=MediaStatus.PROCESSING,
)


def _model(name, actions, display_name=None, description=None):
    return SimpleNamespace(
        name=name,
        display_name=display_name,
        description=description,
        supported_actions=actions,
    )


def test_catalog_filters_and_sorts_descending(fake_client):
    fake_client.models = [
        _model("models/gemini-1.5-flash", ["generateContent", "countTokens"], "Gemini 1.5 Flash"),
        _model("models/text-embedding-004", ["embedContent"]),
        _model("models/gemini-2.0-flash-001", ["generateContent"], "Gemini 2.0 Flash"),
        _model("models/aqa", None),
    ]

    models = asyncio.run(list_structured_models(fake_client))

    assert [model.id for model in models] == ["gemini-2.0-flash-001", "gemini-1.5-flash"]
    assert models[0].name == "Gemini 2.0 Flash"
    assert all(model.supports_structured_generation for model in models)


def test_catalog_falls_back_to_raw_name_for_display(fake_client):
    fake_client.models = [_model("models/gemini-x", ["generateContent"])]

    (model,) = asyncio.run(list_structured_models(fake_client))

    assert model.as_payload() == {"id": "gemini-x", "name": "models/gemini-x", "description": ""}


def test_catalog_failure_is_upstream_unavailable(fake_client):
    fake_client.models_error = provider_error(503)

    with pytest.raises(UpstreamUnavailable):
        asyncio.run(list_structured_models(fake_client))


@pytest.mark.parametrize(
    ("declared", "filename", "expected"),
    [
        ("audio/mpeg", "talk.mp3", "audio/mpeg"),
        ("audio/webm; codecs=opus", "clip.webm", "audio/webm"),
        (None, "talk.mp3", "audio/mpeg"),
        ("application/octet-stream", "talk.mp3", "audio/mpeg"),
    ],
)
def test_resolve_content_type_accepts_audio(declared, filename, expected):
    assert resolve_content_type(declared, filename) == expected


@pytest.mark.parametrize(("declared", "filename"), [("image/png", "x.png"), (None, "notes.txt"), (None, None)])
def test_resolve_content_type_rejects_non_audio(declared, filename):
    with pytest.raises(IngestionRejected):
        resolve_content_type(declared, filename)


def test_stage_upload_rejects_empty_payload(tmp_path):
    with pytest.raises(IngestionRejected):
        stage_upload(b"", "talk.mp3", tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_staged_upload_is_removed_once(tmp_path):
    staged = stage_upload(b"ID3-fake-mp3", "talk.mp3", tmp_path)
    assert staged.path.exists()
    assert staged.path.suffix == ".mp3"
    assert staged.display_name == "talk.mp3"

    with staged:
        pass

    assert not staged.path.exists()
    assert staged.discarded
    staged.discard()  # second call is a no-op


def test_stage_upload_write_failure_is_upstream_unavailable(tmp_path, monkeypatch):
    def _disk_full(self, data):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(Path, "write_bytes", _disk_full)

    with pytest.raises(UpstreamUnavailable):
        stage_upload(b"ID3-fake-mp3", "talk.mp3", tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_discard_failure_does_not_mask_stage_error(tmp_path, monkeypatch):
    staged = stage_upload(b"ID3-fake-mp3", "talk.mp3", tmp_path)

    def _locked(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(ingestion_stage, "os", SimpleNamespace(remove=_locked))

    with pytest.raises(ProcessingTimeout):
        with staged:
            raise ProcessingTimeout("still processing")

    assert staged.discarded
    assert staged.path.exists()


def test_ingest_returns_pending_handle(tmp_path, fake_client):
    with stage_upload(b"ID3-fake-mp3", "talk.mp3", tmp_path) as staged:
        asset = asyncio.run(ingest_media(fake_client, staged, "audio/mpeg"))

    assert asset.name == "files/abc123"
    assert asset.status is MediaStatus.PROCESSING
    assert asset.display_name == "talk.mp3"
    assert fake_client.staged_existed == [True]
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (400, IngestionRejected),
        (413, IngestionRejected),
        (415, IngestionRejected),
        (401, UpstreamUnavailable),
        (403, UpstreamUnavailable),
        (429, UpstreamUnavailable),
        (500, UpstreamUnavailable),
        (None, UpstreamUnavailable),
    ],
)
def test_ingest_maps_provider_failures(tmp_path, fake_client, status_code, expected):
    fake_client.upload_error = provider_error(status_code)

    with pytest.raises(expected):
        with stage_upload(b"ID3-fake-mp3", "talk.mp3", tmp_path) as staged:
            asyncio.run(ingest_media(fake_client, staged, "audio/mpeg"))

    assert list(tmp_path.iterdir()) == []


def _recording_sleep(delays):
    async def _sleep(seconds):
        delays.append(seconds)

    return _sleep


def test_poller_waits_until_active(fake_client):
    fake_client.file_states = ["PROCESSING", "STATE_UNSPECIFIED", "PROCESSING", "ACTIVE"]
    delays = []

    ready = asyncio.run(
        wait_until_active(fake_client, PROCESSING_ASSET, interval=2, max_attempts=10, sleep=_recording_sleep(delays))
    )

    assert ready.status is MediaStatus.ACTIVE
    assert ready.uri == PROCESSING_ASSET.uri
    assert fake_client.count("get_file") == 4
    assert delays == [2, 2, 2]


def test_poller_raises_on_failed(fake_client):
    fake_client.file_states = ["PROCESSING", "FAILED"]

    with pytest.raises(MediaProcessingFailed):
        asyncio.run(wait_until_active(fake_client, PROCESSING_ASSET, interval=0, max_attempts=10))

    assert fake_client.count("get_file") == 2


def test_poller_times_out_after_max_attempts(fake_client):
    fake_client.file_states = ["PROCESSING"]
    delays = []

    with pytest.raises(ProcessingTimeout):
        asyncio.run(
            wait_until_active(fake_client, PROCESSING_ASSET, interval=2, max_attempts=3, sleep=_recording_sleep(delays))
        )

    assert fake_client.count("get_file") == 3
    assert delays == [2, 2]


def test_poller_status_failure_is_upstream_unavailable(fake_client):
    fake_client.status_error = provider_error(None)

    with pytest.raises(UpstreamUnavailable):
        asyncio.run(wait_until_active(fake_client, PROCESSING_ASSET, interval=0, max_attempts=3))


def _request(rules="Summarize in one sentence", model_id="model-a"):
    return GenerationRequest(
        media=dataclasses.replace(PROCESSING_ASSET, status=MediaStatus.ACTIVE),
        rules=rules,
        model_id=model_id,
    )


def test_generation_returns_structured_result(fake_client):
    fake_client.responder = lambda model, parts: summary_json(
        transcript="Hello and welcome to the show.",
        summary="A host welcomes listeners.",
    )

    result = asyncio.run(generate_summary(fake_client, _request()))

    assert result.transcript == "Hello and welcome to the show."
    assert result.summary == "A host welcomes listeners."
    assert result.language == "en"

    (model, parts, schema) = fake_client.calls[-1][1]
    assert model == "model-a"
    assert parts[0].file_data.file_uri == PROCESSING_ASSET.uri
    assert "Rules: Summarize in one sentence" in parts[1].text
    assert sorted(schema.required) == ["language", "summary", "transcript"]
    assert fake_client.count("generate_content") == 1


def test_generation_accepts_fenced_json(fake_client):
    fake_client.responder = lambda model, parts: "```json\n" + summary_json() + "\n```"

    result = asyncio.run(generate_summary(fake_client, _request()))

    assert result.summary == "Greeting."


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "Here is your summary: it was great",
        json.dumps({"transcript": "Hello", "summary": "Hi"}),
        json.dumps({"transcript": "Hello", "summary": 42, "language": "en"}),
        json.dumps(["Hello", "Hi", "en"]),
    ],
)
def test_generation_rejects_malformed_payloads(fake_client, payload):
    fake_client.responder = lambda model, parts: payload

    with pytest.raises(MalformedResponse):
        asyncio.run(generate_summary(fake_client, _request()))

    assert fake_client.count("generate_content") == 1


def test_generation_provider_failure_is_not_retried(fake_client):
    def _fail(model, parts):
        raise provider_error(400)

    fake_client.responder = _fail

    with pytest.raises(GenerationRejected):
        asyncio.run(generate_summary(fake_client, _request()))

    assert fake_client.count("generate_content") == 1


def test_translate_text_returns_single_field(fake_client):
    fake_client.responder = chinese_translator

    result = asyncio.run(translate_text(fake_client, "Hello world", "Chinese", "model-a"))

    assert result.translated_text == "你好，世界"
    (_, parts, schema) = fake_client.calls[-1][1]
    assert parts[0].text.startswith("Translate the following text to Chinese.")
    assert schema.required == ["translatedText"]


def test_translate_text_rejects_empty_input(fake_client):
    with pytest.raises(ValueError):
        asyncio.run(translate_text(fake_client, "   ", "Chinese", "model-a"))

    assert fake_client.calls == []


def test_translate_text_malformed_payload(fake_client):
    fake_client.responder = lambda model, parts: json.dumps({"text": "你好"})

    with pytest.raises(MalformedResponse):
        asyncio.run(translate_text(fake_client, "Hello world", "Chinese", "model-a"))
