import pytest
from fastapi.testclient import TestClient

from api.config import Settings, get_settings
from api.dependencies import get_caption_service, get_upload_service
from api.main import create_app
from api.services import CaptionService, UploadService
from backend.errors import InvocationError
from backend.llms.openai_llm import OpenAIVisionLLM
from conftest import FakeVisionLLM


@pytest.fixture()
def settings(tmp_path):
    return Settings(openai_api_key="sk-test", upload_dir=str(tmp_path / "uploads"))


@pytest.fixture()
def make_client(settings):
    def _make(llm=None, llm_factory=None):
        app = create_app(settings)
        factory = llm_factory or (lambda: llm)
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_caption_service] = lambda: CaptionService(
            llm_factory=factory
        )
        app.dependency_overrides[get_upload_service] = lambda: UploadService(settings)
        return TestClient(app)

    return _make


def test_health(make_client):
    response = make_client().get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert body["openai_configured"] is True
    assert "timestamp" in body


def test_generate_captions(make_client, png_data_url, caption_reply):
    llm = FakeVisionLLM([caption_reply])
    response = make_client(llm).post(
        "/api/generate-captions",
        json={"imageBase64": png_data_url, "userNotes": "beach", "language": "Korean"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert len(body["captions"]) == 3
    assert body["captions"][1] == {"caption": "Golden hour", "hashtags": "#golden #hour"}
    assert "in Korean language" in llm.calls[0][1]
    assert "Image descriptions: beach" in llm.calls[0][1]


def test_missing_image_is_400(make_client):
    llm = FakeVisionLLM([])
    response = make_client(llm).post("/api/generate-captions", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Image base64 is required"}
    assert llm.calls == []


def test_unsupported_language_is_400(make_client, png_data_url):
    response = make_client(FakeVisionLLM([])).post(
        "/api/generate-captions",
        json={"imageBase64": png_data_url, "language": "Latin"},
    )
    assert response.status_code == 400
    assert "Supported languages" in response.json()["details"]


def test_missing_api_key_is_500(make_client, png_data_url):
    client = make_client(llm_factory=lambda: OpenAIVisionLLM(api_key=None))
    response = client.post("/api/generate-captions", json={"imageBase64": png_data_url})
    assert response.status_code == 500
    assert response.json() == {"error": "OpenAI API key not configured"}


def test_model_failure_is_500_with_details(make_client, png_data_url):
    llm = FakeVisionLLM([InvocationError(details="upstream timeout")])
    response = make_client(llm).post(
        "/api/generate-captions", json={"imageBase64": png_data_url}
    )
    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to generate captions",
        "details": "upstream timeout",
    }


def test_unexpected_error_is_reported_as_generation_failure(make_client, png_data_url):
    llm = FakeVisionLLM([RuntimeError("boom")])
    response = make_client(llm).post(
        "/api/generate-captions", json={"imageBase64": png_data_url}
    )
    assert response.status_code == 500
    assert response.json()["details"] == "boom"


def test_malformed_body_is_400(make_client):
    response = make_client(FakeVisionLLM([])).post(
        "/api/generate-multilingual", json={"languages": "English"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"


def test_generate_multilingual(make_client, png_data_url, caption_reply):
    llm = FakeVisionLLM([caption_reply, caption_reply])
    response = make_client(llm).post(
        "/api/generate-multilingual",
        json={
            "images": [{"imageBase64": png_data_url, "notes": "park"}],
            "languages": ["Spanish", "Traditional Chinese"],
            "tone": "warm",
        },
    )

    assert response.status_code == 200
    captions = response.json()["captions"]
    assert list(captions) == ["Spanish", "Traditional Chinese"]
    assert len(llm.calls) == 2


def test_multilingual_failure_returns_no_partial_results(
    make_client, png_data_url, caption_reply
):
    llm = FakeVisionLLM([caption_reply, InvocationError(details="rate limited")])
    response = make_client(llm).post(
        "/api/generate-multilingual",
        json={
            "images": [{"imageBase64": png_data_url}],
            "languages": ["English", "Japanese"],
        },
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to generate captions for Japanese",
        "details": "rate limited",
    }


def test_upload_and_serve(make_client, png_bytes):
    client = make_client()
    response = client.post(
        "/api/upload", files={"image": ("cat.PNG", png_bytes, "image/png")}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["originalName"] == "cat.PNG"
    assert body["size"] == len(png_bytes)
    assert body["filename"].startswith("image-")
    assert body["filename"].endswith(".png")
    assert body["url"] == f"http://testserver/uploads/{body['filename']}"

    served = client.get(f"/uploads/{body['filename']}")
    assert served.status_code == 200
    assert served.content == png_bytes


def test_upload_requires_file(make_client):
    response = make_client().post("/api/upload")
    assert response.status_code == 400
    assert response.json()["error"] == "No image file uploaded"


def test_upload_rejects_non_images(make_client):
    response = make_client().post(
        "/api/upload", files={"image": ("notes.txt", b"hello", "text/plain")}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Only image files are allowed"


def test_upload_rejects_oversized_files(make_client, settings, png_bytes):
    settings.max_upload_bytes = 10
    response = make_client().post(
        "/api/upload", files={"image": ("big.png", png_bytes, "image/png")}
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("File too large")
