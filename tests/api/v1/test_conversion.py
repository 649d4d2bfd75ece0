"""Tests for the conversion API endpoint."""

from unittest.mock import patch

from fastapi import status

from tests.conftest import get_mock_target


class TestConversionValidation:
    """Test conversion endpoint validation."""

    def test_convert_missing_sbv_text(self, client):
        """Test conversion without sbvText is rejected."""
        response = client.post("/api/v1/convert", json={})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "sbvText is required"

    def test_convert_empty_sbv_text(self, client):
        """Test conversion with empty sbvText is rejected."""
        response = client.post("/api/v1/convert", json={"sbvText": ""})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_convert_invalid_json(self, client):
        """Test a body that is not JSON fails validation."""
        response = client.post(
            "/api/v1/convert",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_convert_wrong_type(self, client):
        """Test a non-string sbvText fails validation."""
        response = client.post("/api/v1/convert", json={"sbvText": 123})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_convert_get_not_allowed(self, client):
        """Test only POST is accepted."""
        response = client.get("/api/v1/convert")
        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


class TestConversionSuccess:
    """Test successful conversion scenarios."""

    def test_convert_success(self, client, sample_sbv, sample_vtt):
        """Test successful conversion with italics."""
        response = client.post(
            "/api/v1/convert",
            json={"sbvText": sample_sbv, "italicsText": "world"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.text == sample_vtt
        assert response.headers["content-type"] == "text/vtt; charset=utf-8"
        assert response.headers["cache-control"] == "no-store"
        assert response.headers["content-disposition"] == 'attachment; filename="captions.vtt"'

    def test_convert_snake_case_fields(self, client, sample_sbv, sample_vtt):
        """Test snake_case field names are accepted too."""
        response = client.post(
            "/api/v1/convert",
            json={"sbv_text": sample_sbv, "italics_text": "world"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.text == sample_vtt

    def test_convert_without_italics(self, client, sample_sbv):
        """Test conversion with no phrase list adds no markup."""
        response = client.post("/api/v1/convert", json={"sbvText": sample_sbv})
        assert response.status_code == status.HTTP_200_OK
        assert "<i>" not in response.text
        assert response.text.startswith("WEBVTT\n\n00:00:00.000 --> 00:00:02.000\n")

    def test_convert_phrase_list_with_blank_lines(self, client, sample_sbv):
        """Test blank and padded phrase lines are ignored or trimmed."""
        response = client.post(
            "/api/v1/convert",
            json={"sbvText": sample_sbv, "italicsText": "\n  world  \r\n\r\nGoodbye\n"},
        )
        assert "Hello <i>world</i>" in response.text
        assert "<i>Goodbye</i>" in response.text

    def test_convert_output_name(self, client, sample_sbv):
        """Test the output name is sanitized and given a .vtt suffix."""
        response = client.post(
            "/api/v1/convert",
            json={"sbvText": sample_sbv, "outputName": 'episode "1"/final'},
        )
        assert response.headers["content-disposition"] == (
            'attachment; filename="episode _1_final.vtt"'
        )

    def test_convert_output_name_blank(self, client, sample_sbv):
        """Test a blank output name falls back to the default."""
        response = client.post(
            "/api/v1/convert",
            json={"sbvText": sample_sbv, "outputName": ""},
        )
        assert response.headers["content-disposition"] == 'attachment; filename="captions.vtt"'

    def test_convert_malformed_document(self, client):
        """Test a document without time lines still converts to an empty VTT."""
        response = client.post("/api/v1/convert", json={"sbvText": "no cues here"})
        assert response.status_code == status.HTTP_200_OK
        assert response.text == "WEBVTT\n"

    def test_convert_preflight(self, client):
        """Test CORS preflight requests are answered."""
        response = client.options(
            "/api/v1/convert",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == status.HTTP_200_OK


class TestConversionErrors:
    """Test conversion error handling."""

    def test_convert_unexpected_error(self, client, sample_sbv):
        """Test unexpected converter failures map to 500."""
        target = get_mock_target("sbv_to_vtt", "app.api.v1.conversion")
        with patch(target, side_effect=RuntimeError("boom")):
            response = client.post("/api/v1/convert", json={"sbvText": sample_sbv})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == "Unexpected error: boom"
