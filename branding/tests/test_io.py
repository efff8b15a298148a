from unittest.mock import MagicMock, patch
import io
import json
from PIL import Image
import pytest
import requests
from branding.src.palette_engine.io import read_image_bytes, write_result_json
from branding.src.palette_engine.pipeline import build_palette_result


def _png_bytes(color):
    img = Image.new('RGB', (10, 10), color=color)
    img_byte_arr = io.BytesIO()
    img.save(img_byte_arr, format='PNG')
    return img_byte_arr.getvalue()


def test_read_image_bytes_url_success():
    img_bytes = _png_bytes('red')

    with patch('requests.get') as mock_get:
        # Mock the response
        mock_response = MagicMock()
        mock_response.content = img_bytes
        mock_response.raise_for_status.return_value = None
        mock_get.return_value = mock_response

        url = "https://example.com/logo.png"
        result = read_image_bytes(url)

        mock_get.assert_called_once_with(url, timeout=10)
        assert result == img_bytes


def test_read_image_bytes_url_failure():
    with patch('requests.get') as mock_get:
        # Mock a 404 error
        mock_response = MagicMock()
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("404 Client Error")
        mock_get.return_value = mock_response

        url = "http://example.com/missing.png"
        with pytest.raises(requests.exceptions.HTTPError):
            read_image_bytes(url)


def test_read_image_bytes_local_file(tmp_path):
    img_path = tmp_path / "logo.png"
    img_path.write_bytes(_png_bytes('blue'))

    result = read_image_bytes(str(img_path))

    assert result == img_path.read_bytes()


def test_write_result_json(tmp_path):
    out_path = tmp_path / "nested" / "result.json"

    write_result_json(build_palette_result("#000000"), out_path)

    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["palette"]["text_on_primary"] == "#ffffff"
    assert payload["auto_extracted"] is False
