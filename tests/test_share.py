"""Tests for WhatsApp share links and the error hierarchy."""

from __future__ import annotations

import pytest

from md2wa import whatsapp_share_url
from md2wa.errors import Md2WaError, Md2WaShareError


class TestWhatsappShareUrl:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hi *there*", "https://wa.me/?text=Hi%20*there*"),
            ("a&b=c\n", "https://wa.me/?text=a%26b%3Dc%0A"),
            ("café", "https://wa.me/?text=caf%C3%A9"),
            ("(ok)! ~x~ _y_ 'z'", "https://wa.me/?text=(ok)!%20~x~%20_y_%20'z'"),
            ("https://x.com/?q=1", "https://wa.me/?text=https%3A%2F%2Fx.com%2F%3Fq%3D1"),
        ],
    )
    def test_encodes_like_encode_uri_component(self, text, expected):
        assert whatsapp_share_url(text) == expected

    def test_custom_base_url(self):
        url = whatsapp_share_url("hi", base_url="https://api.whatsapp.com/send")
        assert url == "https://api.whatsapp.com/send?text=hi"

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_output_raises(self, text):
        with pytest.raises(Md2WaShareError) as exc_info:
            whatsapp_share_url(text)
        assert exc_info.value.code == "empty_output"


class TestErrors:
    def test_share_error_is_md2wa_error(self):
        assert issubclass(Md2WaShareError, Md2WaError)

    def test_error_fields(self):
        cause = ValueError("boom")
        err = Md2WaError("failed", code="x", details={"k": 1}, original_error=cause)
        assert str(err) == "failed"
        assert err.code == "x"
        assert err.details == {"k": 1}
        assert err.original_error is cause

    def test_error_defaults(self):
        err = Md2WaError("failed")
        assert err.code is None
        assert err.details == {}
        assert err.original_error is None
