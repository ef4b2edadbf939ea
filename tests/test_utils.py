"""Tests for toon_client.utils."""

import re
import uuid
from unittest.mock import patch

import pytest

from toon_client.utils import (
    decode_temperature,
    encode_temperature,
    generate_nonce,
    lookup_state,
    mask_params,
    mask_pii,
)

NONCE_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


class TestNonce:

    def test_format(self):
        for _ in range(200):
            nonce = generate_nonce()
            assert NONCE_RE.match(nonce), nonce

    def test_version_and_variant_bits(self):
        for _ in range(200):
            raw = bytes.fromhex(generate_nonce().replace("-", ""))
            assert raw[6] >> 4 == 0x4
            assert raw[8] >> 6 == 0b10

    def test_parses_as_uuid4(self):
        parsed = uuid.UUID(generate_nonce())
        assert parsed.version == 4
        assert parsed.variant == uuid.RFC_4122

    def test_fixed_bits_forced_on_extreme_input(self):
        """All-ones and all-zeros random bytes still yield valid version/variant."""
        with patch("toon_client.utils.os.urandom", return_value=b"\xff" * 16):
            assert generate_nonce() == "ffffffff-ffff-4fff-bfff-ffffffffffff"
        with patch("toon_client.utils.os.urandom", return_value=b"\x00" * 16):
            assert generate_nonce() == "00000000-0000-4000-8000-000000000000"

    def test_unique(self):
        assert len({generate_nonce() for _ in range(100)}) == 100

    def test_random_source_failure_propagates(self):
        with patch("toon_client.utils.os.urandom", side_effect=NotImplementedError):
            with pytest.raises(NotImplementedError):
                generate_nonce()


class TestTemperature:

    def test_encode_examples(self):
        assert encode_temperature(20.5) == 2050
        assert encode_temperature(20) == 2000
        assert encode_temperature(20.15) == 2015
        assert encode_temperature(0.01) == 1

    def test_encode_truncates_extra_precision(self):
        assert encode_temperature(20.129) == 2012
        assert encode_temperature(19.999) == 1999

    def test_round_trip_two_decimals(self):
        for hundredths in range(500, 3001):
            degrees = hundredths / 100.0
            assert round(decode_temperature(encode_temperature(degrees)), 2) == round(degrees, 2)

    def test_encode_rejects_non_finite(self):
        with pytest.raises(ValueError):
            encode_temperature(float("nan"))
        with pytest.raises(ValueError):
            encode_temperature(float("inf"))

    def test_decode(self):
        assert decode_temperature(2050) == 20.5
        assert decode_temperature(0) == 0.0


class TestLookupState:

    @pytest.mark.parametrize(
        "code, label",
        [(0, "comfort"), (1, "thuis"), (2, "slapen"), (3, "weg")],
    )
    def test_known_codes(self, code, label):
        assert lookup_state(code) == label

    @pytest.mark.parametrize("code", [-1, 4, 99, 1000])
    def test_unknown_codes(self, code):
        assert lookup_state(code) == ""


class TestMaskPii:

    def test_masks_query_parameters(self):
        text = "GET https://x/login?username=bob&password=hunter2"
        assert mask_pii(text) == "GET https://x/login?username=bob&password=***"

    def test_masks_session_parameters(self):
        text = "clientId=c1&clientIdChecksum=ck1&agreementId=a1&random=1234-abcd"
        assert mask_pii(text) == "clientId=***&clientIdChecksum=***&agreementId=a1&random=***"

    def test_masks_encoded_query_values(self):
        text = "login?username=bob&password=correct%20horse%26battery%2Cstaple"
        assert mask_pii(text) == "login?username=bob&password=***"

    def test_masks_json_fields(self):
        text = '{"clientId": "c1", "passwordHash": "deadbeef", "agreementIdChecksum": "ack1", "city": "Delft"}'
        assert mask_pii(text) == (
            '{"clientId": "***", "passwordHash": "***", "agreementIdChecksum": "***", "city": "Delft"}'
        )

    def test_masks_json_values_containing_separators(self):
        text = '{"password": "correct horse&battery, staple}", "passwordHash": "a\\"b,c"}'
        masked = mask_pii(text)
        assert masked == '{"password": "***", "passwordHash": "***"}'

    def test_masks_numeric_json_values(self):
        assert mask_pii('{"clientId": 4711, "sample": false}') == '{"clientId": "***", "sample": false}'

    def test_key_boundary(self):
        assert mask_pii("myclientId=x&agreementId=a1") == "myclientId=x&agreementId=a1"

    def test_empty(self):
        assert mask_pii("") == ""


def test_mask_params():
    params = {"username": "bob", "password": "s3cret&Tail,x y", "clientIdChecksum": "ck1", "value": "2050"}
    assert mask_params(params) == {
        "username": "bob",
        "password": "***",
        "clientIdChecksum": "***",
        "value": "2050",
    }
    assert params["password"] == "s3cret&Tail,x y"
