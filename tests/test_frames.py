"""Unit tests for frame packing primitives."""

import pytest

from rkconfigurator.protocol import FRAME_SIZE, encode_key_code, pack_frames, payload_capacity


class TestPackFrames:
    """Test splitting a flat table into frames."""

    @pytest.mark.unit
    def test_frame_count_and_size(self):
        """Every frame is exactly 65 bytes."""
        frames = pack_frames(bytes(455), 7, lead=b"\x03\x7e\x01")
        assert len(frames) == 7
        assert all(len(frame) == FRAME_SIZE for frame in frames)

    @pytest.mark.unit
    def test_headers(self):
        """Frame 0 gets the lead bytes, later frames only the common header."""
        frames = pack_frames(bytes(585), 9, lead=b"\x01\xf8")

        assert list(frames[0][:5]) == [0x0A, 0x09, 0x01, 0x01, 0xF8]
        for index, frame in enumerate(frames[1:], start=1):
            assert list(frame[:3]) == [0x0A, 0x09, index + 1]

    @pytest.mark.unit
    def test_table_consumed_sequentially(self):
        """Table bytes flow across frames without gaps or repeats."""
        table = bytes(i % 251 + 1 for i in range(455))
        frames = pack_frames(table, 7, lead=b"\x03\x7e\x01")

        payload = frames[0][6:] + b"".join(frame[3:] for frame in frames[1:])
        assert payload == table[:431]

    @pytest.mark.unit
    def test_short_table_zero_padded(self):
        """Frames past the end of a short table are zero after the header."""
        frames = pack_frames(b"\xff" * 10, 3)

        assert frames[0][3:13] == b"\xff" * 10
        assert frames[0][13:] == bytes(FRAME_SIZE - 13)
        assert frames[2][3:] == bytes(FRAME_SIZE - 3)

    @pytest.mark.unit
    def test_payload_capacity(self):
        """Capacity accounts for the common header and the lead bytes."""
        assert payload_capacity(7, 3) == 431
        assert payload_capacity(9, 2) == 556


class TestEncodeKeyCode:
    """Test 4-byte key code slots."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key_code,expected",
        [
            (0x41, [0x00, 0x00, 0x00, 0x41]),
            (0x00, [0x00, 0x00, 0x00, 0x00]),
            (0xFF, [0x00, 0x00, 0x00, 0xFF]),
            (0x100, [0x00, 0x00, 0x01, 0x00]),
            (0xE0E1, [0x00, 0x00, 0xE0, 0xE1]),
            (0x0001F600, [0x00, 0x01, 0xF6, 0x00]),
            (0x00FFFFFF, [0x00, 0xFF, 0xFF, 0xFF]),
            (0x01000000, [0x01, 0x00, 0x00, 0x00]),
            (0xDEADBEEF, [0xDE, 0xAD, 0xBE, 0xEF]),
        ],
    )
    def test_width_thresholds(self, key_code, expected):
        """Codes are right-justified big-endian in 4 bytes."""
        assert list(encode_key_code(key_code)) == expected

    @pytest.mark.unit
    def test_rejects_codes_over_32_bits(self):
        """Codes wider than 32 bits cannot be encoded."""
        with pytest.raises(OverflowError):
            encode_key_code(0x1_0000_0000)
