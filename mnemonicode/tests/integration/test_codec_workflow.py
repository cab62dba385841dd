"""
Integration tests for the MnemonicCodec service
"""

import threading

import pytest

from mnemonicode import CodecSettings, DecodeError, MnemonicCodec, decode, encode
from mnemonicode.protocols import EncoderProtocol

REFERENCE = bytes([101, 2, 240, 6, 108, 11, 20, 97])


class TestCodecWorkflow:
    """Test end-to-end encode/decode through the service layer"""

    def test_implements_protocol(self):
        codec = MnemonicCodec()

        assert isinstance(codec, EncoderProtocol)
        assert codec.name == "mnemonicode"

    def test_explain_groups(self):
        groups = MnemonicCodec().explain(b"hello")

        assert [g.words for g in groups] == [("square", "angel", "stone"), ("carlo",)]
        assert [g.chunk.offset for g in groups] == [0, 4]

    def test_default_codec_matches_module_functions(self, random_payloads):
        codec = MnemonicCodec()

        for data in random_payloads:
            text = codec.encode(data)
            assert text == encode(data)
            assert codec.decode(text) == decode(text) == data

    def test_encode_with_stats(self):
        codec = MnemonicCodec()

        text, stats = codec.encode_with_stats(REFERENCE)

        assert text == "digital-apollo-aroma--rival-artist-rebel"
        assert stats.byte_count == 8
        assert stats.word_count == 6
        assert stats.group_count == 2
        assert stats.text_length == len(text)
        assert [g.words for g in stats.groups] == [
            ("digital", "apollo", "aroma"), ("rival", "artist", "rebel"),
        ]

    def test_decode_with_stats(self):
        data, stats = MnemonicCodec().decode_with_stats("consul-quiet-fax")

        assert data == b"\x01\xe2\x40"
        assert (stats.byte_count, stats.word_count, stats.group_count) == (3, 3, 1)

    def test_custom_format_needs_lenient_decode(self, random_payloads):
        settings = CodecSettings(format_template="x x x\n", strict=False)
        codec = MnemonicCodec(settings)

        for data in random_payloads:
            assert codec.decode(codec.encode(data)) == data

    def test_abbreviated_output_roundtrips(self, random_payloads):
        codec = MnemonicCodec(CodecSettings(abbreviate=True))

        for data in random_payloads:
            text = codec.encode(data)
            assert len(text) <= len(encode(data))
            assert codec.decode(text) == data

    def test_strict_codec_rejects_custom_layout(self):
        codec = MnemonicCodec()

        with pytest.raises(DecodeError):
            codec.decode("digital apollo aroma")

    def test_verbose_logging(self, caplog):
        with caplog.at_level("INFO", logger="mnemonicode"):
            MnemonicCodec().encode_with_stats(REFERENCE, verbose=True)

        assert "encoded 8 bytes as 6 words in 2 groups" in caplog.text

    def test_concurrent_use(self, random_payloads):
        codec = MnemonicCodec()
        failures = []

        def worker():
            for data in random_payloads:
                if codec.decode(codec.encode(data)) != data:
                    failures.append(data)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert failures == []
