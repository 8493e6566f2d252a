"""
Command Line Tests
==================
"""

from scapy.all import wrpcap

from chunkstream.main import build_parser, main


class TestMain:
    """Exit codes and argument handling."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.capture is None
        assert args.output_dir is None

    def test_missing_capture_exits_1(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main([str(tmp_path / "missing.pcapng")]) == 1

    def test_default_capture_path(self, tmp_path, monkeypatch):
        """With no argument the configured ./video.pcapng is used."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("CHUNKSTREAM_CAPTURE_PATH", raising=False)
        assert main([]) == 1

    def test_successful_run(self, tmp_path, monkeypatch, make_datagram, make_udp_packet, image_chunks):
        monkeypatch.chdir(tmp_path)
        capture = tmp_path / "video.pcap"
        wrpcap(str(capture), [
            make_udp_packet(make_datagram(1, i, image_chunks[i]), 10.0 + i)
            for i in range(3)
        ])

        code = main([str(capture), "--output-dir", str(tmp_path / "frames"), "--log-level", "DEBUG"])

        assert code == 0
        assert (tmp_path / "frames" / "frame_0.jpg").read_bytes() == image_chunks[1] + image_chunks[2]
