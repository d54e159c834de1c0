from peershare.cli import main


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "PeerShare-Lite Commands:" in out
    assert "peershare send <file> <ip>" in out


def test_unknown_command_reports_error(capsys):
    assert main(["fly"]) == 0
    assert "Unknown command: fly" in capsys.readouterr().out


def test_send_without_target_prints_usage_error(capsys):
    assert main(["send", "file.txt"]) == 0
    assert "Usage: peershare send <file> <ip>" in capsys.readouterr().out


def test_send_of_missing_file_reports_error(capsys, tmp_path):
    assert main(["send", str(tmp_path / "missing.bin"), "127.0.0.1"]) == 0
    out = capsys.readouterr().out
    assert "[ERROR] " in out
    assert "File sent successfully" not in out