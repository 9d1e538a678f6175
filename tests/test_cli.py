import json

from charge_sim.__main__ import main


def test_demo_run_prints_reports(tmp_path, capsys):
    image = tmp_path / "demo.png"
    assert main(["--image", str(image)]) == 0

    out = capsys.readouterr().out
    assert "Total charge in the system: 0.0 C" in out
    assert out.count("Force on Charge") == 4
    assert image.exists()


def test_run_from_file_without_image(tmp_path, capsys):
    path = tmp_path / "pair.json"
    path.write_text(json.dumps({
        "k": 1.0,
        "charges": [
            {"position": [0, 0, 0], "value": 2.0},
            {"position": [0, 0, 2], "value": 3.0},
        ],
    }), encoding="utf-8")

    assert main([str(path), "--no-image"]) == 0
    out = capsys.readouterr().out
    assert "Force on Charge 1: (0.0, 0.0, 1.5)" in out
    assert "PNG" not in out


def test_partial_file_returns_error_status(tmp_path, caplog):
    """Fewer charges than capacity is a valid file, but forces cannot be summed."""
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({
        "capacity": 3,
        "charges": [{"index": 0, "position": [0, 0, 0], "value": 1e-6}],
    }), encoding="utf-8")

    assert main([str(path), "--no-image"]) == 1
    assert "unset slots: [1, 2]" in caplog.text


def test_coincident_charges_return_error_status(tmp_path, caplog):
    path = tmp_path / "overlap.json"
    path.write_text(json.dumps({
        "charges": [
            {"position": [1, 1, 1], "value": 1e-6},
            {"position": [1, 1, 1], "value": -1e-6},
        ],
    }), encoding="utf-8")

    assert main([str(path), "--no-image"]) == 1
    assert "zero-length" in caplog.text


def test_missing_file_returns_error_status(tmp_path):
    assert main([str(tmp_path / "nope.json"), "--no-image"]) == 1
