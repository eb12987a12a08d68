import json

import pytest

from config.settings import AppSettings
from scripts.filter_images import EXIT_FAILURE, EXIT_OK, main


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config" / "config.json"
    monkeypatch.setenv("IMGSIFT_CONFIG", str(path))
    return path


def test_lists_filtered_images(image_root, config_file, capsys):
    assert main(["-d", str(image_root), "--width", "200..1000"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [str(image_root / "a.png")]


def test_first_run_creates_config_file(image_root, config_file):
    assert not config_file.exists()
    main(["-d", str(image_root)])
    assert json.loads(config_file.read_text(encoding="utf-8")) == json.loads(AppSettings().to_json())


def test_score_filters_use_configured_metadata(image_root, metadata_file, config_file, capsys):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        json.dumps({"root_images_dir": str(image_root), "metadata_path": str(metadata_file)}),
        encoding="utf-8",
    )
    assert main(["-s", "score >= 5.0"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [str(image_root / "a.png")]


def test_repeated_score_filters_are_combined(image_root, metadata_file, config_file, capsys):
    args = ["-d", str(image_root), "-m", str(metadata_file), "-s", ">= 1", "-s", "< 5"]
    assert main(args) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [str(image_root / "b.jpg")]


def test_missing_metadata_source_fails_without_output(image_root, config_file, capsys):
    assert main(["-d", str(image_root), "-s", "score >= 5.0"]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_missing_directory_fails(tmp_path, config_file, capsys):
    assert main(["-d", str(tmp_path / "missing")]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_missing_root_everywhere_fails(config_file, capsys):
    assert main([]) == EXIT_FAILURE
    assert capsys.readouterr().out == ""


def test_empty_result_is_success(image_root, config_file, capsys):
    assert main(["-d", str(image_root), "--height", "5000.."]) == EXIT_OK
    assert capsys.readouterr().out == ""


def test_directory_listing(tmp_path, config_file, capsys):
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    assert main(["-d", str(root), "-t", "directory"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [str(root), str(root / "sub")]


def test_generate_config_prints_defaults(config_file, capsys):
    assert main(["--generate-config"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == json.loads(AppSettings().to_json())
    assert not config_file.exists()


@pytest.mark.parametrize("bad", [["--width", "10..1"], ["-s", "score ~ 3"], ["-t", "file"], ["-v", "-q"]])
def test_invalid_arguments_exit_with_usage_error(bad):
    with pytest.raises(SystemExit) as excinfo:
        main(bad)
    assert excinfo.value.code == 2
