import pytest

from fftframe.cli import demo_complex, demo_dataframe, demo_saveload, main
from fftframe.dataframe import DF_SIZE, DataFrame
from fftframe.storage import load_txt, save_txt


def _write_input(path):
    frame = DataFrame()
    frame.fill_function(lambda x: 0.5 * (int(x) % 4))
    save_txt(frame, path)
    return frame


def test_demo_complex_output(capsys):
    demo_complex()
    out = capsys.readouterr().out.splitlines()
    assert out == ["z1 + z2 = 4.00 + 2.00i", "z1 * z2 = 11.00 - 2.00i"]


def test_demo_dataframe_output(capsys):
    assert demo_dataframe() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 15
    assert lines[0] == "First 5 samples:"
    assert lines[1].startswith("  df[ 0] = ")
    assert lines[6] == "Last 5 samples:"
    assert lines[11].startswith(f"  df[{DF_SIZE - 1}] = ")
    assert lines[12] == "After modifying clone at index 0:"
    assert lines[14] == "  cloned   df2[0] = 123.456001"
    assert lines[13].split("=")[1].strip() == lines[1].split("=")[1].strip()


def test_demo_saveload_doubles_samples(tmp_path, capsys):
    in_path = tmp_path / "in.txt"
    out_path = tmp_path / "out.txt"
    original = _write_input(in_path)
    assert demo_saveload(in_path, out_path) == 0
    assert list(load_txt(out_path)) == [2.0 * v for v in original]
    assert f"({DF_SIZE} samples)" in capsys.readouterr().out


def test_demo_saveload_missing_input(tmp_path, capsys):
    assert demo_saveload(tmp_path / "absent.txt", tmp_path / "out.txt") == 1
    assert "Error: failed to load" in capsys.readouterr().err


def test_main_runs_pipeline(tmp_path, capsys):
    in_path = tmp_path / "in.txt"
    re_path = tmp_path / "re.txt"
    im_path = tmp_path / "im.txt"
    _write_input(in_path)
    code = main(["--input", str(in_path), "--real", str(re_path), "--imag", str(im_path)])
    out = capsys.readouterr().out
    assert code == 0
    assert "FFT pipeline finished successfully." in out
    assert out.rstrip().endswith("result : 0")
    assert len(load_txt(re_path)) == DF_SIZE
    assert len(load_txt(im_path)) == DF_SIZE


def test_main_reports_failure(tmp_path, capsys):
    code = main([
        "--input", str(tmp_path / "absent.txt"),
        "--real", str(tmp_path / "re.txt"),
        "--imag", str(tmp_path / "im.txt"),
    ])
    out = capsys.readouterr().out
    assert code == 1
    assert "FFT pipeline failed" in out
    assert out.rstrip().endswith("result : 1")


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit) as info:
        main(["--demo", "nothing"])
    assert info.value.code == 2