from wordperms.core.errors import OutputWriteError
from wordperms.core.io.write_results import write_results


def test_write_results_lines(tmp_path):
    p = tmp_path / "nested" / "out.txt"
    n = write_results(str(p), ["ab", "ba"])
    assert n == 2
    assert p.read_text(encoding="utf-8") == "ab\nba\n"


def test_write_results_empty(tmp_path):
    p = tmp_path / "out.txt"
    assert write_results(str(p), []) == 0
    assert p.read_text(encoding="utf-8") == ""


def test_write_results_into_directory_fails(tmp_path):
    try:
        write_results(str(tmp_path), ["a"])
        assert False, "expected OutputWriteError"
    except OutputWriteError as e:
        assert e.code == "E_OUTPUT_WRITE"
        assert "E_OUTPUT_WRITE" in str(e)
