"""Unit tests for mdreflink.api.StageResult module."""

from collections.abc import Iterator

from mdreflink.api.StageResult import StageResult


def test_stage_result_initialization():
    """Test that StageResult initializes correctly."""

    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_run_drives_callback():
    """Test that run() exhausts the callback and returns its progress."""

    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Half")
        yield (1.0, "Complete")
        result.result = "Done"
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.run() == [(0.5, "Half"), (1.0, "Complete")]
    assert result.result == "Done"
    assert result.success is True
