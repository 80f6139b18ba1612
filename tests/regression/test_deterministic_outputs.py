import io

import pytest

from exposures.cli import parse_args, run_command


def _run_once(run_id: str) -> str:
    out = io.StringIO()
    args = parse_args(["--file", "tests/fixtures/sample_feed.csv", "--raw", "--run-id", run_id])
    assert run_command(args, out=out) == 0
    return out.getvalue()


@pytest.mark.regression
def test_raw_outputs_are_byte_stable_for_same_inputs():
    assert _run_once("run-a") == _run_once("run-b")
