from pathlib import Path

import pandas as pd
import pytest

from tweet_sentiment.config.settings import OUTPUT_FILENAME, RESULT_DELIMITER
from tweet_sentiment.core.errors import OutputWriteError
from tweet_sentiment.core.result_writer import (
    ResultWriter,
    format_block,
    render_results,
    summarize_labels,
)
from tweet_sentiment.models.results import ScoredRecord, sentiment_label


@pytest.mark.parametrize(
    ("score", "label"),
    [(0.1, "Positive"), (-0.1, "Negative"), (0.0, "Neutral")],
)
def test_sentiment_label(score: float, label: str) -> None:
    assert sentiment_label(score) == label


def test_format_block_layout() -> None:
    block = format_block("tweets.txt_1: This is great", 3.0)

    assert block == (
        '\nTweet: "tweets.txt_1: This is great"\n'
        "Sentiment Score: 3.0 (Positive)\n"
        f"{RESULT_DELIMITER}\n"
    )


def test_render_results_sorts_by_key() -> None:
    content = render_results({"b.txt_1: x": -2.0, "a.txt_1: y": 0.0})

    assert content.index("a.txt_1: y") < content.index("b.txt_1: x")
    assert "Sentiment Score: -2.0 (Negative)" in content
    assert "Sentiment Score: 0.0 (Neutral)" in content


def test_write_results_into_existing_directory(tmp_path: Path) -> None:
    output_file = ResultWriter(echo=False).write_results({"t.txt_1: hi": 1.0}, tmp_path)

    assert output_file == tmp_path / OUTPUT_FILENAME
    assert 'Tweet: "t.txt_1: hi"' in output_file.read_text(encoding="utf-8")


def test_write_results_to_explicit_file(tmp_path: Path) -> None:
    target = tmp_path / "out" / "results.txt"

    output_file = ResultWriter(echo=False).write_results({"t.txt_1: hi": 1.0}, target)

    assert output_file == target
    assert target.exists()


def test_write_results_echoes_blocks(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    ResultWriter(echo=True).write_results({"t.txt_1: hi": -1.0}, tmp_path)

    assert "Sentiment Score: -1.0 (Negative)" in capsys.readouterr().out


def test_write_failure_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("file in the way", encoding="utf-8")

    with pytest.raises(OutputWriteError):
        ResultWriter(echo=True).write_results({"t.txt_1: hi": 1.0}, blocker / "results.txt")

    assert capsys.readouterr().out == ""


def test_summarize_labels_counts_every_label() -> None:
    counts = summarize_labels({"a": 1.0, "b": 2.0, "c": -1.0})

    assert counts == {"Positive": 2, "Negative": 1, "Neutral": 0}


def test_summarize_labels_of_empty_results() -> None:
    assert summarize_labels({}) == {"Positive": 0, "Negative": 0, "Neutral": 0}


def test_save_summary_csv(tmp_path: Path) -> None:
    records = [
        ScoredRecord(source="t.txt", line_number=1, text="This is great", score=3.0),
        ScoredRecord(source="t.txt", line_number=2, text="This is bad", score=-2.0),
    ]
    csv_path = tmp_path / "summary.csv"

    ResultWriter(echo=False).save_summary_csv(records, csv_path)

    frame = pd.read_csv(csv_path)
    assert list(frame.columns) == ["key", "source", "line_number", "text", "score", "label"]
    assert frame["label"].tolist() == ["Positive", "Negative"]
    assert frame["key"].tolist() == ["t.txt_1: This is great", "t.txt_2: This is bad"]
