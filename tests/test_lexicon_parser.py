import logging
from pathlib import Path

import pytest

from tweet_sentiment.core.errors import FileReadError
from tweet_sentiment.core.lexicon_parser import LexiconParser, MalformedLineError, parse_line
from tweet_sentiment.core.scorer import LexiconScorer


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("good,2.5", ("good", 2.5)),
        ("  Bad ,  -1.0  ", ("bad", -1.0)),
        ("meh,0", ("meh", 0.0)),
        ("tiny,.5", ("tiny", 0.5)),
        ("huge,1e2", ("huge", 100.0)),
    ],
)
def test_parse_line_accepts_word_score_pairs(line: str, expected: tuple) -> None:
    assert parse_line(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "onlyoneword", "x,notanumber", "a,1.0,extra", ",1.0", "x,",
        "x,nan", "x,inf", "x,1e400", "x,-1e400",
    ],
)
def test_parse_line_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(MalformedLineError):
        parse_line(line)


def test_mixed_case_lexicon_word_matches_lower_case_token(write_text) -> None:
    path = write_text("lexicon.txt", "Good,2.5\n")

    lexicon = LexiconParser().parse_file(path)

    assert LexiconScorer().score("good", lexicon) == 2.5


def test_malformed_lines_are_skipped_and_reported(write_text, caplog: pytest.LogCaptureFixture) -> None:
    path = write_text(
        "lexicon.txt",
        "good,1.0\nonlyoneword\nx,notanumber\n\nbad,-1.0\n",
    )

    with caplog.at_level(logging.WARNING):
        report = LexiconParser().parse_file_report(path)

    assert report.lexicon == {"good": 1.0, "bad": -1.0}
    assert report.malformed_lines == 2
    assert sorted(e.line_number for e in report.errors) == [2, 3]
    assert "MalformedLexiconLine" in caplog.text


def test_later_line_wins_within_one_file(write_text) -> None:
    path = write_text("lexicon.txt", "good,1.0\nGOOD,3.0\n")

    assert LexiconParser().parse_file(path) == {"good": 3.0}


def test_single_unreadable_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileReadError):
        LexiconParser().parse_file(tmp_path / "missing.txt")


def test_directory_parse_is_union_of_files(write_text, tmp_path: Path) -> None:
    write_text("lex/a.txt", "good,1.0\nbad,-1.0\n")
    write_text("lex/nested/b.txt", "great,3.0\n")

    report = LexiconParser(max_workers=4).parse(tmp_path / "lex")

    assert report.lexicon == {"good": 1.0, "bad": -1.0, "great": 3.0}
    assert report.files_parsed == 2
    assert report.errors == []


def test_directory_collision_takes_one_files_value(write_text, tmp_path: Path) -> None:
    write_text("lex/a.txt", "good,1.0\n")
    write_text("lex/b.txt", "good,2.0\n")

    report = LexiconParser(max_workers=2, deterministic=False).parse_directory(tmp_path / "lex")

    assert report.lexicon["good"] in {1.0, 2.0}


def test_deterministic_merge_prefers_last_file_in_sorted_order(write_text, tmp_path: Path) -> None:
    write_text("lex/a.txt", "good,1.0\n")
    write_text("lex/b.txt", "good,2.0\n")
    write_text("lex/c.txt", "good,3.0\n")

    for _ in range(5):
        report = LexiconParser(max_workers=3, deterministic=True).parse_directory(tmp_path / "lex")
        assert report.lexicon["good"] == 3.0


def test_unreadable_file_does_not_fail_directory_parse(write_text, tmp_path: Path) -> None:
    write_text("lex/a.txt", "good,1.0\n")
    bad = write_text("lex/b.txt", "bad,-1.0\n")

    class FlakyParser(LexiconParser):
        def parse_file_report(self, file_path):
            if Path(file_path) == bad:
                raise FileReadError(f"Cannot read {file_path}")
            return super().parse_file_report(file_path)

    report = FlakyParser(max_workers=2).parse_directory(tmp_path / "lex")

    assert report.lexicon == {"good": 1.0}
    assert report.files_parsed == 1
    assert report.failed_files == 1


def test_empty_directory_gives_empty_lexicon(tmp_path: Path) -> None:
    (tmp_path / "lex").mkdir()

    report = LexiconParser().parse(tmp_path / "lex")

    assert report.lexicon == {}
    assert report.files_parsed == 0


def test_out_of_range_score_is_skipped_as_malformed(write_text) -> None:
    path = write_text("lexicon.txt", "good,1.0\nhuge,1e400\n")

    report = LexiconParser().parse_file_report(path)

    assert report.lexicon == {"good": 1.0}
    assert report.malformed_lines == 1
    assert report.errors[0].line_number == 2
