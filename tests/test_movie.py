import io
from pathlib import Path

import pytest

from flixcore import csvio
from flixcore.cover import Cover
from flixcore.movie import FullMovie, LazyMovie, Movie

LONG_SUMMARY = (
    "abcdefghijklmnopqrstuvwxyz012_"
    "        abcdefghijklmnopqrstuvwxyz012_"
    "        abcdefghijklmnopqrstuvwxyz012_"
    "        abcdefghijklmnopqrstuvwxyz012_"
)


def _flix(title="flix", producer="toto", director="titi"):
    return FullMovie(
        title, 2015, producer, "drama", Cover("path1.png", "path2.png"),
        director, "", "empty movie", 135, "data/movie.mp4",
    )


def test_accessors():
    m = _flix()
    assert m.title == "flix"
    assert m.year == 2015
    assert m.producer == "toto"
    assert m.category == "drama"
    assert m.cover.normal_path == Path("path1.png")
    assert m.cover.square_path == Path("path2.png")
    assert m.director == "titi"
    assert m.actors == ""
    assert m.synopsis == "empty movie"
    assert m.duration == 135
    assert m.duration_str() == "2h 15min"
    assert m.video_file == Path("data/movie.mp4")


def test_to_string():
    m = _flix(title="Flix", producer="", director="toto")
    assert str(m) == "Flix - toto - drama - 2015"

    m.producer = "titi"
    m.director = ""
    assert str(m) == "Flix - titi - drama - 2015"


def test_mutators():
    m = _flix()
    m.year = 1850
    m.producer = "tata"
    m.category = "comedy"
    m.cover = Cover()
    m.director = "toto"
    m.actors = "jack & john"
    m.synopsis = LONG_SUMMARY
    m.duration = 25
    m.video_file = "movie2.mp4"

    assert m.title == "flix"
    assert m.year == 1850
    assert m.producer == "tata"
    assert m.category == "comedy"
    assert m.cover.normal_path == Cover().normal_path
    assert m.cover.square_path == Cover().square_path
    assert m.director == "toto"
    assert m.actors == "jack & john"
    assert m.synopsis == LONG_SUMMARY
    assert m.duration == 25
    assert m.duration_str() == "25min"
    assert m.video_file == Path("movie2.mp4")


def test_title_is_read_only():
    m = _flix()
    with pytest.raises(AttributeError):
        m.title = "other"
    assert m.title == "flix"


def test_equality_by_title():
    m = _flix(title="Flix")
    assert m == m
    m2 = _flix(title="Flix")
    assert m is not m2
    assert m == m2
    assert hash(m) == hash(m2)
    m3 = _flix(title="PiFlix")
    assert not m3 == m
    assert len({m, m2, m3}) == 2


def test_equality_ignores_other_fields():
    m = _flix(title="Flix", producer="a")
    other = _flix(title="Flix", producer="b")
    other.year = 1999
    assert m == other


def test_movie_is_abstract():
    with pytest.raises(TypeError):
        Movie("t", 2000, "", "", Cover(), "", "", 10, "")


@pytest.mark.parametrize(
    "minutes, expected",
    [(0, "0min"), (59, "59min"), (60, "1h 0min"), (135, "2h 15min")],
)
def test_duration_str(minutes, expected):
    m = _flix()
    m.duration = minutes
    assert m.duration_str() == expected


def test_print_full_truncates_synopsis():
    m = _flix()
    m.synopsis = LONG_SUMMARY
    out = io.StringIO()
    m.print_full(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "titre: flix"
    assert lines[1] == "date: 2015"
    assert lines[2] == "duration: 135 (2h 15min)"
    assert lines[3] == "category: drama"
    assert lines[4] == "director: titi"
    assert lines[5] == "producer: toto"
    assert lines[6] == "actors: "
    assert lines[7] == "Cover : path1.png | path2.png"
    assert lines[8] == 'file: "data/movie.mp4"'
    assert lines[9] == "synopsis: " + LONG_SUMMARY[:100] + "..."
    assert len(lines) == 10


def test_print_full_defaults_to_stdout(capsys):
    _flix().print_full()
    captured = capsys.readouterr().out
    assert "synopsis: empty movie...\n" in captured


SYNOPSIS1 = "Long time ago..."
SYNOPSIS2 = "efg\nh"
SYNOPSIS3 = '"go\r\nnot\''


@pytest.fixture
def csv_files(tmp_path):
    file1 = tmp_path / "synopsis.csv"
    with open(file1, "w", encoding="utf-8", newline="") as out:
        csvio.write_row(out, ["title", "synopsis", "other"])
        csvio.write(out, [
            ["f1", SYNOPSIS1, "bad"],
            ["f2", SYNOPSIS2, "good..\n."],
            ["f3", SYNOPSIS3, "ok"],
        ])
    file2 = tmp_path / "synopsis2.csv"
    with open(file2, "w", encoding="utf-8", newline="") as out:
        csvio.write_row(out, ["synopsis", "other", "title"])
        csvio.write(out, [
            [SYNOPSIS1, "bad", "f4"],
            [SYNOPSIS2, "good..\n.", "f5"],
        ])
    return file1, file2


def _lazy(title, csv_file):
    return LazyMovie(title, 2015, "", "", Cover(), "", "", csv_file, 10, "")


def test_lazy_synopsis(csv_files):
    file1, file2 = csv_files
    assert _lazy("f1", file1).synopsis == SYNOPSIS1
    assert _lazy("f2", file1).synopsis == SYNOPSIS2
    assert _lazy("f3", file1).synopsis == SYNOPSIS3
    assert _lazy("f4", file2).synopsis == SYNOPSIS1
    assert _lazy("f5", file2).synopsis == SYNOPSIS2


def test_lazy_set_synopsis(csv_files):
    file1, _ = csv_files
    f2 = _lazy("f2", file1)
    f2.synopsis = "toto titi \n tata"
    assert f2.synopsis == "toto titi \n tata"
    assert _lazy("f1", file1).synopsis == SYNOPSIS1
    assert _lazy("f3", file1).synopsis == SYNOPSIS3
    assert not file1.with_name(file1.name + ".tmp").exists()


def test_lazy_unknown_title(csv_files):
    file1, _ = csv_files
    assert _lazy("missing", file1).synopsis is None


def test_lazy_missing_file(tmp_path):
    absent = tmp_path / "absent.csv"
    movie = _lazy("f1", absent)
    with pytest.raises(FileNotFoundError):
        movie.synopsis
    with pytest.raises(FileNotFoundError):
        movie.synopsis = "text"
    assert movie.title == "f1"
    assert sorted(p.name for p in tmp_path.iterdir()) == []


def test_lazy_print_full(csv_files):
    file1, _ = csv_files
    out = io.StringIO()
    _lazy("f1", file1).print_full(out)
    assert out.getvalue().endswith("synopsis: Long time ago......\n")