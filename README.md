# flixcore

Core library for a small movie catalogue: movie metadata, synopses kept in
memory or in a CSV file, sorting and filtering of movie lists, and generation
of cover images.

## Installation

```
pip install flixcore
```

## Modules

### `flixcore.cover`

`Cover` is a dataclass holding two paths, `normal_path` and `square_path`.
Both are stored as `pathlib.Path`, whether passed to the constructor or
assigned later. Without arguments they default to
`./assets/default_normal.jpg` and `./assets/default_square.jpg`.
`str(cover)` gives `"Cover : <normal> | <square>"`.

### `flixcore.csvio`

- `read_rows(stream)` yields each row of a text stream as a list of strings.
  The stream is read in chunks of 1024 characters, so stopping early stops
  reading. Reading is lenient: spaces and tabs around unquoted fields are
  dropped and blank lines are skipped. A stream that yields bytes raises
  `CsvError`.
- `write_field(out, field)`, `write_row(out, fields)` and `write(out, rows)`
  write fields always quoted, with embedded quotes doubled, commas between
  fields and a newline after each row.
- `get_field(stream, id, id_column, field_column)` treats the first row as
  the header and returns `field_column` of the first row whose `id_column`
  equals `id`. It returns `None` when nothing matches or a column is missing.
- `edit_field(instream, outstream, id, value, id_column, value_column)`
  copies the CSV, replacing `value_column` in the first matching row only.
  If the header lacks either column, nothing is written.

`CsvError` is a subclass of `ValueError`.

### `flixcore.movie`

`Movie` is an abstract base class with `title` (read-only), `year`,
`producer`, `category`, `cover`, `director`, `actors`, `duration` (minutes)
and `video_file` (a `Path`). It provides:

- `duration_str()`, for example `"2h 15min"` or `"25min"`.
- `str(movie)`, which joins the title, the non-empty director, producer,
  category and actors, and the year, with `" - "`.
- `print_full(file=None)`, which prints every field to standard output or to
  `file`. The synopsis, if there is one, is cut to 100 characters and
  followed by `...`.
- Equality and hashing by title only.

Subclasses decide where the `synopsis` property lives:

- `FullMovie` keeps it in memory. It can be read and assigned.
- `LazyMovie` reads it from a UTF-8 CSV file with `title` and `synopsis`
  columns every time it is read. Assigning it rewrites the file through a
  `.tmp` file next to it. Reading gives `None` when the title is not in the
  file. An `OSError` is raised when the file cannot be opened.

### `flixcore.sorting`

`sort(movies, key)` sorts a list in place. `key` is a "comes before"
predicate built by `sort_by_title`, `sort_by_year`, `sort_by_category`,
`sort_by_director` or `sort_by_duration`, each taking `ascending`. The year
sort is newest first by default; the others are ascending by default. Apart
from the title sort, ties are broken by ascending title.

### `flixcore.selection`

These functions return the matching movies in input order:

- `select_by_title(movies, value)`
- `select_by_category(movies, value)`
- `select_by_director(movies, value)`
- `select_by_year(movies, value, delta=0)`
- `select_by_duration(movies, value, delta)`

Year and duration match within `[value - delta, value + delta]`.

### `flixcore.imaging`

Uses Pillow.

- `create_covers(img_source, output_name, output_dir)` writes
  `<output_name>.jpg` (240x320) and `<output_name>_square.jpg` (240x240) into
  `output_dir`. Both are stretched to fit and saved as JPEG at quality 80. It
  returns a `Cover` pointing at the two files. If the source cannot be read
  or the outputs cannot be written, it returns the default `Cover()`.
- `resize_exact(image, width, height)` returns a new RGB or RGBA image. It
  raises `ValueError` when a dimension is not positive.
- `resize_to_width(image, width)` keeps the aspect ratio.
- `scale_image(image, ratio)` ignores the sign of `ratio`.

## Example

```python
import io

from flixcore import csvio, selection, sorting
from flixcore.cover import Cover
from flixcore.movie import FullMovie

movie = FullMovie(
    "Flix", 2015, "", "drama", Cover("path1.png", "path2.png"),
    "toto", "", "empty movie", 135, "data/movie.mp4",
)
print(movie)                 # Flix - toto - drama - 2015
print(movie.duration_str())  # 2h 15min
print(movie.synopsis)        # empty movie

movies = [movie]
sorting.sort(movies, sorting.sort_by_year(False))
recent = selection.select_by_year(movies, 2015, 2)

buf = io.StringIO()
csvio.write_row(buf, ["title", "synopsis"])
csvio.write(buf, [["Flix", "Long time ago..."]])
buf.seek(0)
print(csvio.get_field(buf, "Flix", "title", "synopsis"))  # Long time ago...
```

Generate covers from an image file:

```python
from flixcore.imaging import create_covers

cover = create_covers("poster.jpg", "flix", "covers")
print(cover.normal_path, cover.square_path)
```

## What it does not do

flixcore is a library only. It has no command-line program and no player or
user interface. It does not load or save a whole catalogue of movies: only a
`LazyMovie`'s synopsis is kept in a file. It does not download images;
`create_covers` works on a local file.

## Tests

```
pip install -e ".[test]"
pytest
```