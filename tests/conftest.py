"""Pytest configuration and fixtures for mansyn tests."""

import gzip

import pytest


FOO_PAGE = """\
.Dd May 1, 2020
.Dt FOO 1
.Os
.Sh NAME
.Nm foo
.Nd do foo things
.Sh SYNOPSIS
.Nm foo
.Op Fl x
.Nm foo
.Ar file
.Sh DESCRIPTION
The
.Nm
utility does foo.
.Bl -tag -width Ds
.It Fl y
Not part of the synopsis.
.El
"""

NAME_ONLY_PAGE = """\
.Sh NAME
.Nm bar
.Sh SYNOPSIS
.Nm bar
.Nm
.Sh DESCRIPTION
.Op Fl z
"""

PROSE_PAGE = """\
.TH BAZ 1
.SH NAME
baz \\- do baz things
.SH SYNOPSIS
.B baz
[\\fB\\-q\\fR]
.SH DESCRIPTION
"""


@pytest.fixture
def foo_lines():
    return FOO_PAGE.split('\n')


@pytest.fixture
def name_only_lines():
    return NAME_ONLY_PAGE.split('\n')


@pytest.fixture
def man_dir(tmp_path):
    """A man1-style directory with a mix of parsable and unparsable pages."""
    (tmp_path / "foo.1").write_text(FOO_PAGE)
    (tmp_path / "bar.1").write_text(NAME_ONLY_PAGE)
    (tmp_path / "baz.1").write_text(PROSE_PAGE)
    with gzip.open(tmp_path / "qux.1.gz", "wt") as f:
        f.write(FOO_PAGE.replace(".Nm foo", ".Nm qux"))
    (tmp_path / "subdir").mkdir()
    return tmp_path
