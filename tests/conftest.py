"""Shared test fixtures for textbench."""

import io
import logging
import os

# Headless backend before anything imports matplotlib.pyplot
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest  # noqa: E402
from rich.console import Console  # noqa: E402


class RecordingSink:
    """Plot sink that remembers every call."""

    def __init__(self):
        self.calls = []

    def plot(self, xs, ys, style):
        self.calls.append(("plot", list(xs), list(ys), style))

    def set_xlabel(self, label):
        self.calls.append(("xlabel", label))

    def set_ylabel(self, label):
        self.calls.append(("ylabel", label))

    def set_title(self, title):
        self.calls.append(("title", title))

    def show(self):
        self.calls.append(("show",))

    def call(self, name):
        return next(c for c in self.calls if c[0] == name)


class StepClock:
    """Monotonic clock fake returning the given readings in order."""

    def __init__(self, *readings):
        self._readings = list(readings)

    def __call__(self):
        return self._readings.pop(0)


def write_file(root, relative, content=""):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep user and project config files and TEXTBENCH_* vars out of tests."""
    home = tmp_path_factory.mktemp("home")
    cwd = tmp_path_factory.mktemp("cwd")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(cwd)
    for key in list(os.environ):
        if key.startswith("TEXTBENCH_"):
            monkeypatch.delenv(key)
    return cwd


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo whatever handlers and levels a CLI run installed."""
    yield
    package = logging.getLogger("textbench")
    for handler in list(package.handlers):
        package.removeHandler(handler)
        handler.close()
    package.setLevel(logging.NOTSET)
    package.propagate = True
    logging.getLogger("textbench.timing").setLevel(logging.NOTSET)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def text_console():
    """Console writing plain text into a buffer; read it with .file.getvalue()."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def input_tree(tmp_path):
    """Small nested input tree with matching and non-matching files."""
    root = tmp_path / "input"
    write_file(root, "top.txt", "Hello,   World!\n")
    write_file(root, "a/b.txt", "cat 3\ndog 9\n")
    write_file(root, "a/deeper/c.txt", "")
    write_file(root, "a/notes.md", "ignored\n")
    write_file(root, "upper.TXT", "case-sensitive extension\n")
    return root


@pytest.fixture
def make_file():
    """Factory fixture: make_file(root, 'a/b.txt', content) -> Path."""
    return write_file


@pytest.fixture
def step_clock():
    """Factory fixture: step_clock(0.0, 0.5) -> clock callable."""
    return StepClock
