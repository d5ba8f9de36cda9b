import io

from prompt_toolkit.history import InMemoryHistory

from ember.line_reader import PromptToolkitLineReader, StreamLineReader, make_line_reader


class FakePromptSession:
    def __init__(self, results):
        self.results = list(results)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def test_stream_reader_strips_newlines_and_signals_eof():
    out = io.StringIO()
    reader = StreamLineReader(io.StringIO("a\r\nb\n\n"), out)
    assert reader.read_line("? ") == "a"
    assert reader.read_line("? ") == "b"
    assert reader.read_line("? ") == ""
    assert reader.read_line("? ") is None
    assert out.getvalue() == "? ? ? ? "


def test_make_line_reader_with_streams():
    reader = make_line_reader(io.StringIO(""), io.StringIO())
    assert isinstance(reader, StreamLineReader)


def test_make_line_reader_without_terminal(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    reader = make_line_reader()
    assert isinstance(reader, StreamLineReader)


def test_prompt_toolkit_reader_handles_interrupt_and_eof():
    reader = PromptToolkitLineReader(history=InMemoryHistory())
    reader.session = FakePromptSession(["(+ 1 2)", KeyboardInterrupt(), "again", EOFError()])
    assert reader.read_line("> ") == "(+ 1 2)"
    # Ctrl-C re-prompts instead of ending input
    assert reader.read_line("> ") == "again"
    assert reader.read_line("> ") is None
    assert reader.session.prompts == ["> "] * 4
