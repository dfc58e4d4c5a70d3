from collections import namedtuple
import contextvars
import itertools
import sys


class Report:
    def __init__(self, text: str, raw_text: str):
        self.text: str = text
        self.raw_text: str = raw_text

    def __call__(self, *args, **kwargs):
        emit_report(self, *args, **kwargs)

error = Report("\x1b[91mError\x1b[0m", "Error")
critical = Report("\x1b[91mError\x1b[0m", "Error")
warning = Report("\x1b[33mWarning\x1b[0m", "Warning")


# `code` is the input being transcoded: bytes for T.61 input, str for text
# that has already been decoded from UTF-8. `pos` indexes into it.
Context = namedtuple("Context", ["filename", "code", "pos"])


# Innermost handler last. Each thread (and each asyncio task) sees its own stack
_handlers_stack = contextvars.ContextVar("handlers_stack", default=())


class handle_reports:
    def __init__(self, fn, werror=()):
        self.fn = fn
        self.obj = None
        self.werror = frozenset(werror)
        self.is_error_condition = False
        self.token = None

    def __enter__(self):
        if hasattr(self.fn, "__enter__"):
            self.obj = self.fn.__enter__()
        else:
            self.obj = self.fn

        self.token = _handlers_stack.set(_handlers_stack.get() + (self,))

        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        assert _handlers_stack.get()[-1] is self
        _handlers_stack.reset(self.token)

        if hasattr(self.obj, "__exit__"):
            swallow = self.obj.__exit__(exc_type, exc_value, exc_tb)
        else:
            swallow = False

        if self.is_error_condition:
            if swallow:
                if exc_type is not UnrecoverableError:
                    raise UnrecoverableError()
            else:
                if exc_type is None or exc_type is RecoverableError:
                    raise UnrecoverableError()

        return swallow


def is_active():
    return bool(_handlers_stack.get())


class BareHandler:
    def __call__(self, priority, identifier, *reports):
        for ctx_start, _ctx_end, text in reports:
            text = text.replace("\n", " ")
            print(f"{ctx_start.filename}:{ctx_start.pos}: {priority.raw_text}: {text} [-W{identifier}]", file=sys.stderr)


class GraphicalHandler:
    def __call__(self, priority, identifier, *reports):
        for file_i, (filename, file_reports) in enumerate(itertools.groupby(reports, key=lambda report: report[0].filename)):
            if file_i == 0:
                print(f"{priority.text} in \x1b[96m{filename}\x1b[0m: \x1b[38;5;208m[-W{identifier}]\x1b[0m", file=sys.stderr)
            else:
                print(f"In \x1b[96m{filename}\x1b[0m:", file=sys.stderr)

            for ctx_start, ctx_end, text in file_reports:
                assert ctx_start.filename == ctx_end.filename
                if isinstance(ctx_start.code, str):
                    self.print_text(ctx_start, ctx_end, text)
                else:
                    self.print_hex(ctx_start, ctx_end, text)

        print(file=sys.stderr)


    def print_text(self, ctx_start, ctx_end, text):
        code = ctx_start.code
        idx_line_start = code.rfind("\n", 0, ctx_start.pos) + 1
        idx_line_end = code.find("\n", ctx_start.pos)
        if idx_line_end == -1:
            idx_line_end = len(code)
        line_no = code[:idx_line_start].count("\n")

        line = code[idx_line_start:idx_line_end]
        start_col_no = (ctx_start.pos - idx_line_start) + line[:ctx_start.pos - idx_line_start].count("\t") * 3
        end_col_no = start_col_no + max(min(ctx_end.pos, idx_line_end) - ctx_start.pos, 1)
        line = line.replace("\t", " " * 4)

        print("\x1b[92m" + str(line_no + 1).rjust(5) + "\x1b[0m \x1b[38;5;242m│ \x1b[0m", end="", file=sys.stderr)
        print(line[:start_col_no] + "\x1b[48;5;52m" + line[start_col_no:end_col_no] + "\x1b[0m" + line[end_col_no:], file=sys.stderr)
        for line_i, msg_line in enumerate(text.split("\n")):
            print(" " * 5 + " \x1b[38;5;242m│ \x1b[38;5;11m" + " " * start_col_no + ("🡹 " if line_i == 0 else "  ") + msg_line + "\x1b[0m", file=sys.stderr)


    def print_hex(self, ctx_start, ctx_end, text):
        code = ctx_start.code
        end = max(ctx_end.pos, ctx_start.pos + 1)
        first_row = max(ctx_start.pos // 16 - 1, 0)
        last_row = min((end - 1) // 16 + 1, max(len(code) - 1, 0) // 16)

        for row in range(first_row, last_row + 1):
            offset = row * 16
            chunk = code[offset:offset + 16]
            cells = []
            for i, byte in enumerate(chunk, offset):
                if ctx_start.pos <= i < end:
                    cells.append(f"\x1b[48;5;52m{byte:02x}\x1b[0m")
                else:
                    cells.append(f"{byte:02x}")
            cells += ["  "] * (16 - len(chunk))
            printable = "".join(chr(byte) if 0x20 <= byte < 0x7f else "." for byte in chunk)
            print(f"\x1b[92m{offset:08x}\x1b[0m \x1b[38;5;242m│\x1b[0m " + " ".join(cells) + f" \x1b[38;5;242m│ {printable}\x1b[0m", file=sys.stderr)

            if offset <= ctx_start.pos < offset + 16:
                column = 11 + (ctx_start.pos - offset) * 3
                for line_i, msg_line in enumerate(text.split("\n")):
                    print(" " * 9 + "\x1b[38;5;242m│\x1b[38;5;11m" + " " * (column - 10) + ("🡹 " if line_i == 0 else "  ") + msg_line + "\x1b[0m", file=sys.stderr)


def emit_report(priority, identifier, *reports):
    handlers_stack = _handlers_stack.get()
    if not handlers_stack:
        # Library callers that don't install a handler don't get diagnostics
        if priority is critical:
            raise UnrecoverableError()
        return

    handler = handlers_stack[-1]
    if priority is warning and identifier in handler.werror:
        priority = error

    handler.obj(priority, identifier, *reports)

    if priority in (error, critical):
        handler.is_error_condition = True

    if priority is critical:
        raise UnrecoverableError()


class RecoverableError(Exception):
    pass

class UnrecoverableError(Exception):
    pass


class InvalidEncoding(ValueError):
    def __init__(self, start, end, reason):
        super().__init__(f"invalid encoding at offset {start}: {reason}")
        self.start = start
        self.end = end
        self.reason = reason

class OutOfMemory(MemoryError):
    pass
