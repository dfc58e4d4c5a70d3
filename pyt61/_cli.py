import argparse
import platform
import sys
import traceback

from . import reports
from .reports import Context, InvalidEncoding
from .transcode import first_invalid_t61_offset, t61_to_utf8, utf8_to_t61
from .version import __version__ as version


argparser = argparse.ArgumentParser(prog="pyt61", description="Transcoder between T.61 (teletex) and UTF-8", epilog="""T.61 to UTF-8 is lossless. UTF-8 to T.61 replaces characters T.61 can't express with '?'.""")

argparser.add_argument("mode", choices=["decode", "encode", "check"], help="decode: T.61 to UTF-8; encode: UTF-8 to T.61; check: only validate T.61 input")
argparser.add_argument("infiles", metavar="infile", type=str, nargs="*", default=["-"], help="input files, '-' stands for stdin (default)")

argparser.add_argument("-o", metavar="outfile", dest="outfile", type=str, help="name of output file (default: stdout)")

argparser.add_argument("--strict", action="store_true", help="when encoding, fail instead of replacing unrepresentable characters with '?'")
argparser.add_argument("--report-format", choices=["graphical", "bare"], default="graphical", help="format in which error messages and warnings are printed")

argparser.add_argument("--version", "-v", action="version", version=f"%(prog)s {version} running on {platform.python_implementation()} {platform.python_version()}")


def transcode_file(mode, path, data):
    if mode == "decode":
        return t61_to_utf8(data, path)
    elif mode == "encode":
        return utf8_to_t61(data, path)
    else:
        offset = first_invalid_t61_offset(data)
        if offset is not None:
            raise InvalidEncoding(offset, offset + 1, f"byte 0x{data[offset]:02x} is not defined in T.61")
        return b""


def main_cli(argv=None):
    args = argparser.parse_args(argv)


    error = False
    files_to_transcode = []
    for path in args.infiles:
        try:
            if path == "-":
                path = "stdin"
                data = sys.stdin.buffer.read()
            else:
                with open(path, "rb") as f:
                    data = f.read()
            files_to_transcode.append((path, data))
        except IOError as ex:
            print(f"Could not read input file '{path}':\n{ex}", file=sys.stderr)
            error = True

    if error:
        sys.exit(1)

    report_handler = {
        "graphical": reports.GraphicalHandler,
        "bare": reports.BareHandler
    }[args.report_format]()

    werror = ["unrepresentable-character"] if args.strict else []

    try:
        outputs = []
        with reports.handle_reports(report_handler, werror=werror):
            for path, data in files_to_transcode:
                try:
                    outputs.append(transcode_file(args.mode, path, data))
                except InvalidEncoding as ex:
                    reports.error(
                        "invalid-utf8" if args.mode == "encode" else "invalid-t61",
                        (Context(path, data, ex.start), Context(path, data, ex.end), ex.reason)
                    )
    except reports.UnrecoverableError:
        sys.exit(1)
    except Exception:  # pylint: disable=broad-except
        print("An unexpected internal error happened.\nThe following information will be of interest to the maintainer\n(hopefully along with the input that triggered it):\n\n---\n", file=sys.stderr)
        print(f"Version: pyt61 {version}\nPython: {platform.python_implementation()} {platform.python_version()}\nPlatform: {platform.platform()}\n", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)


    if args.mode == "check":
        for path, _data in files_to_transcode:
            print(f"File '{path}' is valid T.61", file=sys.stderr)
        return


    if args.outfile is None or args.outfile == "-":
        sys.stdout.buffer.write(b"".join(outputs))
        sys.stdout.buffer.flush()
    else:
        try:
            with open(args.outfile, "wb") as f:
                f.write(b"".join(outputs))
        except IOError as ex:
            print(f"Could not write to '{args.outfile}':\n{ex}", file=sys.stderr)
            sys.exit(1)
        else:
            print(f"File '{args.outfile}' was written", file=sys.stderr)
