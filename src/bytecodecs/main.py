import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

from .auto_decoder import auto_decode
from .config import CONFIG_PATH, Settings, load_settings, resolve_history_path, save_settings
from .encoding import Encoding, decode_text, encode
from .formats import DATA_FORMATS, dump_bytes, load_bytes
from .history import log_event

ENCODING_CHOICES = [member.value for member in Encoding]


def _encoding_from_args(args: argparse.Namespace) -> Encoding:
    settings: Settings = args.settings
    return Encoding.parse(args.type) if args.type else settings.encoding


def _load_input_bytes(args: argparse.Namespace) -> bytes:
    if args.in_file:
        raw = Path(args.in_file).read_bytes()
        if args.input_format == "utf8":
            return raw
        return load_bytes(raw.decode("ascii", errors="replace"), args.input_format)
    if args.text is None:
        raise ValueError("Provide input text or --in-file.")
    return load_bytes(args.text, args.input_format)


def _load_input_text(args: argparse.Namespace) -> str:
    if args.in_file:
        return Path(args.in_file).read_text(encoding="utf-8")
    if args.text is None:
        raise ValueError("Provide input text or --in-file.")
    return args.text


def _maybe_write_output(args: argparse.Namespace, output: Union[str, bytes]) -> Optional[str]:
    out_file = getattr(args, "out_file", None)
    if out_file:
        if isinstance(output, bytes):
            Path(out_file).write_bytes(output)
        else:
            Path(out_file).write_text(output, encoding="utf-8")
        return None
    if isinstance(output, bytes):
        sys.stdout.buffer.write(output)
        sys.stdout.buffer.flush()
        return None
    return output


def _run_encode(args: argparse.Namespace) -> Optional[str]:
    encoding = _encoding_from_args(args)
    text = encode(_load_input_bytes(args), encoding).string
    if not args.out_file:
        # print() adds the final newline of uuencode output back
        text = text.rstrip("\n")
    return _maybe_write_output(args, text)


def _run_decode(args: argparse.Namespace) -> Optional[str]:
    encoding = _encoding_from_args(args)
    data = decode_text(_load_input_text(args), encoding, size=args.size)
    if args.output_format == "raw":
        return _maybe_write_output(args, data)
    settings: Settings = args.settings
    return _maybe_write_output(args, dump_bytes(data, args.output_format, settings.text_encoding or None))


def _run_auto(args: argparse.Namespace) -> str:
    settings: Settings = args.settings
    results = auto_decode(args.text)
    if not results:
        return "No encoding matched."
    lines = []
    for name, data in results:
        rendered = dump_bytes(data, args.output_format, settings.text_encoding or None)
        lines.append(f"{name}: {rendered}")
    return "\n".join(lines)


def _run_config(args: argparse.Namespace) -> str:
    settings: Settings = args.settings
    changed = False
    if args.history is not None:
        settings.history = args.history == "on"
        changed = True
    for field_name in ["history_path", "text_encoding", "default_encoding"]:
        value = getattr(args, field_name)
        if value is not None:
            setattr(settings, field_name, value)
            changed = True
    if changed:
        save_settings(settings, Path(args.config))

    lines = [
        f"config file: {args.config}",
        f"history: {'on' if settings.history else 'off'}",
        f"history_path: {resolve_history_path(settings)}",
        f"text_encoding: {settings.text_encoding or '[auto]'}",
        f"default_encoding: {settings.encoding.value}",
    ]
    if changed:
        lines.append("Settings saved.")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytecodecs",
        description="Encode and decode bytes as base36/base58/base64 numbers, hex or uuencode text.",
    )
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument("--config", default=str(CONFIG_PATH), help="Settings file to use.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode bytes to text")
    encode_parser.add_argument("-t", "--type", choices=ENCODING_CHOICES, help="Encoding (default from settings).")
    encode_parser.add_argument("text", nargs="?", help="Input text (ignored if --in-file).")
    encode_parser.add_argument("--in-file", help="Read raw input bytes from file.")
    encode_parser.add_argument("--input-format", choices=DATA_FORMATS, default="utf8")
    encode_parser.add_argument("--out-file", help="Write result to file.")
    encode_parser.set_defaults(func=_run_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode text to bytes")
    decode_parser.add_argument("-t", "--type", choices=ENCODING_CHOICES, help="Encoding (default from settings).")
    decode_parser.add_argument("text", nargs="?", help="Encoded text (ignored if --in-file).")
    decode_parser.add_argument("--in-file", help="Read encoded text from file.")
    decode_parser.add_argument(
        "--size",
        type=int,
        default=0,
        help="Left-pad the result to exactly this many bytes (base36/base58/base64 only).",
    )
    decode_parser.add_argument("--output-format", choices=DATA_FORMATS + ["raw"], default="utf8")
    decode_parser.add_argument("--out-file", help="Write result to file.")
    decode_parser.set_defaults(func=_run_decode)

    auto_parser = subparsers.add_parser("auto", help="Try every encoding on the input")
    auto_parser.add_argument("text", help="Input text to probe.")
    auto_parser.add_argument("--output-format", choices=DATA_FORMATS, default="hex")
    auto_parser.set_defaults(func=_run_auto)

    config_parser = subparsers.add_parser("config", help="Show or update settings")
    config_parser.add_argument("--history", choices=["on", "off"], help="Record operations in history.")
    config_parser.add_argument("--history-path", dest="history_path", help="History file location.")
    config_parser.add_argument("--text-encoding", dest="text_encoding", help="Preferred text encoding for decoded output.")
    config_parser.add_argument("--default-encoding", dest="default_encoding", choices=ENCODING_CHOICES)
    config_parser.set_defaults(func=_run_config)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.settings = load_settings(Path(args.config))
    try:
        result = args.func(args)
    except (ValueError, OSError) as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")
    if result is not None:
        print(result)
    if args.no_history or not args.settings.history or args.command == "config":
        return
    log_event(
        action=args.command,
        payload={
            "type": _encoding_from_args(args).value if args.command in ("encode", "decode") else None,
            "input": getattr(args, "text", None),
            "in_file": getattr(args, "in_file", None),
            "out_file": getattr(args, "out_file", None),
        },
        path=resolve_history_path(args.settings),
    )


if __name__ == "__main__":
    main()
