"""Command-line entry point: ``python -m modedit`` or ``modedit``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from modedit.config import EditorConfig
from modedit.editor import Editor
from modedit.errors import TerminalInitError, TerminalIOError
from modedit.runtime import telemetry
from modedit.terminal import TerminalBackend

EXIT_OK = 0
EXIT_INIT_FAILED = 1
EXIT_IO_FAILED = 2


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="modedit", description="Minimal modal terminal editor."
    )
    parser.add_argument(
        "--status-text",
        default=None,
        help="Text shown on the status line (env: MODEDIT_STATUS_TEXT)",
    )
    parser.add_argument(
        "--esc-delay",
        type=float,
        default=None,
        help="Seconds to wait before treating ESC as a bare key (default: 0.35)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "performance"),
        default=None,
        help="telelog preset (env: MODEDIT_LOG_PRESET)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (env: MODEDIT_LOG_FILE)",
    )
    return parser.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    terminal: Optional[TerminalBackend] = None,
) -> int:
    args = _parse_args(argv)
    config = EditorConfig.from_env().override(
        status_text=args.status_text,
        esc_delay=args.esc_delay,
        log_preset=args.log_preset,
        log_file=args.log_file,
    )
    if config.log_preset or config.log_file:
        telemetry.configure(preset=config.log_preset, log_file=config.log_file)

    try:
        with Editor(config, terminal=terminal) as editor:
            editor.run()
    except TerminalInitError as exc:
        telemetry.record_event(
            "editor.init_failed", level="error", data={"step": exc.step}
        )
        print(f"modedit: {exc}", file=sys.stderr)
        return EXIT_INIT_FAILED
    except TerminalIOError as exc:
        telemetry.record_event(
            "editor.io_failed", level="error", data={"operation": exc.operation}
        )
        print(f"modedit: {exc}", file=sys.stderr)
        return EXIT_IO_FAILED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - manual entry point
    sys.exit(main())
