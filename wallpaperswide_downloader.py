from __future__ import annotations

from pathlib import Path

from wallpaperswide import download_pages, parse_args, resolve_page_range, validate_args
from wallpaperswide.ui import ConsoleUI


def main() -> None:
    args = parse_args()
    validate_args(args)
    page_range = resolve_page_range(args)

    output_dir = Path.cwd() / args.output
    ui = ConsoleUI()

    try:
        download_pages(
            page_range=page_range,
            output_directory=output_dir,
            delay=args.delay,
            ui=ui,
        )
    except KeyboardInterrupt:
        ui.log_event("Download interrupted by user.", level="error")
        raise SystemExit("Download interrupted by user.")
    except Exception as exc:
        ui.log_event(f"Error: {exc}", level="error")
        raise SystemExit(str(exc)) from None
    finally:
        ui.finalize()


if __name__ == "__main__":
    main()
