from call_guard.cli_base import main


if __name__ == "__main__":
    raise SystemExit(main())
