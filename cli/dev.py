"""Dev server launcher."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    """Run the dev server, optionally against another Stellar network."""
    parser = argparse.ArgumentParser(prog="stellar-explain-dev")
    parser.add_argument("--network", choices=["public", "testnet"])
    parser.add_argument("--horizon-url", help="override the Horizon base URL")
    args = parser.parse_args(argv)

    # Settings are read from the environment, and the reloader re-imports the app.
    if args.network:
        os.environ["HORIZON_NETWORK"] = args.network
    if args.horizon_url:
        os.environ["HORIZON_BASE_URL"] = args.horizon_url

    from stellar_explain.core.config import reload_settings
    from stellar_explain.main import run

    reload_settings()
    run()


if __name__ == "__main__":
    main()
