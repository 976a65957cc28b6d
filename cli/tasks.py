"""Developer tasks: test suites and ruff."""

import argparse
import subprocess
import sys

TEST_SUITES = {
    "unit": "tests/unit",
    "smoke": "tests/smoke",
    "all": "tests/",
}
SOURCE_DIRS = ["stellar_explain/", "cli/", "tests/"]


def _module(*args: str) -> int:
    return subprocess.run([sys.executable, "-m", *args], check=False).returncode


def suite_command(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="stellar-explain-test")
    parser.add_argument("suite", nargs="?", choices=sorted(TEST_SUITES), default="unit")
    parser.add_argument("-k", dest="keyword", help="only run tests matching this expression")
    args, extra = parser.parse_known_args(argv)

    command = ["pytest", TEST_SUITES[args.suite], "-v", "--tb=short"]
    if args.keyword:
        command += ["-k", args.keyword]
    return _module(*command, *extra)


def lint_command(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="stellar-explain-lint")
    parser.add_argument("--fix", action="store_true", help="apply safe fixes, then format")
    args = parser.parse_args(argv)

    if not args.fix:
        return _module("ruff", "check", *SOURCE_DIRS)
    status = _module("ruff", "check", "--fix", *SOURCE_DIRS)
    return status or _module("ruff", "format", *SOURCE_DIRS)


def run_tests() -> None:
    sys.exit(suite_command())


def lint() -> None:
    sys.exit(lint_command())
